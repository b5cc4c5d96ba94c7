"""Channel simulation for exercising codes: BPSK modulation and white noise."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable, Iterator, Sequence

SQRT_2 = math.sqrt(2.0)


def _bits(data: Sequence[int], n_bits: int) -> Iterator[int]:
    """Yield the first ``n_bits`` bits of ``data``, most significant bit first."""
    for i in range(n_bits):
        yield (data[i >> 3] >> (7 - (i & 7))) & 1


def bit_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the number of differing bits between two byte strings of equal length."""
    if len(a) != len(b):
        raise ValueError(f"lengths differ: {len(a)} and {len(b)}")
    return sum((x ^ y).bit_count() for x, y in zip(a, b))


def gaussian(n: int, sigma: float, rng: random.Random | None = None) -> list[float]:
    """Return ``n`` samples scaled by ``sigma`` using the polar Box-Muller method.

    Both uniform draws come from [0, 1), as in the channel model this mirrors.
    """
    rng = rng if rng is not None else random.Random()
    samples: list[float] = []
    while len(samples) < n:
        while True:
            u = rng.random()
            v = rng.random()
            s = u * u + v * v
            if sys.float_info.epsilon < s < 1:
                break
        base = math.sqrt((-2.0 * math.log(s)) / s)
        samples.append(u * base * sigma)
        if len(samples) < n:
            samples.append(v * base * sigma)
    return samples


def encode_bpsk(data: Sequence[int], n_syms: int, voltage: float) -> list[float]:
    """Map the first ``n_syms`` bits to +voltage (for 1) or -voltage (for 0)."""
    return [voltage if bit else -voltage for bit in _bits(data, n_syms)]


def byte_to_bits(data: Sequence[int], n_bits: int) -> bytes:
    """Expand bits into hard soft-decision symbols: 255 for 1, 0 for 0."""
    return bytes(255 if bit else 0 for bit in _bits(data, n_bits))


def decode_bpsk(soft: Sequence[int], n_syms: int) -> bytes:
    """Pack hard decisions on the first ``n_syms`` soft symbols back into bytes."""
    out = bytearray((n_syms + 7) // 8)
    for i, symbol in enumerate(soft[:n_syms]):
        if symbol > 127:
            out[i >> 3] |= 0x80 >> (i & 7)
    return bytes(out)


def decode_bpsk_soft(voltages: Sequence[float], voltage: float) -> bytes:
    """Quantise received voltages into soft symbols in 0..255."""

    def quantise(received: float) -> int:
        rel = received / voltage
        if rel > 1:
            return 255
        if rel < -1:
            return 0
        return int(127.5 + 127.5 * rel)

    return bytes(quantise(received) for received in voltages)


def db_to_amplitude(level: float) -> float:
    """Convert decibels to a power ratio."""
    return math.pow(10.0, level / 10.0)


def amplitude_to_db(amplitude: float) -> float:
    """Convert a power ratio to decibels."""
    return 10.0 * math.log10(amplitude)


def sigma_for_eb_n0(eb_n0: float, bit_energy: float) -> float:
    """Noise standard deviation giving the requested Eb/N0 (in dB)."""
    return math.sqrt(bit_energy / (2.0 * db_to_amplitude(eb_n0)))


def white_noise(
    n: int, eb_n0: float, bit_energy: float, rng: random.Random | None = None
) -> list[float]:
    """Return ``n`` noise samples for the given Eb/N0 and bit energy."""
    return gaussian(n, sigma_for_eb_n0(eb_n0, bit_energy), rng)


def add_white_noise(signal: Sequence[float], noise: Sequence[float]) -> list[float]:
    """Add the real part of complex noise magnitudes to a real signal."""
    if len(signal) != len(noise):
        raise ValueError(f"signal has {len(signal)} samples, noise has {len(noise)}")
    return [s + n / SQRT_2 for s, n in zip(signal, noise)]


def test_conv_noise(
    encode: Callable[[bytes], Sequence[int]],
    decode: Callable[[bytes], Sequence[int]],
    msg: bytes,
    noise: Sequence[float],
    voltage: float,
) -> int:
    """Send ``msg`` through a code and a noisy BPSK channel; return the bit errors.

    The number of channel symbols is the length of ``noise``.
    """
    encoded = encode(msg)
    clean = encode_bpsk(encoded, len(noise), voltage)
    soft = decode_bpsk_soft(add_white_noise(clean, noise), voltage)
    decoded = decode(soft)
    if len(decoded) != len(msg):
        raise ValueError(
            f"expected to decode {len(msg)} bytes, decoded {len(decoded)} bytes instead"
        )
    return bit_distance(msg, decoded)