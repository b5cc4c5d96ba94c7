"""Reed-Solomon decoding over GF(2^8), with and without known erasures."""

from __future__ import annotations

from collections.abc import Sequence

from rsfec.locator import (
    factorize_error_locator,
    find_error_locations,
    find_error_locator,
    find_error_roots_from_locations,
    find_error_values,
    find_syndromes,
)
from rsfec.polynomial import (
    FIELD_SIZE,
    GROUP_ORDER,
    Field,
    build_exp_lut,
    poly_from_roots,
    poly_mul,
)

BLOCK_LENGTH = GROUP_ORDER


class DecodeError(ValueError):
    """Raised when a block cannot be decoded."""


class Decoder:
    """Decoder for a Reed-Solomon code with the given generator roots.

    The lookup tables of successive powers needed for syndromes and Chien
    search are computed once, when the decoder is built.
    """

    def __init__(
        self,
        field: Field,
        generator_roots: Sequence[int],
        first_consecutive_root: int,
        generator_root_gap: int,
    ) -> None:
        if not generator_roots:
            raise ValueError("a Reed-Solomon code needs at least one generator root")
        if len(generator_roots) >= BLOCK_LENGTH:
            raise ValueError(f"too many generator roots: {len(generator_roots)}")
        self.field = field
        self.generator_roots = tuple(generator_roots)
        self.first_consecutive_root = first_consecutive_root
        self.generator_root_gap = generator_root_gap
        self.min_distance = len(self.generator_roots)
        self.block_length = BLOCK_LENGTH
        self._generator_root_exp = [
            build_exp_lut(field, root, BLOCK_LENGTH - 1) for root in self.generator_roots
        ]
        self._element_exp = [
            build_exp_lut(field, element, self.min_distance - 1)
            for element in range(FIELD_SIZE)
        ]

    def __repr__(self) -> str:
        return (
            f"Decoder({self.field!r}, min_distance={self.min_distance}, "
            f"first_consecutive_root={self.first_consecutive_root}, "
            f"generator_root_gap={self.generator_root_gap})"
        )

    def _receive(self, data: bytes) -> list[int]:
        """Check the block length and return the received polynomial, low order first."""
        if len(data) > self.block_length:
            raise DecodeError(
                f"block of {len(data)} bytes is longer than {self.block_length}"
            )
        if len(data) < self.min_distance:
            raise DecodeError(
                f"block of {len(data)} bytes is shorter than its {self.min_distance} parity bytes"
            )
        pad_length = self.block_length - len(data)
        return list(reversed(data)) + [0] * pad_length

    def _message(self, received: Sequence[int], encoded_length: int) -> bytes:
        return bytes(reversed(received[self.min_distance:encoded_length]))

    def _locator_roots(self, locator: Sequence[int]) -> list[int]:
        locator_log = [self.field.log[coeff] for coeff in locator]
        roots = factorize_error_locator(self.field, locator_log, self._element_exp)
        if len(roots) != len(locator) - 1:
            raise DecodeError("too many errors to correct")
        return roots

    def _correct(
        self,
        received: list[int],
        locator: Sequence[int],
        syndromes: Sequence[int],
        roots: Sequence[int],
    ) -> None:
        try:
            locations = find_error_locations(self.field, self.generator_root_gap, roots)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        values = find_error_values(
            self.field,
            locator,
            syndromes,
            roots,
            self._element_exp,
            self.first_consecutive_root,
        )
        for location, value in zip(locations, values):
            received[location] ^= value

    def decode(self, encoded: Sequence[int]) -> bytes:
        """Correct errors in a (possibly shortened) block and return its message."""
        data = bytes(encoded)
        received = self._receive(data)
        syndromes = find_syndromes(self.field, received, self._generator_root_exp)
        if not any(syndromes):
            return self._message(received, len(data))

        locator = find_error_locator(self.field, syndromes)
        roots = self._locator_roots(locator)
        self._correct(received, locator, syndromes, roots)
        return self._message(received, len(data))

    def decode_with_erasures(
        self, encoded: Sequence[int], erasure_locations: Sequence[int]
    ) -> bytes:
        """Decode a block given the byte positions known to be unreliable."""
        if not erasure_locations:
            return self.decode(encoded)

        data = bytes(encoded)
        received = self._receive(data)
        if len(erasure_locations) > self.min_distance:
            raise DecodeError(
                f"{len(erasure_locations)} erasures exceed the {self.min_distance} parity bytes"
            )
        for position in erasure_locations:
            if not 0 <= position < len(data):
                raise DecodeError(f"erasure position {position} is outside the block")

        pad_length = self.block_length - len(data)
        positions = [
            self.block_length - (position + pad_length + 1) for position in erasure_locations
        ]
        erasure_roots = find_error_roots_from_locations(
            self.field, self.generator_root_gap, positions
        )
        erasure_locator = poly_from_roots(self.field, erasure_roots)

        syndromes = find_syndromes(self.field, received, self._generator_root_exp)
        if not any(syndromes):
            return self._message(received, len(data))

        num_erasures = len(erasure_locations)
        modified = poly_mul(self.field, erasure_locator, syndromes, self.min_distance - 1)
        error_locator = find_error_locator(self.field, modified[num_erasures:])
        error_roots = self._locator_roots(error_locator)

        combined = poly_mul(self.field, erasure_locator, error_locator)
        self._correct(received, combined, syndromes, erasure_roots + error_roots)
        return self._message(received, len(data))