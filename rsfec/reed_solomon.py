"""Systematic Reed-Solomon codes over GF(2^8) with 255-byte blocks."""

from __future__ import annotations

from collections.abc import Sequence

from rsfec.decode import BLOCK_LENGTH, Decoder
from rsfec.polynomial import GROUP_ORDER, Field, poly_from_roots, poly_mod


class ReedSolomon:
    """A Reed-Solomon code with ``num_roots`` parity bytes per block.

    Messages shorter than ``message_length`` are treated as shortened blocks:
    they are zero-padded at the front for the arithmetic, but the padding is
    never transmitted.
    """

    def __init__(
        self,
        primitive_polynomial: int,
        first_consecutive_root: int,
        generator_root_gap: int,
        num_roots: int,
    ) -> None:
        if not 0 < num_roots < BLOCK_LENGTH:
            raise ValueError(f"number of roots must be in 1..{BLOCK_LENGTH - 1}, got {num_roots}")
        self.field = Field(primitive_polynomial)
        self.block_length = BLOCK_LENGTH
        self.min_distance = num_roots
        self.message_length = self.block_length - self.min_distance
        self.first_consecutive_root = first_consecutive_root
        self.generator_root_gap = generator_root_gap
        self.generator_roots: tuple[int, ...] = tuple(
            self.field.exp[(generator_root_gap * (i + first_consecutive_root)) % GROUP_ORDER]
            for i in range(num_roots)
        )
        self.generator: list[int] = poly_from_roots(self.field, self.generator_roots)
        self._decoder: Decoder | None = None
        self._last_remainder: list[int] | None = None

    def __repr__(self) -> str:
        return (
            f"ReedSolomon({self.field.primitive_polynomial:#x}, "
            f"{self.first_consecutive_root}, {self.generator_root_gap}, {self.min_distance})"
        )

    @property
    def decoder(self) -> Decoder:
        """The decoder for this code, built on first use."""
        if self._decoder is None:
            self._decoder = Decoder(
                self.field,
                self.generator_roots,
                self.first_consecutive_root,
                self.generator_root_gap,
            )
        return self._decoder

    def encode(self, msg: Sequence[int]) -> bytes:
        """Return ``msg`` followed by its ``min_distance`` parity bytes."""
        data = bytes(msg)
        if len(data) > self.message_length:
            raise ValueError(
                f"message of {len(data)} bytes is longer than {self.message_length}"
            )
        pad_length = self.message_length - len(data)
        # coefficients run from low order to high, so the message goes in reversed
        polynomial = [0] * self.min_distance + list(reversed(data)) + [0] * pad_length
        remainder = poly_mod(self.field, polynomial, self.generator)
        self._last_remainder = remainder[: self.min_distance]
        return data + bytes(reversed(self._last_remainder))

    def decode(
        self, encoded: Sequence[int], erasure_locations: Sequence[int] | None = None
    ) -> bytes:
        """Correct a received block and return its message bytes.

        ``erasure_locations`` are byte positions within ``encoded`` known to be
        unreliable. Raises DecodeError when the block cannot be corrected.
        """
        if erasure_locations:
            return self.decoder.decode_with_erasures(encoded, erasure_locations)
        return self.decoder.decode(encoded)

    def describe(self) -> str:
        """Return a readable dump of the field tables, generator and last parity."""
        field = self.field
        lines = [
            f"{i:3d}  {field.exp[i]:3d}    {i:3d}  {field.log[i]:3d}" for i in range(256)
        ]
        lines.append("")
        lines.append("roots: " + ", ".join(str(root) for root in self.generator_roots))
        lines.append("")
        lines.append(
            "generator: "
            + " + ".join(f"{coeff}*x^{power}" for power, coeff in enumerate(self.generator))
        )
        lines.append("")
        lines.append(
            "generator (alpha format): "
            + " + ".join(
                f"alpha^{field.log[self.generator[power]]}*x^{power}"
                for power in range(len(self.generator) - 1, -1, -1)
            )
        )
        if self._last_remainder is not None:
            lines.append("")
            lines.append(
                "remainder: "
                + " + ".join(
                    f"{coeff}*x^{power}"
                    for power, coeff in enumerate(self._last_remainder)
                    if coeff
                )
            )
        return "\n".join(lines) + "\n"