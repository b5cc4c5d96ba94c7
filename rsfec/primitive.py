"""Search for primitive polynomials of GF(2^8)."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BLOCK_SIZE = 255
POWER_MAX = 8


def is_primitive(poly: int) -> bool:
    """Whether repeated doubling modulo ``poly`` visits every nonzero element."""
    if not BLOCK_SIZE < poly <= 2 * BLOCK_SIZE + 1:
        raise ValueError(f"polynomial must be of degree 8, got {poly:#x}")
    seen: set[int] = set()
    element = 1
    for _ in range(BLOCK_SIZE):
        element <<= 1
        if element > BLOCK_SIZE:
            element ^= poly
        if element in seen:
            return False
        seen.add(element)
    return True


def format_polynomial(poly: int) -> str:
    """Render a degree-8 polynomial as terms like ``x^8 + x^4 + 1``."""
    terms = []
    power = POWER_MAX
    mask = 2 * BLOCK_SIZE + 1
    while poly:
        if poly & (BLOCK_SIZE + 1):
            if power > 1:
                terms.append(f"x^{power}")
            elif power:
                terms.append("x")
            else:
                terms.append("1")
        power -= 1
        poly = (poly << 1) & mask
    return " + ".join(terms)


def find_primitive_polynomials() -> list[int]:
    """Return every primitive polynomial of degree 8, in increasing order."""
    return [
        poly
        for poly in range(BLOCK_SIZE + 1, (BLOCK_SIZE + 1) << 1)
        if is_primitive(poly)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print every primitive polynomial of GF(2^8)."""
    parser = argparse.ArgumentParser(
        prog="rs-find-primitive-poly",
        description="List the primitive polynomials usable for Reed-Solomon over GF(2^8).",
    )
    parser.parse_args(argv)
    for poly in find_primitive_polynomials():
        print(f"0x{poly:x} valid: {format_polynomial(poly)}")
    return 0