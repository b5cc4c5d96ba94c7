"""The error-locating steps of Reed-Solomon decoding.

Syndromes, Berlekamp-Massey, Chien search and Forney's algorithm, each as a
function on plain coefficient lists.
"""

from __future__ import annotations

from collections.abc import Sequence

from rsfec.polynomial import (
    Field,
    formal_derivative,
    poly_eval_log_lut,
    poly_eval_lut,
    poly_mul,
)


def find_syndromes(
    field: Field, received: Sequence[int], generator_root_exp: Sequence[Sequence[int]]
) -> list[int]:
    """Evaluate the received polynomial at every generator root.

    ``generator_root_exp`` holds, per root, the logarithms of its successive
    powers. All syndromes are zero exactly when no error is detected.
    """
    return [poly_eval_lut(field, received, powers) for powers in generator_root_exp]


def find_error_locator(
    field: Field, syndromes: Sequence[int], num_erasures: int = 0
) -> list[int]:
    """Run Berlekamp-Massey and return the error locator polynomial.

    Only the first ``len(syndromes) - num_erasures`` syndromes are used. The
    order of the result is the number of errors found.
    """
    min_distance = len(syndromes)
    size = 2 * min_distance + 2
    locator = [0] * size
    locator[0] = 1
    order = 0
    last = list(locator)
    last_order = 0
    last_discrepancy = 1
    delay = 1
    num_errors = 0

    for i in range(min_distance - num_erasures):
        discrepancy = syndromes[i]
        for j in range(1, num_errors + 1):
            discrepancy ^= field.mul(locator[j], syndromes[i - j])

        if not discrepancy:
            delay += 1
            continue

        if 2 * num_errors <= i:
            # lengthen the LFSR by one tap
            shifted = [0] * size
            for j in range(last_order + 1):
                shifted[j + delay] = field.div(field.mul(last[j], discrepancy), last_discrepancy)
            previous, previous_order = locator, order
            locator = [a ^ b for a, b in zip(locator, shifted)]
            order = last_order + delay
            last, last_order = previous, previous_order
            num_errors = i + 1 - num_errors
            last_discrepancy = discrepancy
            delay = 1
            continue

        for j in range(last_order + 1):
            locator[j + delay] ^= field.div(field.mul(last[j], discrepancy), last_discrepancy)
        order = max(order, last_order + delay)
        delay += 1

    return locator[: order + 1]


def factorize_error_locator(
    field: Field, locator_log: Sequence[int], element_exp: Sequence[Sequence[int]]
) -> list[int]:
    """Find every root of a locator given in logarithm form, by Chien search.

    Returns the roots in increasing order. Fewer roots than the locator's order
    means there were too many errors to correct.
    """
    return [
        element
        for element, powers in enumerate(element_exp)
        if not poly_eval_log_lut(field, locator_log, powers)
    ]


def find_error_evaluator(
    field: Field, locator: Sequence[int], syndromes: Sequence[int], order: int
) -> list[int]:
    """Return the error evaluator, locator * syndromes modulo ``x**(order + 1)``."""
    return poly_mul(field, locator, syndromes, order)


def find_error_values(
    field: Field,
    locator: Sequence[int],
    syndromes: Sequence[int],
    error_roots: Sequence[int],
    element_exp: Sequence[Sequence[int]],
    first_consecutive_root: int,
) -> list[int]:
    """Compute the error magnitude at each root by Forney's algorithm."""
    evaluator = find_error_evaluator(field, locator, syndromes, len(syndromes) - 1)
    derivative = formal_derivative(field, locator)
    values = []
    for root in error_roots:
        if root == 0:
            values.append(0)
            continue
        powers = element_exp[root]
        quotient = field.div(
            poly_eval_lut(field, evaluator, powers),
            poly_eval_lut(field, derivative, powers),
        )
        values.append(field.mul(field.pow(root, first_consecutive_root - 1), quotient))
    return values


def find_error_locations(
    field: Field, generator_root_gap: int, error_roots: Sequence[int]
) -> list[int]:
    """Turn error roots into coefficient positions (0..254)."""
    locations = []
    for root in error_roots:
        if root == 0:
            raise ValueError("zero is not a valid error root")
        target = field.div(1, root)
        for candidate in range(1, 256):
            if field.pow(candidate, generator_root_gap) == target:
                # log(1) is stored as 255, which aliases position 0
                locations.append(field.log[candidate] % 255)
                break
        else:
            raise ValueError(f"no position matches error root {root}")
    return locations


def find_error_roots_from_locations(
    field: Field, generator_root_gap: int, error_locations: Sequence[int]
) -> list[int]:
    """Turn coefficient positions into error roots; the inverse of find_error_locations."""
    return [
        field.div(1, field.pow(field.exp[location], generator_root_gap))
        for location in error_locations
    ]