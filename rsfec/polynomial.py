"""Arithmetic in GF(2^8) and on polynomials whose coefficients live there.

Polynomials are plain lists of field elements ordered from the constant term
upwards, so ``poly[i]`` is the coefficient of ``x**i``.
"""

from __future__ import annotations

from collections.abc import Sequence

FIELD_SIZE = 256
GROUP_ORDER = 255


class Field:
    """The finite field GF(2^8) built from a primitive polynomial.

    ``exp`` holds successive powers of the generator (512 entries so that sums
    of two logarithms can be looked up without reduction) and ``log`` holds
    their logarithms. ``log[0]`` is meaningless and stored as 0; ``log[1]`` is
    255, since alpha^255 == 1.
    """

    __slots__ = ("primitive_polynomial", "exp", "log")

    def __init__(self, primitive_polynomial: int) -> None:
        if not FIELD_SIZE <= primitive_polynomial < 2 * FIELD_SIZE:
            raise ValueError(
                f"primitive polynomial must be of degree 8, got {primitive_polynomial:#x}"
            )
        self.primitive_polynomial = primitive_polynomial
        exp = [0] * (2 * FIELD_SIZE)
        log = [0] * FIELD_SIZE
        element = 1
        exp[0] = element
        for i in range(1, 2 * FIELD_SIZE):
            element <<= 1
            if element >= FIELD_SIZE:
                element ^= primitive_polynomial
            exp[i] = element
            if i < FIELD_SIZE:
                log[element] = i
        self.exp: tuple[int, ...] = tuple(exp)
        self.log: tuple[int, ...] = tuple(log)

    def __repr__(self) -> str:
        return f"Field({self.primitive_polynomial:#x})"

    @staticmethod
    def add(a: int, b: int) -> int:
        """Add two elements (XOR)."""
        return a ^ b

    @staticmethod
    def sub(a: int, b: int) -> int:
        """Subtract two elements, which in characteristic 2 is addition."""
        return a ^ b

    @staticmethod
    def sum(element: int, n: int) -> int:
        """Add ``element`` to itself ``n`` times."""
        return element if n % 2 else 0

    def mul(self, a: int, b: int) -> int:
        """Multiply two elements."""
        if a == 0 or b == 0:
            return 0
        return self.exp[self.log[a] + self.log[b]]

    def div(self, a: int, b: int) -> int:
        """Divide ``a`` by ``b``; division by zero yields 0."""
        if a == 0 or b == 0:
            return 0
        return self.exp[GROUP_ORDER + self.log[a] - self.log[b]]

    def pow(self, element: int, exponent: int) -> int:
        """Raise ``element`` to an integer power (negative powers allowed)."""
        return self.exp[(self.log[element] * exponent) % GROUP_ORDER]

    @staticmethod
    def mul_log(a_log: int, b_log: int) -> int:
        """Multiply two elements given as logarithms; the result is a logarithm."""
        res = a_log + b_log
        return res - GROUP_ORDER if res > GROUP_ORDER else res

    @staticmethod
    def div_log(a_log: int, b_log: int) -> int:
        """Divide two elements given as logarithms; the result is a logarithm."""
        res = GROUP_ORDER + a_log - b_log
        return res - GROUP_ORDER if res > GROUP_ORDER else res

    def mul_log_element(self, a_log: int, b_log: int) -> int:
        """Multiply two elements given as logarithms; the result is an element."""
        return self.exp[a_log + b_log]


def poly_mul(
    field: Field, left: Sequence[int], right: Sequence[int], order: int | None = None
) -> list[int]:
    """Multiply two polynomials, keeping terms up to ``x**order``.

    Without ``order`` the full product is returned; a smaller order gives the
    product modulo ``x**(order + 1)``.
    """
    if order is None:
        order = len(left) + len(right) - 2
    res = [0] * (order + 1)
    for i, lc in enumerate(left):
        if i > order:
            break
        if not lc:
            continue
        for j, rc in enumerate(right[: order - i + 1]):
            res[i + j] ^= field.mul(lc, rc)
    return res


def poly_mod(field: Field, dividend: Sequence[int], divisor: Sequence[int]) -> list[int]:
    """Return the remainder of long division, as a list as long as ``dividend``.

    Only the coefficients below the divisor's order are meaningful; the higher
    ones are cleared by the division.
    """
    divisor_order = len(divisor) - 1
    leading = divisor[divisor_order]
    if leading == 0:
        raise ZeroDivisionError("divisor has a zero leading coefficient")
    leading_log = field.log[leading]
    remainder = list(dividend)
    for i in range(len(remainder) - 1, 0, -1):
        if i < divisor_order:
            break
        if remainder[i] == 0:
            continue
        q_order = i - divisor_order
        q_log = field.div_log(field.log[remainder[i]], leading_log)
        for j, coeff in enumerate(divisor):
            if coeff:
                remainder[j + q_order] ^= field.mul_log_element(field.log[coeff], q_log)
    return remainder


def formal_derivative(field: Field, poly: Sequence[int]) -> list[int]:
    """Return the formal derivative, one order lower than ``poly``."""
    return [field.sum(coeff, power) for power, coeff in enumerate(poly) if power > 0]


def poly_eval(field: Field, poly: Sequence[int], val: int) -> int:
    """Evaluate ``poly`` at the element ``val``."""
    if val == 0:
        return poly[0]
    res = 0
    val_exponentiated = field.log[1]
    val_log = field.log[val]
    for coeff in poly:
        if coeff:
            res ^= field.mul_log_element(field.log[coeff], val_exponentiated)
        val_exponentiated = field.mul_log(val_exponentiated, val_log)
    return res


def poly_eval_lut(field: Field, poly: Sequence[int], val_exp: Sequence[int]) -> int:
    """Evaluate ``poly`` using precomputed logarithms of powers of the point."""
    if val_exp[0] == 0:
        return poly[0]
    res = 0
    for coeff, power_log in zip(poly, val_exp):
        if coeff:
            res ^= field.mul_log_element(field.log[coeff], power_log)
    return res


def poly_eval_log_lut(field: Field, poly_log: Sequence[int], val_exp: Sequence[int]) -> int:
    """Evaluate a polynomial whose coefficients are logarithms.

    A logarithm of 0 stands for a zero coefficient.
    """
    if val_exp[0] == 0:
        return field.exp[poly_log[0]] if poly_log[0] else 0
    res = 0
    for coeff_log, power_log in zip(poly_log, val_exp):
        if coeff_log:
            res ^= field.mul_log_element(coeff_log, power_log)
    return res


def build_exp_lut(field: Field, val: int, order: int) -> list[int]:
    """Return the logarithms of ``val**0 .. val**order`` (all zero for ``val == 0``)."""
    if val == 0:
        return [0] * (order + 1)
    table = []
    val_exponentiated = field.log[1]
    val_log = field.log[val]
    for _ in range(order + 1):
        table.append(val_exponentiated)
        val_exponentiated = field.mul_log(val_exponentiated, val_log)
    return table


def poly_from_roots(field: Field, roots: Sequence[int]) -> list[int]:
    """Return the monic polynomial ``(x + r0)(x + r1)...`` of the given roots."""
    result = [1]
    for root in roots:
        result = poly_mul(field, [root, 1], result)
    return result