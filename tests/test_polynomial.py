import pytest
from hypothesis import given
from hypothesis import strategies as st

from rsfec.polynomial import (
    Field,
    build_exp_lut,
    formal_derivative,
    poly_eval,
    poly_eval_log_lut,
    poly_eval_lut,
    poly_from_roots,
    poly_mod,
    poly_mul,
)

FIELD = Field(0x11D)
CCSDS_LIKE = Field(0x187)

elements = st.integers(0, 255)
nonzero = st.integers(1, 255)
polys = st.lists(elements, min_size=1, max_size=10)


def test_log_of_one_aliases_to_255():
    assert FIELD.exp[255] == 1
    assert FIELD.log[1] == 255
    assert FIELD.exp[0] == 1


def test_first_reduction_uses_primitive_polynomial():
    assert FIELD.exp[8] == 0x1D


@pytest.mark.parametrize("field", [FIELD, CCSDS_LIKE])
def test_exp_covers_every_nonzero_element(field):
    assert sorted(field.exp[:255]) == list(range(1, 256))


@pytest.mark.parametrize("bad", [0, 0xFF, 0x200])
def test_field_rejects_wrong_degree(bad):
    with pytest.raises(ValueError):
        Field(bad)


@given(elements, elements)
def test_add_is_self_inverse(a, b):
    assert FIELD.add(FIELD.add(a, b), b) == a
    assert FIELD.sub(a, b) == FIELD.add(a, b)


@given(elements, elements, elements)
def test_mul_distributes_over_add(a, b, c):
    assert FIELD.mul(a, FIELD.add(b, c)) == FIELD.add(FIELD.mul(a, b), FIELD.mul(a, c))
    assert FIELD.mul(a, b) == FIELD.mul(b, a)


@given(elements, nonzero)
def test_div_undoes_mul(a, b):
    assert FIELD.div(FIELD.mul(a, b), b) == a


@given(elements)
def test_div_by_zero_yields_zero(a):
    assert FIELD.div(a, 0) == 0


@given(nonzero)
def test_pow_properties(a):
    assert FIELD.pow(a, 255) == 1
    assert FIELD.pow(a, 2) == FIELD.mul(a, a)
    assert FIELD.pow(a, -1) == FIELD.div(1, a)


@given(elements, st.integers(0, 50))
def test_sum(a, n):
    assert FIELD.sum(a, n) == (a if n % 2 else 0)


@given(nonzero, nonzero)
def test_log_helpers_agree_with_elements(a, b):
    la, lb = FIELD.log[a], FIELD.log[b]
    assert FIELD.exp[FIELD.mul_log(la, lb)] == FIELD.mul(a, b)
    assert FIELD.exp[FIELD.div_log(la, lb)] == FIELD.div(a, b)
    assert FIELD.mul_log_element(la, lb) == FIELD.mul(a, b)


@given(polys, polys)
def test_poly_mul_truncation_matches_full_product(a, b):
    full = poly_mul(FIELD, a, b)
    assert len(full) == len(a) + len(b) - 1
    for order in range(len(full)):
        assert poly_mul(FIELD, a, b, order) == full[: order + 1]


@given(polys, polys, elements)
def test_poly_mul_evaluates_to_product(a, b, x):
    product = poly_mul(FIELD, a, b)
    assert poly_eval(FIELD, product, x) == FIELD.mul(
        poly_eval(FIELD, a, x), poly_eval(FIELD, b, x)
    )


@given(
    st.lists(elements, min_size=1, max_size=6),
    nonzero,
    st.lists(elements, min_size=1, max_size=8),
    st.data(),
)
def test_poly_mod_recovers_remainder(low, leading, quotient, data):
    divisor = low + [leading]
    remainder = data.draw(st.lists(elements, min_size=len(low), max_size=len(low)))
    dividend = poly_mul(FIELD, quotient, divisor)
    for i, r in enumerate(remainder):
        dividend[i] ^= r
    result = poly_mod(FIELD, dividend, divisor)
    assert len(result) == len(dividend)
    assert result[: len(low)] == remainder
    assert all(c == 0 for c in result[len(low):])


def test_poly_mod_rejects_zero_leading_coefficient():
    with pytest.raises(ZeroDivisionError):
        poly_mod(FIELD, [1, 2, 3, 4], [5, 0])


@given(st.lists(elements, min_size=2, max_size=10))
def test_formal_derivative_keeps_odd_powers(poly):
    der = formal_derivative(FIELD, poly)
    assert len(der) == len(poly) - 1
    for i, coeff in enumerate(der):
        assert coeff == (poly[i + 1] if (i + 1) % 2 else 0)


@given(nonzero, nonzero)
def test_derivative_of_two_roots(a, b):
    poly = poly_from_roots(FIELD, [a, b])
    assert formal_derivative(FIELD, poly) == [FIELD.add(a, b), 0]


@given(polys)
def test_poly_eval_at_zero_is_constant_term(poly):
    assert poly_eval(FIELD, poly, 0) == poly[0]


@given(polys, elements)
def test_eval_lut_matches_direct_eval(poly, x):
    lut = build_exp_lut(FIELD, x, len(poly) - 1)
    assert len(lut) == len(poly)
    assert poly_eval_lut(FIELD, poly, lut) == poly_eval(FIELD, poly, x)


@given(polys, elements)
def test_eval_log_lut_matches_direct_eval(poly, x):
    lut = build_exp_lut(FIELD, x, len(poly) - 1)
    poly_log = [FIELD.log[c] for c in poly]
    assert poly_eval_log_lut(FIELD, poly_log, lut) == poly_eval(FIELD, poly, x)


def test_build_exp_lut_of_zero_is_all_zero():
    assert build_exp_lut(FIELD, 0, 4) == [0, 0, 0, 0, 0]


@given(nonzero)
def test_build_exp_lut_starts_at_log_one(x):
    lut = build_exp_lut(FIELD, x, 3)
    assert lut[0] == FIELD.log[1]
    assert FIELD.exp[lut[2]] == FIELD.mul(x, x)


@given(st.lists(elements, min_size=1, max_size=12, unique=True))
def test_poly_from_roots_vanishes_at_roots(roots):
    poly = poly_from_roots(FIELD, roots)
    assert len(poly) == len(roots) + 1
    assert poly[-1] == 1
    for root in roots:
        assert poly_eval(FIELD, poly, root) == 0


def test_poly_from_roots_generator_like():
    roots = [FIELD.exp[i] for i in range(1, 33)]
    poly = poly_from_roots(FIELD, roots)
    assert len(poly) == 33
    assert all(poly_eval(FIELD, poly, r) == 0 for r in roots)
    assert poly_eval(FIELD, poly, FIELD.exp[40]) != 0