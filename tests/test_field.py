import random

import pytest
from hypothesis import given, strategies as st

from plonkup.field import (
    K1,
    K2,
    K3,
    MODULUS,
    ROOT_OF_UNITY,
    TWO_ADICITY,
    DomainSizeError,
    EvaluationDomain,
    Polynomial,
    Scalar,
)

field_ints = st.integers(min_value=0, max_value=MODULUS - 1)
nonzero_ints = st.integers(min_value=1, max_value=MODULUS - 1)


@given(field_ints, field_ints)
def test_add_then_sub_round_trip(a, b):
    x, y = Scalar(a), Scalar(b)
    assert (x + y) - y == x


@given(field_ints)
def test_negation_is_additive_inverse(a):
    x = Scalar(a)
    assert x + (-x) == Scalar.zero()


@given(nonzero_ints)
def test_invert_is_multiplicative_inverse(a):
    x = Scalar(a)
    assert x * x.invert() == Scalar.one()


def test_invert_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Scalar.zero().invert()


def test_negative_int_wraps_modulus():
    assert Scalar(-1) == Scalar(MODULUS - 1)
    assert int(Scalar(MODULUS)) == 0


@given(field_ints)
def test_square_and_pow(a):
    x = Scalar(a)
    assert x.square() == x * x
    assert x.pow(3) == x * x * x
    assert x.pow(0) == Scalar.one()


@given(field_ints, field_ints)
def test_xor_invariants(a, b):
    x, y = Scalar(a), Scalar(b)
    assert x ^ x == Scalar.zero()
    assert x ^ Scalar.zero() == x
    assert x ^ y == y ^ x


def test_int_conversion():
    assert int(Scalar(5)) == 5
    assert int(K1) == 7 and int(K2) == 13 and int(K3) == 17


def test_mixed_int_arithmetic():
    x = Scalar(10)
    assert x + 5 == Scalar(15)
    assert 3 * x == Scalar(30)
    assert 1 - x == -Scalar(9)


@given(field_ints)
def test_bytes_round_trip(a):
    x = Scalar(a)
    encoded = x.to_bytes()
    assert len(encoded) == 32
    assert Scalar.from_bytes(encoded) == x


def test_from_bytes_rejects_non_canonical():
    with pytest.raises(ValueError):
        Scalar.from_bytes(MODULUS.to_bytes(32, "little"))


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Scalar.from_bytes(b"\x01" * 31)


def test_hex_format_is_little_endian():
    assert format(Scalar.one(), "#x") == "0x01" + "00" * 31


@given(field_ints)
def test_hex_format_matches_bytes(a):
    x = Scalar(a)
    assert format(x, "#x") == "0x" + x.to_bytes().hex()
    assert format(x, "x") == x.to_bytes().hex()


def test_random_is_deterministic_for_seeded_rng():
    a = Scalar.random(random.Random(42))
    b = Scalar.random(random.Random(42))
    assert a == b
    assert 0 <= int(a) < MODULUS


def test_hash_consistent_with_equality():
    values = {Scalar(3), Scalar(3 + MODULUS), Scalar(4)}
    assert len(values) == 2


def test_root_of_unity_order():
    assert ROOT_OF_UNITY.pow(1 << TWO_ADICITY) == Scalar.one()
    assert ROOT_OF_UNITY.pow(1 << (TWO_ADICITY - 1)) == -Scalar.one()


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 16, 100])
def test_domain_size_is_next_power_of_two(n):
    domain = EvaluationDomain(n)
    size = domain.size
    assert size & (size - 1) == 0
    assert size >= n
    assert size // 2 < n or size == 1


def test_domain_too_large_raises():
    with pytest.raises(DomainSizeError):
        EvaluationDomain((1 << TWO_ADICITY) + 1)


@pytest.mark.parametrize("n", [2, 4, 8, 16])
def test_group_gen_is_primitive(n):
    domain = EvaluationDomain(n)
    assert domain.group_gen.pow(n) == Scalar.one()
    assert domain.group_gen.pow(n // 2) == -Scalar.one()
    assert domain.group_gen * domain.group_gen_inv == Scalar.one()
    assert domain.size_inv * domain.size == Scalar.one()


def test_elements_are_distinct_powers():
    domain = EvaluationDomain(8)
    points = list(domain.elements())
    assert len(points) == 8
    assert len(set(points)) == 8
    assert points[0] == Scalar.one()
    assert points[3] == domain.group_gen.pow(3)


@given(st.lists(field_ints, min_size=1, max_size=8))
def test_fft_ifft_round_trip(values):
    domain = EvaluationDomain(len(values))
    evals = [Scalar(v) for v in values]
    padded = evals + [Scalar.zero()] * (domain.size - len(evals))
    assert domain.fft(domain.ifft(evals)) == padded


@given(st.lists(field_ints, min_size=1, max_size=8))
def test_fft_matches_evaluation(coeffs):
    domain = EvaluationDomain(len(coeffs))
    poly = Polynomial(coeffs)
    expected = [poly.evaluate(x) for x in domain.elements()]
    assert domain.fft(coeffs) == expected
    assert domain.fft(poly) == expected


def test_polynomial_truncates_leading_zeros():
    poly = Polynomial([1, 2, 0, 0])
    assert poly.degree() == 1
    assert len(poly) == 2
    assert poly == Polynomial([Scalar(1), Scalar(2)])


def test_zero_polynomial():
    poly = Polynomial([0, 0, 0])
    assert poly.is_zero()
    assert poly.degree() == 0
    assert poly.evaluate(Scalar(9)) == Scalar.zero()


@given(st.lists(field_ints, min_size=1, max_size=10))
def test_evaluate_at_one_is_coefficient_sum(coeffs):
    poly = Polynomial(coeffs)
    total = Scalar.zero()
    for c in coeffs:
        total = total + Scalar(c)
    assert poly.evaluate(Scalar.one()) == total
    assert poly.evaluate(Scalar.zero()) == Scalar(coeffs[0])


@given(st.lists(field_ints, max_size=6), st.lists(field_ints, max_size=6), field_ints)
def test_polynomial_addition_is_pointwise(a, b, x):
    pa, pb = Polynomial(a), Polynomial(b)
    point = Scalar(x)
    assert (pa + pb).evaluate(point) == pa.evaluate(point) + pb.evaluate(point)
    assert (pa - pa).is_zero()


@given(st.lists(field_ints, max_size=6), field_ints, field_ints)
def test_polynomial_scaling(coeffs, factor, x):
    poly = Polynomial(coeffs)
    point = Scalar(x)
    assert (poly * Scalar(factor)).evaluate(point) == poly.evaluate(point) * Scalar(factor)


def test_interpolated_polynomial_degree():
    domain = EvaluationDomain(8)
    poly = Polynomial(domain.ifft([Scalar(i + 1) for i in range(7)]))
    assert poly.degree() == 7
    for i, x in enumerate(domain.elements()):
        expected = Scalar(i + 1) if i < 7 else Scalar.zero()
        assert poly.evaluate(x) == expected