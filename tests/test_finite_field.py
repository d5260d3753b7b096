"""Tests for prime-field arithmetic and FieldParams."""

import random

import pytest

from finite_field import (
    FieldParams,
    add_mod,
    div_mod,
    is_probable_prime,
    mul_mod,
    pow_mod,
    sub_mod,
)
from params import BLS_MODULUS


def test_add_wraps():
    assert add_mod(16, 5, 17) == 4
    assert add_mod(BLS_MODULUS - 1, 1, BLS_MODULUS) == 0


def test_sub_no_underflow():
    assert sub_mod(3, 5, 17) == 15
    assert sub_mod(5, 3, 17) == 2
    assert sub_mod(0, BLS_MODULUS - 1, BLS_MODULUS) == 1


def test_sub_matches_signed_reduction():
    rng = random.Random(0)
    p = BLS_MODULUS
    for _ in range(200):
        a = rng.randrange(0, p)
        b = rng.randrange(0, p)
        assert sub_mod(a, b, p) == (a - b) % p
        assert sub_mod(b, a, p) == (b - a) % p
        assert 0 <= sub_mod(a, b, p) < p


def test_sub_equal_operands():
    assert sub_mod(7, 7, 17) == 0


def test_mul_and_pow():
    assert mul_mod(6, 7, 17) == 42 % 17
    assert pow_mod(3, 16, 17) == 1
    assert pow_mod(2, 0, 17) == 1


def test_div_mod_inverts_multiplication():
    rng = random.Random(1)
    p = BLS_MODULUS
    for _ in range(100):
        a = rng.randrange(0, p)
        b = rng.randrange(1, p)
        x = div_mod(a, b, p)
        assert 0 <= x < p
        assert x * b % p == a


def test_div_mod_unreduced_numerator():
    # a + b may exceed p before division
    p = 17
    assert div_mod(16 + 16, 2, p) == 16


def test_div_mod_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_mod(3, 0, 17)
    with pytest.raises(ZeroDivisionError):
        div_mod(3, 34, 17)


def test_is_probable_prime():
    assert is_probable_prime(2)
    assert is_probable_prime(5)
    assert is_probable_prime(97)
    assert is_probable_prime(BLS_MODULUS)
    assert not is_probable_prime(1)
    assert not is_probable_prime(91)
    assert not is_probable_prime(561)  # Carmichael
    assert not is_probable_prime(BLS_MODULUS * 1000003)


def test_field_params_accepts_valid_subgroup():
    params = FieldParams(17, 3, 16)
    assert params.log_length == 4
    assert params.as_tuple() == (17, 3, 16)


def test_field_params_rejects_bad_values():
    with pytest.raises(ValueError):
        FieldParams(15, 2, 2)       # not prime
    with pytest.raises(ValueError):
        FieldParams(17, 3, 12)      # not a power of two
    with pytest.raises(ValueError):
        FieldParams(17, 9, 16)      # order 8, not 16
    with pytest.raises(ValueError):
        FieldParams(17, 2, 4)       # 2^4 != 1 mod 17
    with pytest.raises(ValueError):
        FieldParams(17, 0, 1)


def test_field_params_immutable_and_hashable():
    params = FieldParams(5, 4, 2)
    with pytest.raises(AttributeError):
        params.modulus = 7
    assert params == FieldParams(5, 4, 2)
    assert hash(params) == hash(FieldParams(5, 4, 2))
    assert params != FieldParams(17, 3, 16)
