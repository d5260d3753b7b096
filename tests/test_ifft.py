"""Tests for the recursive and iterative inverse transforms."""

import random

import pytest

from domain import evaluation_point_table
from ifft import InvalidLengthError, ifft, ifft_inplace
from params import BLOB_LEN, BLS_MODULUS, GENERATOR


def subgroup_generator(p, n):
    """Element of multiplicative order exactly n in GF(p)."""
    for c in range(2, p):
        g = pow(c, (p - 1) // n, p)
        if n == 1 or pow(g, n // 2, p) != 1:
            return g
    raise AssertionError("no generator found")


def evaluate(coeffs, x, p):
    acc = 0
    for c in reversed(coeffs):
        acc = (acc * x + c) % p
    return acc


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_base_case_returns_input(transform):
    assert transform([7], [3], 17) == [7]
    assert transform([0], [123], BLS_MODULUS) == [0]


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_constant_polynomial_small_field(transform):
    xs = evaluation_point_table(2, 4, 5)
    assert xs == [1, 4]
    assert transform([3, 3], xs, 5) == [3, 0]


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
@pytest.mark.parametrize("p,n", [(17, 16), (97, 32), (257, 64)])
def test_recovers_random_polynomial(transform, p, n):
    rng = random.Random(p * n)
    g = subgroup_generator(p, n)
    xs = evaluation_point_table(n, g, p)
    coeffs = [rng.randrange(0, p) for _ in range(n)]
    evals = [evaluate(coeffs, x, p) for x in xs]
    assert transform(evals, xs, p) == coeffs


def test_recursive_and_iterative_agree_on_bls_field():
    rng = random.Random(42)
    n = 128
    g = pow(GENERATOR, BLOB_LEN // n, BLS_MODULUS)
    xs = evaluation_point_table(n, g, BLS_MODULUS)
    evals = [rng.randrange(0, BLS_MODULUS) for _ in range(n)]
    out = ifft(evals, xs, BLS_MODULUS)
    assert out == ifft_inplace(evals, xs, BLS_MODULUS)
    assert len(out) == n
    assert all(0 <= c < BLS_MODULUS for c in out)
    assert [evaluate(out, x, BLS_MODULUS) for x in xs] == evals


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_does_not_mutate_inputs(transform):
    xs = evaluation_point_table(16, 3, 17)
    evals = list(range(16))
    xs_copy, evals_copy = list(xs), list(evals)
    transform(evals, xs, 17)
    assert xs == xs_copy
    assert evals == evals_copy


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_mismatched_table_length(transform):
    with pytest.raises(InvalidLengthError):
        transform([1, 2, 3, 4], [1, 4], 5)


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_non_power_of_two_length(transform):
    with pytest.raises(InvalidLengthError):
        transform([1, 2, 3], [1, 2, 3], 17)
    with pytest.raises(InvalidLengthError):
        transform([], [], 17)


def test_invalid_length_is_value_error():
    assert issubclass(InvalidLengthError, ValueError)


@pytest.mark.parametrize("transform", [ifft, ifft_inplace])
def test_zero_point_raises(transform):
    with pytest.raises(ZeroDivisionError):
        transform([1, 2], [0, 0], 17)
