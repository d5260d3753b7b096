"""
finite_field.py

Prime-field arithmetic on plain Python integers.

Functions:
 - add_mod / sub_mod / mul_mod / pow_mod / div_mod: normalized arithmetic modulo p.
 - is_probable_prime: Miller-Rabin check used when validating field parameters.

Classes:
 - FieldParams: immutable (modulus, generator, length) bundle describing a
   multiplicative subgroup of GF(p) of power-of-two order.

Every result is reduced into [0, p). Inputs are expected to already be field
elements; nothing here re-checks that on the hot path.
"""

from typing import Tuple


_MR_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)


def is_probable_prime(n: int) -> bool:
    """
    Miller-Rabin primality test over a fixed witness set.
    Deterministic below 3.3e24, a very strong probable-prime test above that.
    """
    if n < 2:
        return False
    for small in _MR_WITNESSES:
        if n % small == 0:
            return n == small
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for a in _MR_WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def add_mod(a: int, b: int, p: int) -> int:
    return (a + b) % p


def sub_mod(a: int, b: int, p: int) -> int:
    """
    a - b mod p without a negative intermediate: if b > a the result is p - (b - a).
    """
    if b > a:
        return p - (b - a)
    return a - b


def mul_mod(a: int, b: int, p: int) -> int:
    return (a * b) % p


def pow_mod(a: int, e: int, p: int) -> int:
    return pow(a, e, p)


def div_mod(a: int, b: int, p: int) -> int:
    """
    Return x with x * b == a (mod p), using the Fermat inverse b^(p-2).
    p must be prime.
    """
    if b % p == 0:
        raise ZeroDivisionError("division by zero in GF(p)")
    return a * pow(b, p - 2, p) % p


class FieldParams:
    """
    Modulus, subgroup generator and transform length.

    The generator must have multiplicative order exactly `length`, and `length`
    must be a power of two. Instances are immutable and hashable so they can key
    caches.
    """
    __slots__ = ("modulus", "generator", "length")

    def __init__(self, modulus: int, generator: int, length: int):
        modulus, generator, length = int(modulus), int(generator), int(length)
        if not is_probable_prime(modulus):
            raise ValueError("modulus must be prime")
        if length < 1 or length & (length - 1):
            raise ValueError(f"length must be a power of two, got {length}")
        if not 0 < generator < modulus:
            raise ValueError("generator must be a non-zero field element")
        if pow(generator, length, modulus) != 1:
            raise ValueError(f"generator is not a {length}-th root of unity")
        if length > 1 and pow(generator, length // 2, modulus) == 1:
            raise ValueError(f"generator order is smaller than {length}")
        object.__setattr__(self, "modulus", modulus)
        object.__setattr__(self, "generator", generator)
        object.__setattr__(self, "length", length)

    def __setattr__(self, name, value):
        raise AttributeError("FieldParams is immutable")

    @property
    def log_length(self) -> int:
        return self.length.bit_length() - 1

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.modulus, self.generator, self.length)

    def __eq__(self, other):
        if not isinstance(other, FieldParams):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f"FieldParams(modulus={self.modulus}, generator={self.generator}, length={self.length})"


# Demo
if __name__ == "__main__":
    p = 17
    print("3 - 5 mod 17 =", sub_mod(3, 5, p))
    print("3 / 5 mod 17 =", div_mod(3, 5, p))
    print(FieldParams(17, 4, 4))
