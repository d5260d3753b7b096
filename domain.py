"""
domain.py

Evaluation-point tables for radix-2 transforms.

The transform in ifft.py pairs adjacent entries and squares their point, so the
subgroup points have to be laid out in bit-reversed order:

    table[i] = g ** bitrev_k(i) mod p,   k = log2(n)

With that layout table[2i + 1] == -table[2i], and squaring the even entries gives
the bit-reversed table of the next level.
"""

from functools import lru_cache
import logging
from typing import List, Tuple

import numpy as np

from finite_field import FieldParams


logger = logging.getLogger(__name__)


def bit_reverse_indices(n: int) -> List[int]:
    """
    Bit-reversal permutation of range(n) using log2(n) bits. n must be a power of two.
    """
    if n < 1 or n & (n - 1):
        raise ValueError(f"n must be a power of two, got {n}")
    k = n.bit_length() - 1
    idx = np.arange(n, dtype=np.int64)
    rev = np.zeros(n, dtype=np.int64)
    for bit in range(k):
        rev |= ((idx >> bit) & 1) << (k - 1 - bit)
    return rev.tolist()


def evaluation_point_table(n: int, g: int, p: int) -> List[int]:
    """
    Subgroup points in bit-reversed order: [g^bitrev(i) mod p for i in range(n)].
    """
    return [pow(g, r, p) for r in bit_reverse_indices(n)]


@lru_cache(maxsize=8)
def cached_evaluation_point_table(params: FieldParams) -> Tuple[int, ...]:
    """
    Memoized table for a parameter set. Returned as a tuple so callers can't mutate the cache.
    """
    logger.debug("building evaluation point table (n=%d)", params.length)
    return tuple(evaluation_point_table(params.length, params.generator, params.modulus))


# demo
if __name__ == "__main__":
    print("bitrev(8):", bit_reverse_indices(8))
    print("table(4, g=4, p=17):", evaluation_point_table(4, 4, 17))
