"""
ifft.py

Radix-2 inverse FFT over GF(p).

Given evaluations arr[i] = f(xs[i]) where xs is a bit-reversed subgroup table
(see domain.py), recover the coefficients of f in ascending degree order.

Each level splits f(x) = E(x^2) + x * O(x^2):
    E(x^2) = (f(x) + f(-x)) / 2
    O(x^2) = (f(x) - f(-x)) / (2x)
and adjacent table entries are exactly the pairs (x, -x).

Two renditions with identical output:
 - ifft: recursive, allocates fresh halves per level.
 - ifft_inplace: iterative butterflies over one buffer.
"""

from typing import List, Sequence

from finite_field import div_mod, pow_mod, sub_mod


class InvalidLengthError(ValueError):
    """Vector length is not the expected power of two, or tables don't line up."""


def _check_lengths(arr: Sequence[int], xs: Sequence[int]) -> int:
    n = len(arr)
    if len(xs) != n:
        raise InvalidLengthError(f"point table has {len(xs)} entries, expected {n}")
    if n < 1 or n & (n - 1):
        raise InvalidLengthError(f"length must be a power of two, got {n}")
    return n


def ifft(arr: Sequence[int], xs: Sequence[int], p: int) -> List[int]:
    """
    Recursive inverse transform.

    :param arr: evaluations, one per point of xs
    :param xs: bit-reversed evaluation points, same length as arr
    :param p: prime modulus
    :return: coefficient vector of length len(arr)
    """
    n = _check_lengths(arr, xs)
    if n == 1:
        return list(arr)

    half = n // 2
    even_half = []
    odd_half = []
    new_xs = []
    for i in range(0, n, 2):
        a = arr[i]
        b = arr[i + 1]
        x = xs[i]
        even_half.append(div_mod(a + b, 2, p))
        odd_half.append(div_mod(sub_mod(a, b, p), 2 * x, p))
        new_xs.append(pow_mod(x, 2, p))

    even_coeffs = ifft(even_half, new_xs, p)
    odd_coeffs = ifft(odd_half, new_xs, p)

    merged = []
    for i in range(half):
        merged.append(even_coeffs[i])
        merged.append(odd_coeffs[i])
    return merged


def ifft_inplace(arr: Sequence[int], xs: Sequence[int], p: int) -> List[int]:
    """
    Iterative inverse transform over a single buffer; same output as ifft().

    At stride h the buffer holds h interleaved sub-problems (residue classes mod h).
    Pair i of class r sits at (r + 2ih, r + (2i+1)h); its even result overwrites
    the first slot and its odd result the second, which is where the next level
    expects them. After the last level the buffer is in coefficient order.
    """
    n = _check_lengths(arr, xs)
    buf = list(arr)
    points = list(xs)
    inv_two = div_mod(1, 2, p)

    h = 1
    while h < n:
        pair_points = points[::2]
        inv_two_x = [div_mod(1, 2 * x, p) for x in pair_points]
        for r in range(h):
            for i in range(len(pair_points)):
                j0 = r + 2 * i * h
                j1 = j0 + h
                a = buf[j0]
                b = buf[j1]
                buf[j0] = (a + b) * inv_two % p
                buf[j1] = sub_mod(a, b, p) * inv_two_x[i] % p
        points = [pow_mod(x, 2, p) for x in pair_points]
        h *= 2
    return buf
