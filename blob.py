"""
blob.py

Recover a blob's polynomial coefficients from its evaluation form.

API:
 - recover(data, params=EIP4844_PARAMS, transform="recursive", cache_table=True) -> coefficients
"""

import logging
from typing import List, Sequence

from domain import cached_evaluation_point_table, evaluation_point_table
from finite_field import FieldParams
from ifft import InvalidLengthError, ifft, ifft_inplace
from params import EIP4844_PARAMS


logger = logging.getLogger(__name__)

TRANSFORMS = {
    "recursive": ifft,
    "iterative": ifft_inplace,
}


def _validate_elements(data: Sequence[int], p: int) -> None:
    for i, v in enumerate(data):
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(f"element {i} is not an integer: {v!r}")
        if not 0 <= v < p:
            raise ValueError(f"element {i} is not a canonical field element (must be in [0, p))")


def recover(data: Sequence[int],
            params: FieldParams = EIP4844_PARAMS,
            transform: str = "recursive",
            cache_table: bool = True) -> List[int]:
    """
    Turn one evaluation vector into the coefficient vector of the same polynomial.

    :param data: params.length field elements in evaluation form
    :param params: modulus, generator and transform length
    :param transform: "recursive" or "iterative" (same result)
    :param cache_table: reuse the evaluation point table across calls
    :return: params.length coefficients, ascending degree
    """
    if len(data) != params.length:
        raise InvalidLengthError(f"expected {params.length} field elements, got {len(data)}")
    try:
        fn = TRANSFORMS[transform]
    except KeyError:
        raise ValueError(f"unknown transform '{transform}', expected one of {sorted(TRANSFORMS)}") from None
    _validate_elements(data, params.modulus)

    if cache_table:
        xs = cached_evaluation_point_table(params)
    else:
        xs = evaluation_point_table(params.length, params.generator, params.modulus)

    logger.debug("recovering %d elements with %s transform", params.length, transform)
    return fn(data, xs, params.modulus)
