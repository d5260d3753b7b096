"""
params.py

EIP-4844 protocol constants for blob recovery.

 - BLS_MODULUS: BLS12-381 scalar field order (from py_ecc).
 - BLOB_LEN: field elements per blob.
 - PRIMITIVE_ROOT_OF_UNITY: generator of the full multiplicative group used by the protocol.
 - GENERATOR: primitive BLOB_LEN-th root of unity.

These must stay identical to the values published with the protocol; they are
fixed at import time and never reconfigured.
"""

from py_ecc.optimized_bls12_381 import curve_order

from finite_field import FieldParams


BLS_MODULUS = curve_order
BLOB_LEN = 4096
PRIMITIVE_ROOT_OF_UNITY = 7
GENERATOR = pow(PRIMITIVE_ROOT_OF_UNITY, (BLS_MODULUS - 1) // BLOB_LEN, BLS_MODULUS)

EIP4844_PARAMS = FieldParams(BLS_MODULUS, GENERATOR, BLOB_LEN)
