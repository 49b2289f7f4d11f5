"""
High-precision π using the Chudnovsky series with binary splitting.

Exact series evaluation in gmpy2.mpz, final assembly in gmpy2.mpfr.
"""

from .assembler import ChudnovskyAssembler, compute_pi
from .constants import DEFAULT_CONSTANTS, DIGITS_PER_TERM, ChudnovskyConstants
from .digits import (
    format_fixed,
    pi_digits,
    precision_for_digits,
    terms_for_digits,
    working_precision,
)
from .errors import ChudnovskyError, InvalidRange, InvalidTermCount
from .split import IDENTITY, Triple, binary_split, combine, floor_midpoint, leaf_triple

__all__ = [
    "ChudnovskyAssembler",
    "compute_pi",
    "DEFAULT_CONSTANTS",
    "DIGITS_PER_TERM",
    "ChudnovskyConstants",
    "format_fixed",
    "pi_digits",
    "precision_for_digits",
    "terms_for_digits",
    "working_precision",
    "ChudnovskyError",
    "InvalidRange",
    "InvalidTermCount",
    "IDENTITY",
    "Triple",
    "binary_split",
    "combine",
    "floor_midpoint",
    "leaf_triple",
]
