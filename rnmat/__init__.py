"""Exact rational numbers and rational matrices."""

import logging as _logging

from .errors import InvalidDenominator, RationalMatrixError, RowLengthMismatch
from .matrix import RationalMatrix, as_rational_array, zeros
from .rational import Rational, gcd, make, reduced_pair, safe_make

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "Rational",
    "RationalMatrix",
    "make",
    "safe_make",
    "gcd",
    "reduced_pair",
    "as_rational_array",
    "zeros",
    "RationalMatrixError",
    "InvalidDenominator",
    "RowLengthMismatch",
]
