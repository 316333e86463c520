"""Exceptions raised by :mod:`rnmat`."""
from __future__ import annotations

from typing import Optional


class RationalMatrixError(Exception):
    """Base class for all errors raised by this package."""


class InvalidDenominator(RationalMatrixError, ZeroDivisionError):
    """A rational number was requested with a zero denominator."""

    def __init__(self, numerator: int) -> None:
        super().__init__(f"denominator must be non-zero (numerator {numerator})")
        self.numerator = numerator


class RowLengthMismatch(RationalMatrixError, ValueError):
    """A row or column disagrees with the established matrix shape."""

    def __init__(self, expected: int, actual: int, *, index: Optional[int] = None) -> None:
        where = "" if index is None else f" at index {index}"
        super().__init__(f"expected length {expected}, got {actual}{where}")
        self.expected = expected
        self.actual = actual
        self.index = index
