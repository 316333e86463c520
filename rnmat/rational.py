"""Exact rational numbers kept in canonical form."""
from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Sequence
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

from .errors import InvalidDenominator

Pair = Tuple[int, int]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an integer (``bool`` excluded)."""
    if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``.

    ``gcd(0, n)`` and ``gcd(n, 0)`` are ``|n|``.
    """
    return math.gcd(a, b)


def reduced_pair(a: int, b: int) -> Pair:
    """Divide *a* and *b* by their greatest common divisor."""
    g = gcd(a, b)
    if g == 0:
        return a, b
    return a // g, b // g


class Rational:
    """An exact fraction, reduced to lowest terms with a positive denominator.

    Canonicalization happens once, in the constructor, so two instances are
    equal exactly when their fields are equal. Instances are immutable.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise InvalidDenominator(num)

        num, den = self._normalize(num, den)

        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def make(cls, numerator: int, denominator: int) -> "Rational":
        """Return the canonical rational ``numerator / denominator``."""
        return cls(numerator, denominator)

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> "Rational":
        """Create a :class:`Rational` from a ``(numerator, denominator)`` pair.

        The pair may also be a one-dimensional NumPy integer array of length 2.
        """
        if isinstance(pair, np.ndarray):
            if pair.ndim != 1 or not np.issubdtype(pair.dtype, np.integer):
                raise TypeError(
                    f"expected a 1-D integer array pair, got dtype={pair.dtype} shape={pair.shape}"
                )
            pair = pair.tolist()
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
            raise TypeError(f"expected a (numerator, denominator) pair, got {type(pair)!r}")
        if len(pair) != 2:
            raise TypeError(f"expected a (numerator, denominator) pair, got {len(pair)} items")
        return cls(pair[0], pair[1])

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_pair(self) -> Pair:
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_positive(self) -> bool:
        return self._numerator > 0

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(num: int, den: int) -> Pair:
        if num == 0:
            return 0, 1
        num, den = reduced_pair(num, den)
        if den < 0:
            num, den = -num, -den
        return num, den

    @staticmethod
    def _coerce_scalar(value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return Rational.from_fraction(value)
        if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
            return Rational(int(value), 1)
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(other_rat, self)

    @staticmethod
    def _coerce_power(value: Any) -> int:
        if isinstance(value, Rational):
            if value.denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value.numerator
        return _ensure_int(value, name="exponent")

    # ------------------------------------------------------------------
    # Arithmetic operators
    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        return Rational(
            a._numerator * b._denominator + b._numerator * a._denominator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        return Rational(
            a._numerator * b._denominator - b._numerator * a._denominator,
            a._denominator * b._denominator,
        )

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        return Rational(a._numerator * b._numerator, a._denominator * b._denominator)

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        # A zero divisor surfaces as InvalidDenominator from the constructor.
        return Rational(a._numerator * b._denominator, a._denominator * b._numerator)

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._truediv)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        power = self._coerce_power(exponent)
        if power >= 0:
            return Rational(self._numerator ** power, self._denominator ** power)
        positive = -power
        return Rational(self._denominator ** positive, self._numerator ** positive)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":  # pragma: no cover - trivial
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> Any:
        if isinstance(other, np.ndarray):
            return NotImplemented
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(
            self._numerator * other_rat._denominator,
            other_rat._numerator * self._denominator,
        )

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        result = self._compare(other, operator.eq)
        if result is NotImplemented and isinstance(other, np.generic):
            # NumPy scalars would route back through __array_ufunc__.
            return False
        return result

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Matches hash(int) and hash(Fraction) for equal values.
        return hash(Fraction(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.equal: operator.eq,
        np.not_equal: operator.ne,
        np.less: operator.lt,
        np.less_equal: operator.le,
        np.greater: operator.gt,
        np.greater_equal: operator.ge,
    }
    _UFUNC_COMPARISONS = frozenset(
        (np.equal, np.not_equal, np.less, np.less_equal, np.greater, np.greater_equal)
    )

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__" or kwargs.get("out") is not None:
            return NotImplemented
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented
        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._coerce_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
                continue
            try:
                coerced.append(self._coerce_scalar(value))
            except TypeError:
                if ufunc is np.equal:
                    return False
                if ufunc is np.not_equal:
                    return True
                return NotImplemented
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            result = vectorised(*coerced)
            if ufunc in self._UFUNC_COMPARISONS:
                return result.astype(bool)
            return result
        return op(*coerced)


def make(numerator: int, denominator: int) -> Rational:
    """Public helper returning the canonical :class:`Rational`."""

    return Rational.make(numerator, denominator)


def safe_make(numerator: int, denominator: int) -> Optional[Rational]:
    """Like :func:`make`, but return ``None`` for a zero denominator."""

    if _ensure_int(denominator, name="denominator") == 0:
        return None
    return Rational(numerator, denominator)


__all__ = ["Rational", "make", "safe_make", "gcd", "reduced_pair"]
