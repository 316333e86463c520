"""Row-major matrices of :class:`~rnmat.rational.Rational` entries."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Tuple, Union

import numpy as np

from .errors import RowLengthMismatch
from .rational import Rational

LOG = logging.getLogger(__name__)

Entry = Union[Rational, Tuple[int, int]]
Row = Tuple[Rational, ...]


def _coerce_entry(value: Any) -> Rational:
    if isinstance(value, Rational):
        return value
    return Rational.from_pair(value)


def _canonical_row(values: Iterable[Entry]) -> Row:
    if isinstance(values, (str, bytes)):
        raise TypeError("a row must be a sequence of (numerator, denominator) pairs")
    return tuple(_coerce_entry(value) for value in values)


class RationalMatrix:
    """A rectangular matrix of exact rationals.

    Entries are given as ``(numerator, denominator)`` pairs (or existing
    :class:`Rational` values) and stored in canonical form, so equality is a
    plain entry-by-entry comparison.

    >>> m = RationalMatrix()
    >>> m.push_row([(2, 4), (3, 4)])
    >>> m == RationalMatrix.from_rows([[(1, 2), (3, 4)]])
    True
    """

    __hash__ = None  # type: ignore[assignment]  # mutable container

    def __init__(self) -> None:
        self._rows: List[Row] = []

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Entry]]) -> "RationalMatrix":
        """Build a matrix from nested ``(numerator, denominator)`` data.

        Every row must have the length of the first one; otherwise
        :class:`~rnmat.errors.RowLengthMismatch` is raised and no matrix is
        built.
        """
        built = [_canonical_row(row) for row in rows]
        if built:
            n_cols = len(built[0])
            for index, row in enumerate(built):
                if len(row) != n_cols:
                    raise RowLengthMismatch(n_cols, len(row), index=index)
        matrix = cls()
        matrix._rows = built
        LOG.debug("built %dx%d rational matrix", *matrix.shape)
        return matrix

    @classmethod
    def from_array(cls, array: Any) -> "RationalMatrix":
        """Create a matrix from a NumPy array.

        Accepts a 2-D object array of :class:`Rational` values or an integer
        array of shape ``(rows, cols, 2)`` holding numerator/denominator pairs.
        """
        array = np.asarray(array)
        if array.dtype == object and array.ndim == 2:
            return cls.from_rows(array.tolist())
        if np.issubdtype(array.dtype, np.integer) and array.ndim == 3 and array.shape[2] == 2:
            return cls.from_rows(array.tolist())
        raise TypeError(
            f"expected a 2-D object array or an integer (rows, cols, 2) array, "
            f"got dtype={array.dtype} shape={array.shape}"
        )

    # ------------------------------------------------------------------
    # Mutation
    def push_row(self, row: Iterable[Entry]) -> None:
        """Append a row, canonicalizing every entry.

        The matrix is left unchanged if any entry is invalid or the row length
        disagrees with the current column count.
        """
        new_row = _canonical_row(row)
        if self._rows and len(new_row) != self.n_cols:
            raise RowLengthMismatch(self.n_cols, len(new_row), index=len(self._rows))
        self._rows.append(new_row)

    def push_col(self, col: Iterable[Entry]) -> None:
        """Append a column; on an empty matrix each entry starts a new row."""
        new_col = _canonical_row(col)
        if not self._rows:
            self._rows = [(entry,) for entry in new_col]
            return
        if len(new_col) != self.n_rows:
            raise RowLengthMismatch(self.n_rows, len(new_col), index=self.n_cols)
        self._rows = [row + (entry,) for row, entry in zip(self._rows, new_col)]

    # ------------------------------------------------------------------
    # Shape and access
    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        if not self._rows:
            return 0
        return len(self._rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_cols

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    def row(self, index: int) -> Row:
        return self._rows[index]

    def col(self, index: int) -> Row:
        return tuple(row[index] for row in self._rows)

    def copy(self) -> "RationalMatrix":
        other = type(self)()
        other._rows = list(self._rows)
        return other

    def to_array(self) -> np.ndarray:
        """Return a ``(n_rows, n_cols)`` object array of :class:`Rational`."""
        array = np.empty(self.shape, dtype=object)
        for i, row in enumerate(self._rows):
            for j, entry in enumerate(row):
                array[i, j] = entry
        return array

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self._rows[key]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    # ------------------------------------------------------------------
    # Comparisons and representation
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        body = ", ".join("[" + ", ".join(str(entry) for entry in row) + "]" for row in self._rows)
        return f"RationalMatrix([{body}])"


def as_rational_array(rows: Iterable[Iterable[Entry]]) -> np.ndarray:
    """Return nested pair data as a 2-D ``numpy.ndarray`` of :class:`Rational`."""

    return RationalMatrix.from_rows(rows).to_array()


def zeros(n_rows: int, n_cols: int) -> RationalMatrix:
    """Return an ``n_rows`` by ``n_cols`` matrix filled with zeros."""

    if n_rows < 0 or n_cols < 0:
        raise ValueError("matrix dimensions must be non-negative")
    zero = Rational.zero()
    return RationalMatrix.from_rows([[zero] * n_cols for _ in range(n_rows)])


__all__ = ["RationalMatrix", "as_rational_array", "zeros"]
