"""Square matrices of floats with arithmetic, comparison and determinant support."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from numbers import Integral, Real


class _Row:
    """A live, writable view of one row of a :class:`SquareMat`."""

    __slots__ = ("_data", "_offset", "_size")

    def __init__(self, data: list[float], offset: int, size: int) -> None:
        self._data = data
        self._offset = offset
        self._size = size

    def _position(self, col: int) -> int:
        col = operator.index(col)
        if not 0 <= col < self._size:
            raise IndexError("Matrix index out of range")
        return self._offset + col

    def __getitem__(self, col: int) -> float:
        return self._data[self._position(col)]

    def __setitem__(self, col: int, value: float) -> None:
        self._data[self._position(col)] = float(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[self._offset:self._offset + self._size])

    def __repr__(self) -> str:
        return repr(list(self))


class SquareMat:
    """An n-by-n matrix of floats, initially all zeros.

    Comparisons between matrices compare the sums of their elements.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n: int) -> None:
        n = operator.index(n)
        if n <= 0:
            raise ValueError("Matrix size must be greater than 0")
        self._size = n
        self._data: list[float] = [0.0] * (n * n)

    @property
    def size(self) -> int:
        """The number of rows (and columns)."""
        return self._size

    def _with_data(self, data: list[float]) -> SquareMat:
        result = SquareMat(self._size)
        result._data = data
        return result

    def copy(self) -> SquareMat:
        """Return an independent copy of this matrix."""
        return self._with_data(list(self._data))

    def _require_same_size(self, other: SquareMat, operation: str) -> None:
        if self._size != other._size:
            raise ValueError(f"Matrix sizes must match for {operation}")

    def _matmul(self, other: SquareMat) -> list[float]:
        n = self._size
        columns = [other._data[j::n] for j in range(n)]
        rows = [self._data[i * n:(i + 1) * n] for i in range(n)]
        return [
            math.fsum(x * y for x, y in zip(row, column)) if False else sum(x * y for x, y in zip(row, column))
            for row in rows
            for column in columns
        ]

    # Arithmetic

    def __add__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "addition")
        return self._with_data([x + y for x, y in zip(self._data, other._data)])

    def __sub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        return self._with_data([x - y for x, y in zip(self._data, other._data)])

    def __neg__(self) -> SquareMat:
        return self._with_data([-x for x in self._data])

    def __mul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            self._require_same_size(other, "multiplication")
            return self._with_data(self._matmul(other))
        if isinstance(other, Real):
            return self._with_data([x * other for x in self._data])
        return NotImplemented

    def __rmul__(self, scalar: object) -> SquareMat:
        if isinstance(scalar, Real):
            return self._with_data([x * scalar for x in self._data])
        return NotImplemented

    def __mod__(self, other: object) -> SquareMat:
        """Element-wise product with a matrix, or element-wise fmod by an integer."""
        if isinstance(other, SquareMat):
            self._require_same_size(other, "special multiplication")
            return self._with_data([x * y for x, y in zip(self._data, other._data)])
        if isinstance(other, Integral):
            if other == 0:
                raise ZeroDivisionError("Cannot modulo by zero")
            return self._with_data([math.fmod(x, other) for x in self._data])
        return NotImplemented

    def __truediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero is not allowed")
        return self._with_data([x / scalar for x in self._data])

    def __pow__(self, power: object) -> SquareMat:
        if not isinstance(power, Integral):
            return NotImplemented
        if power < 0:
            raise ValueError("Negative powers are not supported")
        if power == 0:
            identity = SquareMat(self._size)
            for i in range(self._size):
                identity._data[i * self._size + i] = 1.0
            return identity
        result = self.copy()
        for _ in range(int(power) - 1):
            result = result * self
        return result

    # In-place arithmetic

    def __iadd__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "addition")
        self._data = [x + y for x, y in zip(self._data, other._data)]
        return self

    def __isub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        self._data = [x - y for x, y in zip(self._data, other._data)]
        return self

    def __imul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            self._require_same_size(other, "multiplication")
            self._data = self._matmul(other)
            return self
        if isinstance(other, Real):
            self._data = [x * other for x in self._data]
            return self
        return NotImplemented

    def __imod__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            self._require_same_size(other, "element-wise multiplication")
            self._data = [x * y for x, y in zip(self._data, other._data)]
            return self
        if isinstance(other, Integral):
            if other == 0:
                raise ZeroDivisionError("Cannot modulo by zero")
            self._data = [math.fmod(x, other) for x in self._data]
            return self
        return NotImplemented

    def __itruediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero is not allowed")
        self._data = [x / scalar for x in self._data]
        return self

    def increment(self) -> SquareMat:
        """Add 1 to every element in place; return a copy of the previous state."""
        previous = self.copy()
        self._data = [x + 1 for x in self._data]
        return previous

    def decrement(self) -> SquareMat:
        """Subtract 1 from every element in place; return a copy of the previous state."""
        previous = self.copy()
        self._data = [x - 1 for x in self._data]
        return previous

    def __invert__(self) -> SquareMat:
        """Return the transpose."""
        n = self._size
        return self._with_data([self._data[j * n + i] for i in range(n) for j in range(n)])

    # Comparison by element sum

    def sum(self) -> float:
        """Return the sum of all elements."""
        return sum(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() == other.sum()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() != other.sum()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() < other.sum()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() > other.sum()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() <= other.sum()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() >= other.sum()

    # Determinant

    def minor(self, row: int, col: int) -> SquareMat:
        """Return the matrix left after removing ``row`` and ``col``."""
        n = self._size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError("Matrix index out of range")
        result = SquareMat(n - 1)
        result._data = [
            self._data[i * n + j]
            for i in range(n)
            if i != row
            for j in range(n)
            if j != col
        ]
        return result

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        d = self._data
        if self._size == 1:
            return d[0]
        if self._size == 2:
            return d[0] * d[3] - d[1] * d[2]
        return sum(
            (1 if j % 2 == 0 else -1) * d[j] * self.minor(0, j).determinant()
            for j in range(self._size)
        )

    # Element access and display

    def __getitem__(self, row: int) -> _Row:
        row = operator.index(row)
        if not 0 <= row < self._size:
            raise IndexError("Matrix index out of range")
        return _Row(self._data, row * self._size, self._size)

    def __str__(self) -> str:
        n = self._size
        return "".join(
            "[ " + ", ".join(f"{value:g}" for value in self._data[i * n:(i + 1) * n]) + " ]\n"
            for i in range(n)
        )

    def __repr__(self) -> str:
        n = self._size
        rows = [self._data[i * n:(i + 1) * n] for i in range(n)]
        return f"SquareMat({rows!r})"