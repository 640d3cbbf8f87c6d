"""
Dense row-major matrix over the reals.

Matrices are immutable values. Derived results are assembled in an
exclusively held MatrixBuilder and only published once fully populated, so a
half-built grid is never visible to callers.

Determinant and inverse use cofactor (Laplace) expansion, which costs O(n!)
in the matrix size. This is intended for the small state dimensions of
filtering problems; callers with large models should bound the size
themselves.
"""
import numbers
from typing import NamedTuple

import numpy as np

from ..errors import (
    ConstructionSizeMismatch,
    DimensionMismatch,
    IncompatibleMultiplication,
    IndexOutOfRange,
    MatrixError,
    NotSquare,
)
from .formatting import describe

SINGULARITY_TOLERANCE = 1e-12
DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12


class Index(NamedTuple):
    """Position of an element as a (row, column) pair."""
    row: int
    column: int


def _check_size(size, rows, columns):
    if rows < 0 or columns < 0 or size != rows * columns:
        raise ConstructionSizeMismatch(size, rows, columns)


def _check_index(index, rows, columns):
    row, column = index
    if not 0 <= row < rows:
        raise IndexOutOfRange('row', row, rows)
    if not 0 <= column < columns:
        raise IndexOutOfRange('column', column, columns)
    return row * columns + column


def _ieee_divide(numerator, denominator):
    """Divide with IEEE semantics: x/0 gives +-inf and 0/0 gives nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


class MatrixBuilder:
    """
    Mutable, exclusively held staging area for a new Matrix.

    Elements are written with bounds-checked ``set`` and the result is
    published with ``build``. A builder is sealed after ``build`` so the
    published matrix can never be changed through it.
    """

    def __init__(self, rows, columns, grid=None):
        if grid is None:
            if rows < 0 or columns < 0:
                raise ConstructionSizeMismatch(0, rows, columns)
            grid = [0.0] * (rows * columns)
        else:
            grid = [float(v) for v in grid]
            _check_size(len(grid), rows, columns)
        self._rows = rows
        self._columns = columns
        self._grid = grid
        self._sealed = False

    @property
    def shape(self):
        return (self._rows, self._columns)

    def value(self, index):
        return self._grid[_check_index(index, self._rows, self._columns)]

    def set(self, value, index):
        """Write one element; fails with IndexOutOfRange on a bad index."""
        if self._sealed:
            raise RuntimeError("MatrixBuilder has already been built")
        self._grid[_check_index(index, self._rows, self._columns)] = float(value)

    def build(self):
        """Publish the populated grid as an immutable Matrix and seal the builder."""
        self._sealed = True
        return Matrix(self._grid, self._rows, self._columns)


class Matrix:
    """
    Immutable dense matrix stored as a flat row-major grid.

    Parameters
    ----------
    grid : sequence of float
        Elements in row-major order, length rows * columns
    rows : int
        Number of rows
    columns : int
        Number of columns

    Raises
    ------
    ConstructionSizeMismatch
        If len(grid) != rows * columns or a size is negative
    """

    __slots__ = ('_rows', '_columns', '_grid')

    # Make numpy defer to our reflected operators (e.g. np.float64(2) * m).
    __array_ufunc__ = None

    def __init__(self, grid, rows, columns):
        values = tuple(float(v) for v in grid)
        _check_size(len(values), rows, columns)
        self._rows = rows
        self._columns = columns
        self._grid = values

    # Construction

    @classmethod
    def zeros(cls, rows, columns):
        """Zero-filled rows x columns matrix."""
        return cls([0.0] * (rows * columns), rows, columns)

    @classmethod
    def vector(cls, values):
        """Column vector holding ``values``."""
        values = list(values)
        return cls(values, len(values), 1)

    @classmethod
    def zero_vector(cls, size):
        return cls.zeros(size, 1)

    @classmethod
    def square(cls, size):
        return cls.zeros(size, size)

    @classmethod
    def identity(cls, size):
        """Identity matrix of the given size."""
        builder = MatrixBuilder(size, size)
        for i in range(size):
            builder.set(1.0, Index(i, i))
        return builder.build()

    @classmethod
    def from_rows(cls, rows):
        """
        Build from nested row-major data, e.g. ``[[1, 2], [3, 4]]``.

        Empty input gives a 0x0 matrix. Ragged rows fail with
        ConstructionSizeMismatch.
        """
        rows = [list(row) for row in rows]
        n_columns = len(rows[0]) if rows else 0
        grid = [v for row in rows for v in row]
        if any(len(row) != n_columns for row in rows):
            raise ConstructionSizeMismatch(len(grid), len(rows), n_columns)
        return cls(grid, len(rows), n_columns)

    @classmethod
    def from_numpy(cls, array):
        """
        Convert a numpy array; 1-D input becomes a column vector.

        Parameters
        ----------
        array : array_like [n] or [n, m]

        Returns
        -------
        Matrix
        """
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim == 1:
            return cls.vector(arr.tolist())
        if arr.ndim != 2:
            raise MatrixError(f"expected a 1-D or 2-D array, got {arr.ndim}-D")
        return cls(arr.ravel().tolist(), arr.shape[0], arr.shape[1])

    def to_numpy(self):
        """Fresh float64 array of shape (rows, columns)."""
        return np.array(self._grid, dtype=np.float64).reshape(self._rows, self._columns)

    def to_builder(self):
        """Builder holding a private copy of this matrix's grid."""
        return MatrixBuilder(self._rows, self._columns, self._grid)

    # Queries

    @property
    def row_count(self):
        return self._rows

    @property
    def column_count(self):
        return self._columns

    @property
    def grid(self):
        return self._grid

    @property
    def shape(self):
        return (self._rows, self._columns)

    @property
    def is_square(self):
        return self._rows == self._columns

    def validate(self, index):
        """Raise IndexOutOfRange (row checked first) if ``index`` is invalid."""
        _check_index(index, self._rows, self._columns)

    def value(self, index):
        return self._grid[_check_index(index, self._rows, self._columns)]

    def __getitem__(self, index):
        return self.value(index)

    def rows(self):
        """Elements as a tuple of row tuples."""
        c = self._columns
        return tuple(self._grid[r * c:(r + 1) * c] for r in range(self._rows))

    # Algebra

    def transposed(self):
        """Columns x rows matrix with result[j][i] = self[i][j]. O(rows * columns)."""
        builder = MatrixBuilder(self._columns, self._rows)
        for row in range(self._rows):
            for column in range(self._columns):
                builder.set(self.value(Index(row, column)), Index(column, row))
        return builder.build()

    def identity_minus(self):
        """I - A for square A."""
        if not self.is_square:
            raise NotSquare('identity_minus', self.shape)
        return Matrix.identity(self._rows) - self

    def minor(self, index):
        """Matrix with the row and column of ``index`` removed."""
        skip_row, skip_column = index
        self.validate(index)
        builder = MatrixBuilder(self._rows - 1, self._columns - 1)
        for row in range(self._rows):
            if row == skip_row:
                continue
            for column in range(self._columns):
                if column == skip_column:
                    continue
                target = Index(row if row < skip_row else row - 1,
                               column if column < skip_column else column - 1)
                builder.set(self.value(Index(row, column)), target)
        return builder.build()

    def determinant(self):
        """
        Determinant by Laplace expansion along the first column.

        det(A) = sum_i (-1)^i * A[i][0] * det(minor(A, i, 0))

        The 0x0 determinant is the empty product, 1.0.

        Raises
        ------
        NotSquare
            If the matrix is not square
        """
        if not self.is_square:
            raise NotSquare('determinant', self.shape)
        if self._rows == 0:
            return 1.0
        if self._rows == 1:
            return self._grid[0]

        result = 0.0
        for row in range(self._rows):
            sign = 1.0 if row % 2 == 0 else -1.0
            element = self.value(Index(row, 0))
            result += sign * element * self.minor(Index(row, 0)).determinant()
        return result

    def inversed(self):
        """
        Inverse by the adjugate method.

        inverse[i][j] = (-1)^(i+j) * det(minor(A^T, i, j)) / det(A)

        No singularity check is made: a zero determinant yields inf/nan
        elements instead of an error. Use ``is_singular`` to validate first.

        Raises
        ------
        NotSquare
            If the matrix is not square
        """
        if not self.is_square:
            raise NotSquare('inverse', self.shape)
        n = self._rows
        if n == 0:
            return self
        if n == 1:
            return Matrix([_ieee_divide(1.0, self._grid[0])], 1, 1)

        transposed = self.transposed()
        det = self.determinant()
        builder = MatrixBuilder(n, n)
        for i in range(n):
            for j in range(n):
                sign = 1.0 if (i + j) % 2 == 0 else -1.0
                cofactor = transposed.minor(Index(i, j)).determinant()
                builder.set(_ieee_divide(sign * cofactor, det), Index(i, j))
        return builder.build()

    def is_singular(self, tolerance=SINGULARITY_TOLERANCE):
        """Opt-in check: True if |det(A)| <= tolerance."""
        return abs(self.determinant()) <= tolerance

    def combine(self, other, operation, name='combine'):
        """
        Elementwise ``operation(a, b)`` over two equally shaped matrices.

        Parameters
        ----------
        other : Matrix
            Right operand, same shape as self
        operation : callable (float, float) -> float
        name : str
            Operation name reported in DimensionMismatch

        Returns
        -------
        Matrix
        """
        if self.shape != other.shape:
            raise DimensionMismatch(name, self.shape, other.shape)
        builder = MatrixBuilder(self._rows, self._columns)
        for row in range(self._rows):
            for column in range(self._columns):
                index = Index(row, column)
                builder.set(operation(self.value(index), other.value(index)), index)
        return builder.build()

    def add(self, other):
        return self.combine(other, lambda a, b: a + b, 'add')

    def subtract(self, other):
        return self.combine(other, lambda a, b: a - b, 'subtract')

    def multiply(self, other):
        """Matrix product, O(rows * inner * columns)."""
        if self._columns != other._rows:
            raise IncompatibleMultiplication(self.shape, other.shape)
        inner = self._columns
        builder = MatrixBuilder(self._rows, other._columns)
        for i in range(self._rows):
            for j in range(other._columns):
                total = 0.0
                for k in range(inner):
                    total += self.value(Index(i, k)) * other.value(Index(k, j))
                builder.set(total, Index(i, j))
        return builder.build()

    def scalar_multiply(self, scalar):
        scalar = float(scalar)
        return Matrix([v * scalar for v in self._grid], self._rows, self._columns)

    def allclose(self, other, rtol=DEFAULT_RTOL, atol=DEFAULT_ATOL):
        """Shape-equal and elementwise within tolerance."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self.to_numpy(), other.to_numpy(), rtol=rtol, atol=atol))

    # Operators

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scalar_multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scalar_multiply(other)
        return NotImplemented

    def __neg__(self):
        return self.scalar_multiply(-1.0)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._grid == other._grid

    def __hash__(self):
        return hash((self._rows, self._columns, self._grid))

    def __repr__(self):
        return f"Matrix({list(self._grid)!r}, rows={self._rows}, columns={self._columns})"

    def __str__(self):
        return describe(self)
