"""
Immutable matrices over an exact scalar domain.

AbstractMatrix implements the matrix operations, determinant, norms and
structural predicates once for all domains. A concrete matrix class names its
NumberOperations singleton and the vector class of the same domain. Rows and
columns are addressed with 1-based indexes.

The determinant uses closed forms up to size 3 and the Leibniz formula
beyond, which sums over all n! permutations. That is exact but only feasible
for small matrices, so a warning is logged above LEIBNIZ_WARNING_SIZE.
"""

import io
import itertools
import logging
from abc import ABC, abstractmethod
from collections import namedtuple
from decimal import Context, Decimal
from types import MappingProxyType
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from exactmath.errors import (require_non_null, check_argument, check_index, check_size, check_state,
                              DimensionMismatchError, InvalidArgumentError, MatrixNotSquareError, NullValueError)
from exactmath.names import LEIBNIZ_WARNING_SIZE
from exactmath.number.operations import NumberOperations, rounded_add
from .abstract_vector import AbstractVector, check_context_only, from_numpy_scalar

LOG = logging.getLogger(__name__)

E = TypeVar('E')
M = TypeVar('M', bound='AbstractMatrix')

Cell = namedtuple('Cell', ['row_index', 'column_index', 'value'])


class AbstractMatrix(ABC, Generic[E]):
    """
    Matrix with row_size x column_size cells (both >= 1) of one scalar domain.

    Args:
        rows: Non-empty sequence of equally long, non-empty rows; elements are
            converted with the domain's value_of
    """

    def __init__(self, rows: Sequence[Sequence[Any]]):
        require_non_null(rows, 'rows')
        check_size(len(rows), 'row_size')
        column_size = check_size(len(rows[0]), 'column_size')
        ops = self.operations()
        table = []
        for i, row in enumerate(rows, start=1):
            check_argument(len(row) == column_size,
                           f"expected equal column sizes but actual {len(row)} != {column_size}",
                           DimensionMismatchError)
            values = []
            for j, element in enumerate(row, start=1):
                require_non_null(element, f"element ({i}, {j})")
                values.append(ops.value_of(element))
            table.append(tuple(values))
        self._rows: Tuple[Tuple[E, ...], ...] = tuple(table)

    @classmethod
    @abstractmethod
    def operations(cls) -> NumberOperations:
        """Arithmetic of the element domain"""

    @classmethod
    @abstractmethod
    def vector_class(cls) -> type:
        """Vector class of the same domain"""

    @classmethod
    def builder(cls, row_size: int, column_size: int) -> 'MatrixBuilder':
        """Builder for a matrix of the given dimensions (both > 0)."""
        return MatrixBuilder(cls, row_size, column_size)

    @classmethod
    def from_rows(cls: type, rows: Sequence[Sequence[Any]]) -> M:
        return cls(rows)

    @classmethod
    def zero_matrix(cls: type, row_size: int, column_size: int) -> M:
        return cls.builder(row_size, column_size).put_all(cls.operations().zero()).build()

    @classmethod
    def identity_matrix(cls: type, size: int) -> M:
        ops = cls.operations()
        builder = cls.builder(size, size)
        for i in range(1, size + 1):
            builder.put(i, i, ops.one())
        return builder.fill_empty(ops.zero()).build()

    # accessors
    def row_size(self) -> int:
        return len(self._rows)

    def column_size(self) -> int:
        return len(self._rows[0])

    def size(self) -> int:
        """Number of cells"""
        return self.row_size() * self.column_size()

    def row_indexes(self) -> range:
        return range(1, self.row_size() + 1)

    def column_indexes(self) -> range:
        return range(1, self.column_size() + 1)

    def element(self, row_index: int, column_index: int) -> E:
        check_index(row_index, self.row_size(), 'row index')
        check_index(column_index, self.column_size(), 'column index')
        return self._rows[row_index - 1][column_index - 1]

    def row(self, row_index: int) -> 'AbstractVector':
        check_index(row_index, self.row_size(), 'row index')
        return self.vector_class()(self._rows[row_index - 1])

    def column(self, column_index: int) -> 'AbstractVector':
        check_index(column_index, self.column_size(), 'column index')
        return self.vector_class()([row[column_index - 1] for row in self._rows])

    def rows(self) -> List['AbstractVector']:
        return [self.vector_class()(row) for row in self._rows]

    def columns(self) -> List['AbstractVector']:
        return [self.vector_class()(column) for column in zip(*self._rows)]

    def cells(self) -> Iterator[Cell]:
        """Cells in row-major order"""
        for i, row in enumerate(self._rows, start=1):
            for j, value in enumerate(row, start=1):
                yield Cell(i, j, value)

    def elements(self) -> List[E]:
        """Elements in row-major order"""
        return [value for row in self._rows for value in row]

    @property
    def table(self) -> MappingProxyType:
        """Read-only mapping (row_index, column_index) -> element"""
        return MappingProxyType({(c.row_index, c.column_index): c.value for c in self.cells()})

    def _new(self: M, rows: List[List[E]]) -> M:
        return type(self)(rows)

    def _check_same_class(self, other: Any, parameter: str, expected: Optional[type] = None):
        require_non_null(other, parameter)
        expected = expected if expected is not None else type(self)
        if not isinstance(other, expected):
            raise TypeError(f"expected {expected.__name__} but actual {type(other).__name__}")

    def _check_equal_dimensions(self, other: 'AbstractMatrix', parameter: str):
        self._check_same_class(other, parameter)
        check_argument(self.row_size() == other.row_size(),
                       f"expected equal row sizes but actual {self.row_size()} != {other.row_size()}",
                       DimensionMismatchError)
        check_argument(self.column_size() == other.column_size(),
                       f"expected equal column sizes but actual {self.column_size()} != {other.column_size()}",
                       DimensionMismatchError)

    def _check_square(self):
        check_state(self.is_square(), f"expected square matrix but actual {self.row_size()} x {self.column_size()}",
                    MatrixNotSquareError)

    # arithmetic
    #
    # As for vectors, an optional decimal.Context rounds every elementwise
    # result of the Decimal and real complex domains to context.prec digits.
    def add(self: M, summand: M, context: Optional[Context] = None) -> M:
        self._check_equal_dimensions(summand, 'summand')
        ops = self.operations()
        context = ops.check_context(context)
        return self._new([[ops.rounded(ops.add(a, b), context) for a, b in zip(r, s)]
                          for r, s in zip(self._rows, summand._rows)])

    def subtract(self: M, subtrahend: M, context: Optional[Context] = None) -> M:
        self._check_equal_dimensions(subtrahend, 'subtrahend')
        ops = self.operations()
        context = ops.check_context(context)
        return self._new([[ops.rounded(ops.subtract(a, b), context) for a, b in zip(r, s)]
                          for r, s in zip(self._rows, subtrahend._rows)])

    def _row_times(self, row: Sequence[E], column: Sequence[E], context: Optional[Context]) -> E:
        ops = self.operations()
        return ops.sum((ops.rounded(ops.multiply(a, b), context) for a, b in zip(row, column)), context)

    def multiply(self: M, factor: M, context: Optional[Context] = None) -> M:
        """Matrix product self * factor"""
        self._check_same_class(factor, 'factor')
        check_argument(self.column_size() == factor.row_size(),
                       f"expected column_size == factor.row_size but actual {self.column_size()} != {factor.row_size()}",
                       DimensionMismatchError)
        context = self.operations().check_context(context)
        columns = list(zip(*factor._rows))
        return self._new([[self._row_times(row, column, context) for column in columns] for row in self._rows])

    def multiply_vector(self, vector: 'AbstractVector', context: Optional[Context] = None) -> 'AbstractVector':
        """Matrix-vector product self * vector"""
        self._check_same_class(vector, 'vector', self.vector_class())
        check_argument(self.column_size() == vector.size(),
                       f"expected column_size == vector.size but actual {self.column_size()} != {vector.size()}",
                       DimensionMismatchError)
        context = self.operations().check_context(context)
        elements = vector.elements()
        return self.vector_class()([self._row_times(row, elements, context) for row in self._rows])

    def scalar_multiply(self: M, scalar: Any, context: Optional[Context] = None) -> M:
        require_non_null(scalar, 'scalar')
        ops = self.operations()
        context = ops.check_context(context)
        scalar = ops.value_of(scalar)
        return self._new([[ops.rounded(ops.multiply(scalar, x), context) for x in row] for row in self._rows])

    def negate(self: M, context: Optional[Context] = None) -> M:
        ops = self.operations()
        return self.scalar_multiply(ops.negate(ops.one()), context)

    def transpose(self: M) -> M:
        return self._new([list(column) for column in zip(*self._rows)])

    def trace(self, context: Optional[Context] = None) -> E:
        """Sum of the diagonal elements of a square matrix"""
        self._check_square()
        ops = self.operations()
        context = ops.check_context(context)
        return ops.sum((self._rows[i][i] for i in range(self.row_size())), context)

    def determinant(self, context: Optional[Context] = None) -> E:
        """
        Determinant of a square matrix.

        Triangular matrices: product of the diagonal. Otherwise sizes 1 and 2
        directly, size 3 with the rule of Sarrus and larger sizes with the
        Leibniz formula sum_p sign(p) * prod_i a_{i,p(i)}.

        Args:
            context: Round every product and partial sum to this decimal.Context

        Raises:
            MatrixNotSquareError: If the matrix is not square
        """
        self._check_square()
        ops = self.operations()
        context = ops.check_context(context)
        n = self.row_size()
        a = self._rows
        if self.is_triangular():
            LOG.debug(f"Determinant of triangular {n} x {n} matrix")
            return ops.product((a[i][i] for i in range(n)), context)
        if n == 2:
            return ops.rounded(ops.subtract(ops.rounded(ops.multiply(a[0][0], a[1][1]), context),
                                            ops.rounded(ops.multiply(a[0][1], a[1][0]), context)), context)
        if n == 3:
            LOG.debug("Determinant by the rule of Sarrus")
            positive = [(0, 1, 2), (1, 2, 0), (2, 0, 1)]
            negative = [(2, 1, 0), (0, 2, 1), (1, 0, 2)]
            terms = [ops.product((a[i][p[i]] for i in range(3)), context) for p in positive]
            terms += [ops.negate(ops.product((a[i][p[i]] for i in range(3)), context)) for p in negative]
            return ops.sum(terms, context)
        if n > LEIBNIZ_WARNING_SIZE:
            LOG.warning(f"Leibniz determinant of a {n} x {n} matrix sums over {n}! permutations.")
        LOG.debug(f"Determinant by the Leibniz formula, size {n}")
        result = ops.zero()
        for permutation in itertools.permutations(range(n)):
            term = ops.product((a[i][permutation[i]] for i in range(n)), context)
            if ops.is_zero(term):
                continue
            if _inversions(permutation) % 2:
                result = ops.rounded(ops.subtract(result, term), context)
            else:
                result = ops.rounded(ops.add(result, term), context)
        return result

    def minor(self: M, row_index: int, column_index: int) -> M:
        """Matrix without the given row and column, re-indexed from 1."""
        check_index(row_index, self.row_size(), 'row index')
        check_index(column_index, self.column_size(), 'column index')
        check_state(self.row_size() > 1 and self.column_size() > 1,
                    f"expected row_size > 1 and column_size > 1 but actual {self.row_size()} x {self.column_size()}")
        return self._new([[x for j, x in enumerate(row, start=1) if j != column_index]
                          for i, row in enumerate(self._rows, start=1) if i != row_index])

    # norms
    def _abs_sum(self, values, context: Optional[Context]):
        ops = self.operations()
        result = ops.norm_zero()
        for x in values:
            result = rounded_add(result, ops.rounded_abs(x, context), context)
        return result

    def max_abs_column_sum_norm(self, context: Optional[Context] = None):
        """Largest sum of absolute values of a column"""
        context = self.operations().check_context(context)
        return max(self._abs_sum(column, context) for column in zip(*self._rows))

    def max_abs_row_sum_norm(self, context: Optional[Context] = None):
        """Largest sum of absolute values of a row"""
        context = self.operations().check_context(context)
        return max(self._abs_sum(row, context) for row in self._rows)

    def frobenius_norm_pow2(self, context: Optional[Context] = None):
        """Sum of the squared absolute values of all elements, exact without a context"""
        ops = self.operations()
        context = ops.check_context(context)
        result = ops.pow2_zero()
        for x in self.elements():
            result = rounded_add(result, ops.rounded_abs_pow2(x, context), context)
        return result

    def frobenius_norm(self,
                       precision: Optional[Decimal] = None,
                       scale: Optional[int] = None,
                       rounding_mode: Optional[str] = None,
                       context: Optional[Context] = None) -> Decimal:
        """
        Square root of frobenius_norm_pow2, see SquareRootCalculator for the modes.

        With a context the sum is rounded step by step and the root is the
        correctly rounded context.sqrt; precision and scale must then be None.
        """
        if context is not None:
            check_context_only(precision, scale, rounding_mode)
            return context.sqrt(self.frobenius_norm_pow2(context))
        from exactmath.sqrt import SquareRootCalculator
        calculator = SquareRootCalculator(precision=precision, scale=scale, rounding_mode=rounding_mode)
        return calculator.sqrt(self.frobenius_norm_pow2())

    def max_norm(self, context: Optional[Context] = None):
        """Largest absolute value of an element"""
        ops = self.operations()
        context = ops.check_context(context)
        return max(ops.rounded_abs(x, context) for x in self.elements())

    # predicates
    def is_square(self) -> bool:
        return self.row_size() == self.column_size()

    def is_upper_triangular(self) -> bool:
        """Square and zero below the diagonal"""
        if not self.is_square():
            return False
        ops = self.operations()
        return all(ops.is_zero(c.value) for c in self.cells() if c.row_index > c.column_index)

    def is_lower_triangular(self) -> bool:
        """Square and zero above the diagonal"""
        if not self.is_square():
            return False
        ops = self.operations()
        return all(ops.is_zero(c.value) for c in self.cells() if c.row_index < c.column_index)

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def is_diagonal(self) -> bool:
        return self.is_upper_triangular() and self.is_lower_triangular()

    def is_identity(self) -> bool:
        if not self.is_diagonal():
            return False
        ops = self.operations()
        return all(ops.is_one(self._rows[i][i]) for i in range(self.row_size()))

    def is_invertible(self) -> bool:
        """Square with a non-zero determinant"""
        return self.is_square() and not self.operations().is_zero(self.determinant())

    def is_symmetric(self) -> bool:
        return self.is_square() and self == self.transpose()

    def is_skew_symmetric(self) -> bool:
        return self.is_square() and self.transpose() == self.negate()

    # conversion
    def to_numpy(self) -> np.ndarray:
        """Two-dimensional object array holding the exact elements"""
        array = np.empty((self.row_size(), self.column_size()), dtype=object)
        for cell in self.cells():
            array[cell.row_index - 1, cell.column_index - 1] = cell.value
        return array

    @classmethod
    def from_numpy(cls: type, array: np.ndarray) -> M:
        require_non_null(array, 'array')
        array = np.asarray(array, dtype=object)
        check_argument(array.ndim == 2, f"expected two-dimensional array but actual ndim {array.ndim}",
                       DimensionMismatchError)
        return cls([[from_numpy_scalar(x) for x in row] for row in array])

    def to_sympy(self):
        """sympy.Matrix with exact entries"""
        from exactmath.interop import matrix_to_sympy
        return matrix_to_sympy(self)

    def to_multiline_string(self) -> str:
        """One line per row"""
        return '\n'.join(' '.join(str(x) for x in row) for row in self._rows)

    def write_to(self, writer: io.TextIOBase) -> None:
        """Write the multiline representation to a text writer"""
        writer.write(self.to_multiline_string())

    def __eq__(self, other) -> bool:
        if type(other) is type(self):
            return self._rows == other._rows
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._rows]!r})"

    # Python operator overloading for convenience
    def __add__(self, other):
        if not isinstance(other, AbstractMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, AbstractMatrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if isinstance(other, AbstractMatrix):
            return self.multiply(other)
        if isinstance(other, AbstractVector):
            return self.multiply_vector(other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, np.ndarray):
            return NotImplemented
        try:
            self.operations().value_of(scalar)
        except (TypeError, InvalidArgumentError):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()

    @property
    def T(self):
        return self.transpose()


def _inversions(permutation: Sequence[int]) -> int:
    """Number of pairs i < j with p(i) > p(j)"""
    n = len(permutation)
    return sum(1 for i in range(n) for j in range(i + 1, n) if permutation[i] > permutation[j])


class MatrixBuilder(Generic[E]):
    """Staged construction of a matrix of fixed dimensions."""

    def __init__(self, matrix_class: type, row_size: int, column_size: int):
        require_non_null(matrix_class, 'matrix_class')
        self._matrix_class = matrix_class
        self._row_size = check_size(row_size, 'row_size')
        self._column_size = check_size(column_size, 'column_size')
        self._rows: List[List[Optional[E]]] = [[None] * column_size for _ in range(row_size)]

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def column_size(self) -> int:
        return self._column_size

    def _value_of(self, element: Any) -> E:
        require_non_null(element, 'element')
        return self._matrix_class.operations().value_of(element)

    def element(self, row_index: int, column_index: int) -> Optional[E]:
        """Element of the cell, None if the cell is not filled yet."""
        check_index(row_index, self._row_size, 'row index')
        check_index(column_index, self._column_size, 'column index')
        return self._rows[row_index - 1][column_index - 1]

    def put(self, row_index: int, column_index: int, element: Any) -> 'MatrixBuilder':
        check_index(row_index, self._row_size, 'row index')
        check_index(column_index, self._column_size, 'column index')
        self._rows[row_index - 1][column_index - 1] = self._value_of(element)
        return self

    def put_all(self, element: Any) -> 'MatrixBuilder':
        """Put element into every cell."""
        value = self._value_of(element)
        self._rows = [[value] * self._column_size for _ in range(self._row_size)]
        return self

    def fill_empty(self, element: Any) -> 'MatrixBuilder':
        """Put element into every cell that has no element yet."""
        value = self._value_of(element)
        self._rows = [[value if x is None else x for x in row] for row in self._rows]
        return self

    def build(self) -> 'AbstractMatrix':
        """
        Build the matrix.

        Raises:
            NullValueError: If a cell has no element
        """
        missing = [(i, j) for i, row in enumerate(self._rows, start=1) for j, x in enumerate(row, start=1) if x is None]
        if missing:
            raise NullValueError('element', f"expected elements in all cells but missing {missing}")
        LOG.debug(f"Building {self._matrix_class.__name__} of size {self._row_size} x {self._column_size}")
        return self._matrix_class(self._rows)

    def __repr__(self) -> str:
        return f"MatrixBuilder({self._matrix_class.__name__}, {self._rows!r})"
