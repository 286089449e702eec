"""
Immutable vectors over an exact scalar domain.

AbstractVector implements the vector space operations, the norms and the
distances once for all domains. A concrete vector class only names its
NumberOperations singleton and the matrix class produced by dyadic products.
Elements are addressed with 1-based indexes.

Vectors are normally assembled with a VectorBuilder, which validates every
index on put and refuses to build while an index has no element.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar
from types import MappingProxyType

import numpy as np

from exactmath.errors import (require_non_null, check_argument, check_index, check_size, check_state,
                              DimensionMismatchError, InvalidArgumentError, InvalidParameterError, NullValueError)
from exactmath.number.operations import NumberOperations, rounded_add

LOG = logging.getLogger(__name__)

E = TypeVar('E')
V = TypeVar('V', bound='AbstractVector')


class AbstractVector(ABC, Generic[E]):
    """
    Vector (x_1, ..., x_n) with n >= 1 and elements of one scalar domain.

    Args:
        elements: Non-empty sequence of elements, converted with the domain's value_of
    """

    def __init__(self, elements: Sequence[Any]):
        require_non_null(elements, 'elements')
        check_size(len(elements))
        ops = self.operations()
        values = []
        for index, element in enumerate(elements, start=1):
            require_non_null(element, f"element {index}")
            values.append(ops.value_of(element))
        self._elements: Tuple[E, ...] = tuple(values)

    @classmethod
    @abstractmethod
    def operations(cls) -> NumberOperations:
        """Arithmetic of the element domain"""

    @classmethod
    @abstractmethod
    def matrix_class(cls) -> type:
        """Matrix class of the same domain"""

    @classmethod
    def builder(cls, size: int) -> 'VectorBuilder':
        """Builder for a vector of the given size (> 0)."""
        return VectorBuilder(cls, size)

    @classmethod
    def of(cls: type, *elements) -> V:
        return cls(elements)

    @classmethod
    def zero_vector(cls: type, size: int) -> V:
        return cls.builder(size).put_all(cls.operations().zero()).build()

    # accessors
    def size(self) -> int:
        return len(self._elements)

    def element(self, index: int) -> E:
        """Element at the 1-based index."""
        check_index(index, self.size())
        return self._elements[index - 1]

    def elements(self) -> Tuple[E, ...]:
        return self._elements

    def entries(self) -> Iterator[Tuple[int, E]]:
        """(index, element) pairs in index order"""
        return enumerate(self._elements, start=1)

    @property
    def map(self) -> MappingProxyType:
        """Read-only mapping index -> element"""
        return MappingProxyType(dict(self.entries()))

    def _check_compatible(self, other: 'AbstractVector', parameter: str):
        require_non_null(other, parameter)
        if not isinstance(other, type(self)):
            raise TypeError(f"expected {type(self).__name__} but actual {type(other).__name__}")
        check_argument(self.size() == other.size(),
                       f"expected equal sizes but actual {self.size()} != {other.size()}", DimensionMismatchError)

    def _new(self: V, elements: List[E]) -> V:
        return type(self)(elements)

    # vector space
    #
    # Every operation takes an optional decimal.Context. With a context, each
    # elementwise result is rounded to context.prec significant digits, which
    # the int and SimpleComplexNumber domains reject.
    def add(self: V, summand: V, context: Optional[Context] = None) -> V:
        self._check_compatible(summand, 'summand')
        ops = self.operations()
        context = ops.check_context(context)
        return self._new([ops.rounded(ops.add(a, b), context) for a, b in zip(self._elements, summand._elements)])

    def subtract(self: V, subtrahend: V, context: Optional[Context] = None) -> V:
        self._check_compatible(subtrahend, 'subtrahend')
        ops = self.operations()
        context = ops.check_context(context)
        return self._new([ops.rounded(ops.subtract(a, b), context)
                          for a, b in zip(self._elements, subtrahend._elements)])

    def scalar_multiply(self: V, scalar: Any, context: Optional[Context] = None) -> V:
        require_non_null(scalar, 'scalar')
        ops = self.operations()
        context = ops.check_context(context)
        scalar = ops.value_of(scalar)
        return self._new([ops.rounded(ops.multiply(scalar, x), context) for x in self._elements])

    def negate(self: V, context: Optional[Context] = None) -> V:
        return self.scalar_multiply(self.operations().negate(self.operations().one()), context)

    def dot_product(self, other: V, context: Optional[Context] = None) -> E:
        """
        Sum of the products x_i * y_i.

        The product is bilinear also for complex vectors, no component is conjugated.
        """
        self._check_compatible(other, 'other')
        ops = self.operations()
        context = ops.check_context(context)
        return ops.sum((ops.rounded(ops.multiply(a, b), context) for a, b in zip(self._elements, other._elements)),
                       context)

    def orthogonal_to(self, other: V, context: Optional[Context] = None) -> bool:
        """True if the dot product with other is zero."""
        return self.operations().is_zero(self.dot_product(other, context))

    def dyadic_product(self, other: V, context: Optional[Context] = None) -> 'AbstractMatrix':
        """Matrix with the elements x_i * y_j"""
        require_non_null(other, 'other')
        if not isinstance(other, type(self)):
            raise TypeError(f"expected {type(self).__name__} but actual {type(other).__name__}")
        ops = self.operations()
        context = ops.check_context(context)
        return self.matrix_class()([[ops.rounded(ops.multiply(a, b), context) for b in other._elements]
                                    for a in self._elements])

    # norms and distances
    def taxicab_norm(self, context: Optional[Context] = None):
        """Sum of the absolute values"""
        ops = self.operations()
        context = ops.check_context(context)
        result = ops.norm_zero()
        for x in self._elements:
            result = rounded_add(result, ops.rounded_abs(x, context), context)
        return result

    def taxicab_distance(self, other: V, context: Optional[Context] = None):
        self._check_compatible(other, 'other')
        return self.subtract(other, context).taxicab_norm(context)

    def euclidean_norm_pow2(self, context: Optional[Context] = None):
        """Sum of the squared absolute values, exact without a context"""
        ops = self.operations()
        context = ops.check_context(context)
        result = ops.pow2_zero()
        for x in self._elements:
            result = rounded_add(result, ops.rounded_abs_pow2(x, context), context)
        return result

    def euclidean_norm(self,
                       precision: Optional[Decimal] = None,
                       scale: Optional[int] = None,
                       rounding_mode: Optional[str] = None,
                       context: Optional[Context] = None) -> Decimal:
        """
        Square root of euclidean_norm_pow2.

        Args:
            precision: Termination threshold of the square root approximation, in (0, 1)
            scale: Digits after the decimal point of the result
            rounding_mode: decimal rounding constant used with scale
            context: Round every step to this decimal.Context and take the
                correctly rounded context.sqrt; excludes precision and scale

        With neither precision, scale nor context the default precision 1E-10 applies.
        """
        if context is not None:
            check_context_only(precision, scale, rounding_mode)
            return context.sqrt(self.euclidean_norm_pow2(context))
        from exactmath.sqrt import SquareRootCalculator
        calculator = SquareRootCalculator(precision=precision, scale=scale, rounding_mode=rounding_mode)
        return calculator.sqrt(self.euclidean_norm_pow2())

    def euclidean_distance_pow2(self, other: V, context: Optional[Context] = None):
        self._check_compatible(other, 'other')
        return self.subtract(other, context).euclidean_norm_pow2(context)

    def euclidean_distance(self,
                           other: V,
                           precision: Optional[Decimal] = None,
                           scale: Optional[int] = None,
                           rounding_mode: Optional[str] = None,
                           context: Optional[Context] = None) -> Decimal:
        self._check_compatible(other, 'other')
        return self.subtract(other, context).euclidean_norm(precision, scale, rounding_mode, context)

    def max_norm(self, context: Optional[Context] = None):
        """Largest absolute value of an element"""
        ops = self.operations()
        context = ops.check_context(context)
        return max(ops.rounded_abs(x, context) for x in self._elements)

    def max_distance(self, other: V, context: Optional[Context] = None):
        self._check_compatible(other, 'other')
        return self.subtract(other, context).max_norm(context)

    # conversion
    def to_numpy(self) -> np.ndarray:
        """One-dimensional object array holding the exact elements"""
        return np.array(self._elements, dtype=object)

    @classmethod
    def from_numpy(cls: type, array: np.ndarray) -> V:
        require_non_null(array, 'array')
        array = np.asarray(array, dtype=object)
        check_argument(array.ndim == 1, f"expected one-dimensional array but actual ndim {array.ndim}",
                       DimensionMismatchError)
        return cls([from_numpy_scalar(x) for x in array])

    def to_sympy(self):
        """Column sympy.Matrix with exact entries"""
        from exactmath.interop import vector_to_sympy
        return vector_to_sympy(self)

    def equal_by_comparing_to(self, other: 'AbstractVector') -> bool:
        """Elementwise numeric comparison, equivalent to == for vectors of the same class."""
        return self == other

    def __eq__(self, other) -> bool:
        if type(other) is type(self):
            return self._elements == other._elements
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._elements))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[E]:
        return iter(self._elements)

    # Python operator overloading for convenience
    def __add__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if isinstance(scalar, (AbstractVector, np.ndarray)):
            return NotImplemented
        try:
            self.operations().value_of(scalar)
        except (TypeError, InvalidArgumentError):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()


def check_context_only(precision: Optional[Decimal], scale: Optional[int], rounding_mode: Optional[str]):
    """A square root is either rounded to a decimal.Context or approximated by precision and scale, not both."""
    check_argument(precision is None and scale is None and rounding_mode is None,
                   f"expected no precision, scale or rounding_mode with a context but actual "
                   f"{precision}, {scale}, {rounding_mode}", InvalidParameterError)


def from_numpy_scalar(value: Any) -> Any:
    """Plain Python number for a numpy scalar, other values unchanged."""
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    return value


class VectorBuilder(Generic[E]):
    """
    Staged construction of a vector of fixed size.

    Every method except build returns the builder, so calls can be chained:
    IntegerVector.builder(3).put(1, 4).put_all(0)...
    """

    def __init__(self, vector_class: type, size: int):
        require_non_null(vector_class, 'vector_class')
        self._vector_class = vector_class
        self._size = check_size(size)
        self._elements: List[Optional[E]] = [None] * size

    @property
    def size(self) -> int:
        return self._size

    def _value_of(self, element: Any) -> E:
        require_non_null(element, 'element')
        return self._vector_class.operations().value_of(element)

    def element(self, index: int) -> Optional[E]:
        """Element at the index, None if the index is not filled yet."""
        check_index(index, self._size)
        return self._elements[index - 1]

    def put(self, index: int, element: Any) -> 'VectorBuilder':
        check_index(index, self._size)
        self._elements[index - 1] = self._value_of(element)
        return self

    def append(self, element: Any) -> 'VectorBuilder':
        """Put element at the first free index."""
        value = self._value_of(element)
        free = [i for i, x in enumerate(self._elements) if x is None]
        check_state(bool(free), f"expected a free index in [1, {self._size}] but all are filled")
        self._elements[free[0]] = value
        return self

    def put_all(self, element: Any) -> 'VectorBuilder':
        """Put element at every index."""
        value = self._value_of(element)
        self._elements = [value] * self._size
        return self

    def fill_empty(self, element: Any) -> 'VectorBuilder':
        """Put element at every index that has no element yet."""
        value = self._value_of(element)
        self._elements = [value if x is None else x for x in self._elements]
        return self

    def build(self) -> 'AbstractVector':
        """
        Build the vector.

        Raises:
            NullValueError: If an index has no element
        """
        missing = [i for i, x in enumerate(self._elements, start=1) if x is None]
        if missing:
            raise NullValueError('element', f"expected elements at all indexes but missing {missing}")
        LOG.debug(f"Building {self._vector_class.__name__} of size {self._size}")
        return self._vector_class(self._elements)

    def __repr__(self) -> str:
        return f"VectorBuilder({self._vector_class.__name__}, {self._elements!r})"
