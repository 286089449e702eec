"""
Arithmetic capabilities of the four scalar domains.

Vectors and matrices are implemented once and parametrized with one of the
NumberOperations singletons below. Each provides the elementwise operations
(zero, one, add, subtract, multiply, negate), the absolute value used by the
taxicab, max and column/row sum norms, and the exact squared absolute value
used by the Euclidean and Frobenius norms.

The Decimal and real complex domains can also round every result to a
decimal.Context, the way java.math.MathContext bounds BigDecimal arithmetic:
an operation computes its exact result first and rounds it once to
context.prec significant digits. The int and simple complex domains are
always exact and reject a context.

Domain           element               abs        abs_pow2
int              int                   int        int
Decimal          Decimal               Decimal    Decimal
simple complex   SimpleComplexNumber   Decimal    int
real complex     RealComplexNumber     Decimal    Decimal
"""

from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Any, Optional, Union

import sympy

from exactmath.errors import check_argument
from . import decimal_math
from .simple_complex_number import SimpleComplexNumber
from .real_complex_number import RealComplexNumber


def exact_add(a: Union[int, Decimal], b: Union[int, Decimal]) -> Union[int, Decimal]:
    """Sum of two ints or Decimals without rounding."""
    if isinstance(a, Decimal) or isinstance(b, Decimal):
        return decimal_math.EXACT.add(a, b)
    return a + b


def rounded_add(a: Union[int, Decimal], b: Union[int, Decimal],
                context: Optional[Context] = None) -> Union[int, Decimal]:
    """Sum of two ints or Decimals, rounded to context if one is given."""
    if context is None:
        return exact_add(a, b)
    return context.add(a, b)


class NumberOperations(ABC):
    """
    Operations on the elements of one scalar domain.

    Implementations are singletons, like the other operation providers.
    """

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super(NumberOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance."""
        return cls()

    @abstractmethod
    def number_class(self) -> type:
        pass

    @abstractmethod
    def value_of(self, value: Any):
        """Convert value into an element of this domain, raising TypeError if impossible."""

    @abstractmethod
    def zero(self):
        pass

    @abstractmethod
    def one(self):
        pass

    @abstractmethod
    def add(self, a, b):
        pass

    @abstractmethod
    def subtract(self, a, b):
        pass

    @abstractmethod
    def multiply(self, a, b):
        pass

    @abstractmethod
    def negate(self, a):
        pass

    @abstractmethod
    def abs(self, a):
        pass

    @abstractmethod
    def abs_pow2(self, a):
        pass

    @abstractmethod
    def to_sympy(self, a) -> sympy.Expr:
        pass

    def is_zero(self, a) -> bool:
        return a == self.zero()

    def is_one(self, a) -> bool:
        return a == self.one()

    def norm_zero(self):
        """Additive identity of the abs values"""
        return self.abs(self.zero())

    def pow2_zero(self):
        """Additive identity of the abs_pow2 values"""
        return self.abs_pow2(self.zero())

    def supports_context(self) -> bool:
        """True if results can be rounded to a decimal.Context"""
        return False

    def check_context(self, context: Optional[Context]) -> Optional[Context]:
        """
        Return context after checking that this domain can round to it.

        None stands for exact arithmetic and is always accepted.

        Raises:
            TypeError: If context is not a decimal.Context
            InvalidArgumentError: If the domain is int or SimpleComplexNumber
        """
        if context is None:
            return None
        if not isinstance(context, Context):
            raise TypeError(f"expected decimal.Context but actual {type(context).__name__}")
        check_argument(self.supports_context(),
                       f"expected Decimal or RealComplexNumber elements for context rounding "
                       f"but actual {self.number_class().__name__}")
        return context

    def rounded(self, a, context: Optional[Context] = None):
        """a rounded to context, a itself if context is None"""
        return a

    def rounded_abs(self, a, context: Optional[Context] = None):
        if context is None:
            return self.abs(a)
        return context.plus(self.abs(a))

    def rounded_abs_pow2(self, a, context: Optional[Context] = None):
        if context is None:
            return self.abs_pow2(a)
        return context.plus(self.abs_pow2(a))

    def sum(self, values, context: Optional[Context] = None):
        """Sum of values, every partial sum rounded to context if one is given"""
        result = self.zero()
        for value in values:
            result = self.rounded(self.add(result, value), context)
        return result

    def product(self, values, context: Optional[Context] = None):
        result = self.one()
        for value in values:
            result = self.rounded(self.multiply(result, value), context)
        return result


class IntegerOperations(NumberOperations):
    """Big integers, Python int"""

    _instance = None

    def number_class(self) -> type:
        return int

    def value_of(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot convert {type(value)} to int")
        return value

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a

    def abs(self, a: int) -> int:
        return abs(a)

    def abs_pow2(self, a: int) -> int:
        return a * a

    def to_sympy(self, a: int) -> sympy.Integer:
        return sympy.Integer(a)


class DecimalOperations(NumberOperations):
    """Big decimals, decimal.Decimal with exact arithmetic"""

    _instance = None

    def number_class(self) -> type:
        return Decimal

    def value_of(self, value: Any) -> Decimal:
        return decimal_math.to_decimal(value)

    def zero(self) -> Decimal:
        return decimal_math.ZERO

    def one(self) -> Decimal:
        return decimal_math.ONE

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return decimal_math.add(a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return decimal_math.subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return decimal_math.multiply(a, b)

    def negate(self, a: Decimal) -> Decimal:
        return decimal_math.negate(a)

    def abs(self, a: Decimal) -> Decimal:
        return decimal_math.absolute(a)

    def abs_pow2(self, a: Decimal) -> Decimal:
        return decimal_math.multiply(a, a)

    def to_sympy(self, a: Decimal) -> sympy.Rational:
        return sympy.Rational(*a.as_integer_ratio())

    def supports_context(self) -> bool:
        return True

    def rounded(self, a: Decimal, context: Optional[Context] = None) -> Decimal:
        if context is None:
            return a
        return context.plus(a)


class SimpleComplexNumberOperations(NumberOperations):
    """Complex numbers with int components"""

    _instance = None

    def number_class(self) -> type:
        return SimpleComplexNumber

    def value_of(self, value: Any) -> SimpleComplexNumber:
        return SimpleComplexNumber.value_of(value)

    def zero(self) -> SimpleComplexNumber:
        return SimpleComplexNumber.ZERO

    def one(self) -> SimpleComplexNumber:
        return SimpleComplexNumber.ONE

    def add(self, a: SimpleComplexNumber, b: SimpleComplexNumber) -> SimpleComplexNumber:
        return a.add(b)

    def subtract(self, a: SimpleComplexNumber, b: SimpleComplexNumber) -> SimpleComplexNumber:
        return a.subtract(b)

    def multiply(self, a: SimpleComplexNumber, b: SimpleComplexNumber) -> SimpleComplexNumber:
        return a.multiply(b)

    def negate(self, a: SimpleComplexNumber) -> SimpleComplexNumber:
        return a.negate()

    def abs(self, a: SimpleComplexNumber) -> Decimal:
        return a.abs()

    def abs_pow2(self, a: SimpleComplexNumber) -> int:
        return a.abs_pow2()

    def norm_zero(self) -> Decimal:
        return decimal_math.ZERO

    def to_sympy(self, a: SimpleComplexNumber) -> sympy.Expr:
        return a.to_sympy()


class RealComplexNumberOperations(NumberOperations):
    """Complex numbers with Decimal components"""

    _instance = None

    def number_class(self) -> type:
        return RealComplexNumber

    def value_of(self, value: Any) -> RealComplexNumber:
        return RealComplexNumber.value_of(value)

    def zero(self) -> RealComplexNumber:
        return RealComplexNumber.ZERO

    def one(self) -> RealComplexNumber:
        return RealComplexNumber.ONE

    def add(self, a: RealComplexNumber, b: RealComplexNumber) -> RealComplexNumber:
        return a.add(b)

    def subtract(self, a: RealComplexNumber, b: RealComplexNumber) -> RealComplexNumber:
        return a.subtract(b)

    def multiply(self, a: RealComplexNumber, b: RealComplexNumber) -> RealComplexNumber:
        return a.multiply(b)

    def negate(self, a: RealComplexNumber) -> RealComplexNumber:
        return a.negate()

    def abs(self, a: RealComplexNumber) -> Decimal:
        return a.abs()

    def abs_pow2(self, a: RealComplexNumber) -> Decimal:
        return a.abs_pow2()

    def norm_zero(self) -> Decimal:
        return decimal_math.ZERO

    def to_sympy(self, a: RealComplexNumber) -> sympy.Expr:
        return a.to_sympy()

    def supports_context(self) -> bool:
        return True

    def rounded(self, a: RealComplexNumber, context: Optional[Context] = None) -> RealComplexNumber:
        if context is None:
            return a
        return RealComplexNumber(context.plus(a.real), context.plus(a.imaginary))

    def rounded_abs(self, a: RealComplexNumber, context: Optional[Context] = None) -> Decimal:
        """abs(a), correctly rounded with context.sqrt if a context is given"""
        if context is None:
            return a.abs()
        return context.sqrt(a.abs_pow2())
