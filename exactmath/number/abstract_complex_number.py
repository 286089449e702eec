"""
Common base of the complex number types.

A complex number is the immutable pair (real, imaginary) of exact components.
SimpleComplexNumber stores int components, RealComplexNumber stores Decimal
components. The base class implements everything that does not depend on the
component type: equality, hashing, string forms, the Python operators, the
absolute value via the square root engine, the argument and the polar form.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Union

import sympy

from exactmath.errors import require_non_null, check_argument, check_state, InvalidArgumentError, InvalidParameterError
from exactmath.names import POLAR_FORM_PRECISION


class AbstractComplexNumber(ABC):
    """Complex number a + bi with exact components a and b."""

    __slots__ = ('_real', '_imaginary')

    def __init__(self, real, imaginary):
        self._real = real
        self._imaginary = imaginary

    @property
    def real(self):
        """Real part"""
        return self._real

    @property
    def imaginary(self):
        """Imaginary part"""
        return self._imaginary

    @classmethod
    @abstractmethod
    def value_of(cls, value) -> 'AbstractComplexNumber':
        """Convert value into an instance of this class."""

    @abstractmethod
    def add(self, summand):
        pass

    @abstractmethod
    def subtract(self, subtrahend):
        pass

    @abstractmethod
    def multiply(self, factor):
        pass

    @abstractmethod
    def divide(self, divisor):
        pass

    @abstractmethod
    def negate(self):
        pass

    @abstractmethod
    def conjugate(self):
        pass

    @abstractmethod
    def abs_pow2(self):
        """Exact square of the absolute value: real^2 + imaginary^2"""

    @abstractmethod
    def matrix(self):
        """The real 2x2 matrix [[a, -b], [b, a]] representing multiplication with a + bi."""

    @abstractmethod
    def _one(self):
        pass

    def pow(self, exponent: int):
        """
        Raise this number to a non-negative integer power.

        pow(0) is ONE, also for ZERO.
        """
        require_non_null(exponent, 'exponent')
        check_argument(exponent >= 0, f"expected exponent >= 0 but actual {exponent}", InvalidParameterError)
        result = self._one()
        base = self
        # square and multiply
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    def is_zero(self) -> bool:
        return self._real == 0 and self._imaginary == 0

    def is_invertible(self) -> bool:
        """Every complex number except zero has a multiplicative inverse."""
        return not self.is_zero()

    def abs(self, precision: Optional[Decimal] = None, scale: Optional[int] = None,
            rounding_mode: Optional[str] = None) -> Decimal:
        """Absolute value sqrt(real^2 + imaginary^2), see SquareRootCalculator for the modes."""
        from exactmath.sqrt import SquareRootCalculator
        calculator = SquareRootCalculator(precision=precision, scale=scale, rounding_mode=rounding_mode)
        return calculator.sqrt(self.abs_pow2())

    def argument(self, precision: int = POLAR_FORM_PRECISION) -> Decimal:
        """
        Angle between the positive real axis and this number, in (-pi, pi].

        Args:
            precision: Number of significant digits of the result

        Raises:
            InvalidStateError: If this number is zero
        """
        check_state(not self.is_zero(), f"expected number != 0 but actual {self}")
        angle = sympy.atan2(_to_rational(self._imaginary), _to_rational(self._real))
        return Decimal(str(sympy.N(angle, precision)))

    def polar_form(self, precision: int = POLAR_FORM_PRECISION) -> 'PolarForm':
        """Polar form of this number, abs to precision decimal places and argument to precision significant digits."""
        from exactmath.number.polar_form import PolarForm
        from exactmath.sqrt import SquareRootCalculator
        radial = SquareRootCalculator(precision=Decimal(1).scaleb(-precision)).sqrt(self.abs_pow2())
        return PolarForm(radial, self.argument(precision))

    def to_sympy(self) -> sympy.Expr:
        return _to_rational(self._real) + _to_rational(self._imaginary) * sympy.I

    def equals_by_comparing_parts(self, other: 'AbstractComplexNumber') -> bool:
        """Compare the numeric values of both parts, ignoring the concrete type."""
        require_non_null(other, 'other')
        return self._real == other.real and self._imaginary == other.imaginary

    def __eq__(self, other) -> bool:
        if type(other) is type(self):
            return self._real == other._real and self._imaginary == other._imaginary
        return False

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._real, self._imaginary))

    def __str__(self) -> str:
        if self._imaginary < 0:
            return f"{self._real} - {-self._imaginary}i"
        return f"{self._real} + {self._imaginary}i"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._real!r}, {self._imaginary!r})"

    # Python operator overloading for convenience
    def _coerce(self, other):
        try:
            return self.value_of(other)
        except (TypeError, InvalidArgumentError):
            return None

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()


def _to_rational(value: Union[int, Decimal]) -> sympy.Rational:
    return sympy.Rational(*value.as_integer_ratio())
