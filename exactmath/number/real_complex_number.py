"""Complex numbers with big decimal components"""

from decimal import Context, Decimal
from typing import Optional, Union

from exactmath.errors import require_non_null
from exactmath.names import DEFAULT_SCALE, DEFAULT_ROUNDING_MODE
from . import decimal_math
from .abstract_complex_number import AbstractComplexNumber
from .simple_complex_number import SimpleComplexNumber

Real = Union[int, str, float, Decimal]


class RealComplexNumber(AbstractComplexNumber):
    """
    Complex number a + bi with Decimal components.

    Addition, subtraction, multiplication and powers are exact unless a
    decimal.Context is passed, which then rounds both parts of the result.
    Division always rounds, either to a scale with a rounding mode or to the
    precision of a context.
    """

    __slots__ = ()

    ZERO: 'RealComplexNumber'
    ONE: 'RealComplexNumber'
    IMAGINARY: 'RealComplexNumber'

    def __init__(self, real: Real = decimal_math.ZERO, imaginary: Real = decimal_math.ZERO):
        super().__init__(decimal_math.to_decimal(real, 'real'), decimal_math.to_decimal(imaginary, 'imaginary'))

    @classmethod
    def of(cls, real: Union[Real, SimpleComplexNumber], imaginary: Optional[Real] = None) -> 'RealComplexNumber':
        """Create from one or two real parts, or from a SimpleComplexNumber."""
        require_non_null(real, 'real')
        if isinstance(real, AbstractComplexNumber):
            return cls(Decimal(real.real), Decimal(real.imaginary))
        return cls(real, decimal_math.ZERO if imaginary is None else imaginary)

    @classmethod
    def value_of(cls, value: Union[Real, AbstractComplexNumber]) -> 'RealComplexNumber':
        require_non_null(value, 'value')
        if isinstance(value, RealComplexNumber):
            return value
        if isinstance(value, (str, bool)):
            raise TypeError(f"Cannot convert {type(value)} to RealComplexNumber")
        return cls.of(value)

    def _one(self) -> 'RealComplexNumber':
        return RealComplexNumber.ONE

    def add(self, summand: 'RealComplexNumber', context: Optional[Context] = None) -> 'RealComplexNumber':
        require_non_null(summand, 'summand')
        ctx = context if context is not None else decimal_math.EXACT
        return RealComplexNumber(ctx.add(self._real, summand.real), ctx.add(self._imaginary, summand.imaginary))

    def subtract(self, subtrahend: 'RealComplexNumber', context: Optional[Context] = None) -> 'RealComplexNumber':
        require_non_null(subtrahend, 'subtrahend')
        ctx = context if context is not None else decimal_math.EXACT
        return RealComplexNumber(ctx.subtract(self._real, subtrahend.real),
                                 ctx.subtract(self._imaginary, subtrahend.imaginary))

    def multiply(self, factor: 'RealComplexNumber', context: Optional[Context] = None) -> 'RealComplexNumber':
        require_non_null(factor, 'factor')
        real = decimal_math.subtract(decimal_math.multiply(self._real, factor.real),
                                     decimal_math.multiply(self._imaginary, factor.imaginary))
        imaginary = decimal_math.add(decimal_math.multiply(self._real, factor.imaginary),
                                     decimal_math.multiply(self._imaginary, factor.real))
        if context is not None:
            return RealComplexNumber(context.plus(real), context.plus(imaginary))
        return RealComplexNumber(real, imaginary)

    def pow(self, exponent: int, context: Optional[Context] = None) -> 'RealComplexNumber':
        result = super().pow(exponent)
        if context is not None:
            return RealComplexNumber(context.plus(result.real), context.plus(result.imaginary))
        return result

    def divide(self,
               divisor: 'RealComplexNumber',
               scale: int = DEFAULT_SCALE,
               rounding_mode: str = DEFAULT_ROUNDING_MODE) -> 'RealComplexNumber':
        """
        Quotient of this number and divisor, both parts rounded to scale.

        (a + bi) / (c + di) = ((ac + bd) + (bc - ad)i) / (c^2 + d^2)

        Raises:
            ZeroDivisionError: If divisor is zero
        """
        require_non_null(divisor, 'divisor')
        decimal_math.check_scale(scale)
        decimal_math.check_rounding_mode(rounding_mode)
        if divisor.is_zero():
            raise ZeroDivisionError("Division by zero")
        real, imaginary, denominator = self._quotient_parts(divisor)
        return RealComplexNumber(decimal_math.divide(real, denominator, scale, rounding_mode),
                                 decimal_math.divide(imaginary, denominator, scale, rounding_mode))

    def divide_with_context(self, divisor: 'RealComplexNumber', context: Context) -> 'RealComplexNumber':
        """Quotient of this number and divisor, both parts rounded to the precision of context."""
        require_non_null(divisor, 'divisor')
        require_non_null(context, 'context')
        if divisor.is_zero():
            raise ZeroDivisionError("Division by zero")
        real, imaginary, denominator = self._quotient_parts(divisor)
        return RealComplexNumber(decimal_math.divide_with_context(real, denominator, context),
                                 decimal_math.divide_with_context(imaginary, denominator, context))

    def _quotient_parts(self, divisor: 'RealComplexNumber'):
        c, d = divisor.real, divisor.imaginary
        real = decimal_math.add(decimal_math.multiply(self._real, c), decimal_math.multiply(self._imaginary, d))
        imaginary = decimal_math.subtract(decimal_math.multiply(self._imaginary, c),
                                          decimal_math.multiply(self._real, d))
        return real, imaginary, divisor.abs_pow2()

    def invert(self, scale: int = DEFAULT_SCALE, rounding_mode: str = DEFAULT_ROUNDING_MODE) -> 'RealComplexNumber':
        return RealComplexNumber.ONE.divide(self, scale, rounding_mode)

    def negate(self) -> 'RealComplexNumber':
        return RealComplexNumber(decimal_math.negate(self._real), decimal_math.negate(self._imaginary))

    def conjugate(self) -> 'RealComplexNumber':
        return RealComplexNumber(self._real, decimal_math.negate(self._imaginary))

    def abs_pow2(self) -> Decimal:
        return decimal_math.add(decimal_math.multiply(self._real, self._real),
                                decimal_math.multiply(self._imaginary, self._imaginary))

    def matrix(self) -> 'DecimalMatrix':
        from exactmath.linear.matrices import DecimalMatrix
        return DecimalMatrix.from_rows([[self._real, decimal_math.negate(self._imaginary)],
                                        [self._imaginary, self._real]])


RealComplexNumber.ZERO = RealComplexNumber(0, 0)
RealComplexNumber.ONE = RealComplexNumber(1, 0)
RealComplexNumber.IMAGINARY = RealComplexNumber(0, 1)
