"""Complex numbers with big integer components (Gaussian integers)"""

from decimal import Decimal
from typing import Union

from exactmath.errors import require_non_null
from exactmath.names import DEFAULT_SCALE, DEFAULT_ROUNDING_MODE
from .abstract_complex_number import AbstractComplexNumber


class SimpleComplexNumber(AbstractComplexNumber):
    """
    Complex number a + bi with int components.

    Sums, differences, products and powers stay in the Gaussian integers.
    Quotients generally do not, so divide and invert return a RealComplexNumber
    rounded to a scale.
    """

    __slots__ = ()

    ZERO: 'SimpleComplexNumber'
    ONE: 'SimpleComplexNumber'
    IMAGINARY: 'SimpleComplexNumber'

    def __init__(self, real: int = 0, imaginary: int = 0):
        super().__init__(_to_int(real, 'real'), _to_int(imaginary, 'imaginary'))

    @classmethod
    def value_of(cls, value: Union[int, 'SimpleComplexNumber']) -> 'SimpleComplexNumber':
        require_non_null(value, 'value')
        if isinstance(value, SimpleComplexNumber):
            return value
        return cls(_to_int(value, 'value'))

    def _one(self) -> 'SimpleComplexNumber':
        return SimpleComplexNumber.ONE

    def add(self, summand: 'SimpleComplexNumber') -> 'SimpleComplexNumber':
        require_non_null(summand, 'summand')
        return SimpleComplexNumber(self._real + summand.real, self._imaginary + summand.imaginary)

    def subtract(self, subtrahend: 'SimpleComplexNumber') -> 'SimpleComplexNumber':
        require_non_null(subtrahend, 'subtrahend')
        return SimpleComplexNumber(self._real - subtrahend.real, self._imaginary - subtrahend.imaginary)

    def multiply(self, factor: 'SimpleComplexNumber') -> 'SimpleComplexNumber':
        require_non_null(factor, 'factor')
        real = self._real * factor.real - self._imaginary * factor.imaginary
        imaginary = self._real * factor.imaginary + self._imaginary * factor.real
        return SimpleComplexNumber(real, imaginary)

    def divide(self,
               divisor: 'SimpleComplexNumber',
               scale: int = DEFAULT_SCALE,
               rounding_mode: str = DEFAULT_ROUNDING_MODE) -> 'RealComplexNumber':
        """
        Quotient of this number and divisor.

        Args:
            divisor: Non-zero complex number
            scale: Digits after the decimal point of both parts of the result
            rounding_mode: decimal rounding constant

        Returns:
            RealComplexNumber with both parts rounded to scale

        Raises:
            ZeroDivisionError: If divisor is zero
        """
        require_non_null(divisor, 'divisor')
        from .real_complex_number import RealComplexNumber
        return RealComplexNumber.value_of(self).divide(RealComplexNumber.value_of(divisor), scale, rounding_mode)

    def invert(self, scale: int = DEFAULT_SCALE, rounding_mode: str = DEFAULT_ROUNDING_MODE) -> 'RealComplexNumber':
        return SimpleComplexNumber.ONE.divide(self, scale, rounding_mode)

    def negate(self) -> 'SimpleComplexNumber':
        return SimpleComplexNumber(-self._real, -self._imaginary)

    def conjugate(self) -> 'SimpleComplexNumber':
        return SimpleComplexNumber(self._real, -self._imaginary)

    def abs_pow2(self) -> int:
        return self._real * self._real + self._imaginary * self._imaginary

    def to_real_complex_number(self) -> 'RealComplexNumber':
        from .real_complex_number import RealComplexNumber
        return RealComplexNumber(Decimal(self._real), Decimal(self._imaginary))

    def matrix(self) -> 'IntegerMatrix':
        from exactmath.linear.matrices import IntegerMatrix
        return IntegerMatrix.from_rows([[self._real, -self._imaginary], [self._imaginary, self._real]])


def _to_int(value, parameter: str) -> int:
    require_non_null(value, parameter)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int {parameter} but actual {type(value)}")
    return value


SimpleComplexNumber.ZERO = SimpleComplexNumber(0, 0)
SimpleComplexNumber.ONE = SimpleComplexNumber(1, 0)
SimpleComplexNumber.IMAGINARY = SimpleComplexNumber(0, 1)
