"""Polar representation r * (cos(phi) + i * sin(phi)) of a complex number"""

from decimal import Context, Decimal

import sympy

from exactmath.errors import require_non_null
from exactmath.names import POLAR_FORM_PRECISION
from . import decimal_math
from .real_complex_number import RealComplexNumber


class PolarForm:
    """Immutable pair of radial (absolute value) and angular (argument) coordinate."""

    __slots__ = ('_radial', '_angular')

    def __init__(self, radial: Decimal, angular: Decimal):
        self._radial = decimal_math.to_decimal(radial, 'radial')
        self._angular = decimal_math.to_decimal(angular, 'angular')

    @property
    def radial(self) -> Decimal:
        return self._radial

    @property
    def angular(self) -> Decimal:
        return self._angular

    def complex_number(self, precision: int = POLAR_FORM_PRECISION) -> RealComplexNumber:
        """
        Convert back to cartesian coordinates.

        Args:
            precision: Number of significant digits of cos, sin and of both parts of the result
        """
        require_non_null(precision, 'precision')
        angle = sympy.Rational(*self._angular.as_integer_ratio())
        cos = Decimal(str(sympy.N(sympy.cos(angle), precision)))
        sin = Decimal(str(sympy.N(sympy.sin(angle), precision)))
        context = Context(prec=precision)
        return RealComplexNumber(context.multiply(self._radial, cos), context.multiply(self._radial, sin))

    def __eq__(self, other) -> bool:
        if isinstance(other, PolarForm):
            return self._radial == other._radial and self._angular == other._angular
        return False

    def __hash__(self) -> int:
        return hash((self._radial, self._angular))

    def __repr__(self) -> str:
        return f"PolarForm({self._radial!r}, {self._angular!r})"
