"""
Square root approximation for big integers and big decimals.

The root is approximated with Heron's method (Newton's method on x^2 - n),
starting from a seed derived from the decimal exponent of the input. Three
termination modes are supported:

- precision: stop once two successive iterates differ by less than the
  precision, a Decimal in the open interval (0, 1)
- scale: round every iterate to scale digits after the decimal point and stop
  once two successive rounded iterates are equal
- precision and scale: terminate like the precision mode, then round the
  result to the scale

All intermediate quotients are rounded to a working scale a few guard digits
finer than the requested precision or scale.
"""

import logging
import math
from decimal import (Decimal, ROUND_UP, ROUND_DOWN, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, ROUND_HALF_DOWN,
                     ROUND_05UP)
from typing import Optional, Union

from exactmath.errors import require_non_null, check_argument, InvalidArgumentError, InvalidParameterError
from exactmath.names import (DEFAULT_PRECISION, DEFAULT_ROUNDING_MODE, DEFAULT_MAX_ITERATIONS, SQRT_GUARD_DIGITS)
from exactmath.number import decimal_math

LOG = logging.getLogger(__name__)


class SquareRootCalculator:
    """
    Configured square root approximation.

    Args:
        precision: Termination threshold in (0, 1) for the difference of successive iterates
        scale: Number of digits after the decimal point of the result (>= 0)
        rounding_mode: decimal rounding constant used when rounding to the scale
        max_iterations: Upper bound on the number of Heron steps

    With neither precision nor scale given, precision defaults to 1E-10.
    """

    def __init__(self,
                 precision: Optional[Decimal] = None,
                 scale: Optional[int] = None,
                 rounding_mode: Optional[str] = None,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS):
        if precision is None and scale is None:
            precision = DEFAULT_PRECISION
        if precision is not None:
            precision = decimal_math.to_decimal(precision, 'precision')
            check_argument(0 < precision < 1, f"expected precision in (0, 1) but actual {precision}",
                           InvalidParameterError)
        if scale is not None:
            decimal_math.check_scale(scale)
        self.rounding_mode = decimal_math.check_rounding_mode(
            rounding_mode if rounding_mode is not None else DEFAULT_ROUNDING_MODE)
        check_argument(max_iterations > 0, f"expected max_iterations > 0 but actual {max_iterations}",
                       InvalidParameterError)
        self.precision = precision
        self.scale = scale
        self.max_iterations = max_iterations
        # digits after the point kept in the intermediate quotients
        digits = 0
        if precision is not None:
            digits = max(-precision.adjusted(), 0)
        if scale is not None:
            digits = max(digits, scale)
        self.working_scale = digits + SQRT_GUARD_DIGITS

    def __repr__(self):
        return (f"SquareRootCalculator(precision={self.precision}, scale={self.scale}, "
                f"rounding_mode={self.rounding_mode})")

    def sqrt(self, value: Union[int, Decimal]) -> Decimal:
        """Approximate the square root of a non-negative int or Decimal."""
        n = decimal_math.to_decimal(value)
        check_argument(n >= 0, f"expected value >= 0 but actual {n}", InvalidArgumentError)
        if n.is_zero():
            return decimal_math.ZERO if self.scale is None else decimal_math.set_scale(
                decimal_math.ZERO, self.scale, self.rounding_mode)
        if self.precision is None:
            return round_root(n, self._sqrt_to_scale(n), self.scale, self.rounding_mode)
        root = self._sqrt_to_precision(n)
        if self.scale is None:
            return root
        return round_root(n, root, self.scale, self.rounding_mode)

    __call__ = sqrt

    def _step(self, n: Decimal, x: Decimal) -> Decimal:
        quotient = decimal_math.divide(n, x, self.working_scale, self.rounding_mode)
        return decimal_math.divide(decimal_math.add(x, quotient), decimal_math.TWO, self.working_scale,
                                   self.rounding_mode)

    def _sqrt_to_precision(self, n: Decimal) -> Decimal:
        x = seed(n)
        LOG.debug(f"Square root of {n} to precision {self.precision}, seed {x}")
        for i in range(self.max_iterations):
            following = self._step(n, x)
            LOG.debug(f"Iteration {i + 1}: {following}")
            if decimal_math.absolute(decimal_math.subtract(following, x)) < self.precision:
                return following
            x = following
        LOG.warning(f"Square root of {n} did not reach precision {self.precision} "
                    f"within {self.max_iterations} iterations.")
        return x

    def _sqrt_to_scale(self, n: Decimal) -> Decimal:
        """Iterate until two successive iterates agree at the scale and return the last one."""
        x = seed(n)
        rounded = decimal_math.set_scale(x, self.scale, self.rounding_mode)
        LOG.debug(f"Square root of {n} to scale {self.scale}, seed {x}")
        for i in range(self.max_iterations):
            x = self._step(n, x)
            following = decimal_math.set_scale(x, self.scale, self.rounding_mode)
            LOG.debug(f"Iteration {i + 1}: {following}")
            if following == rounded:
                return x
            rounded = following
        LOG.warning(f"Square root of {n} did not stabilize at scale {self.scale} "
                    f"within {self.max_iterations} iterations.")
        return x


def seed(n: Decimal) -> Decimal:
    """
    Initial Heron iterate for n > 0.

    With n = c * 10^e in scientific notation (1 <= c < 10), sqrt(n) lies in
    [1, 3.2) * 10^(e/2) for even e and in [3.2, 10) * 10^((e-1)/2) for odd e.
    """
    exponent = n.adjusted()
    factor = 6 if exponent % 2 else 2
    return Decimal(factor).scaleb(exponent // 2)


def sqrt(value: Union[int, Decimal],
         precision: Optional[Decimal] = None,
         scale: Optional[int] = None,
         rounding_mode: Optional[str] = None) -> Decimal:
    """Approximate the square root of value, see SquareRootCalculator for the modes."""
    return SquareRootCalculator(precision=precision, scale=scale, rounding_mode=rounding_mode).sqrt(value)


def is_perfect_square(value: int) -> bool:
    """True if value is the square of an integer."""
    require_non_null(value, 'value')
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def sqrt_of_perfect_square(value: int) -> int:
    """Exact integer root of a perfect square."""
    check_argument(is_perfect_square(value), f"expected perfect square but actual {value}", InvalidArgumentError)
    return math.isqrt(value)


def round_root(n: Decimal, approximation: Decimal, scale: int, rounding_mode: str) -> Decimal:
    """
    Square root of n rounded to scale digits after the decimal point.

    Heron iterates approach the root from above, so rounding an iterate
    directly is one unit too high for the upward modes whenever the root has
    at most scale digits. The digits are therefore settled exactly: the
    truncated approximation is accepted as floor(sqrt(n) * 10^scale) only if
    its square brackets n * 10^(2 * scale), otherwise the integer square root
    is taken. The rounding decision then only compares integers.
    """
    scaled = decimal_math.multiply(n, Decimal(1).scaleb(2 * scale))
    floor = int(approximation.scaleb(scale, context=decimal_math.EXACT))
    if not floor * floor <= scaled < (floor + 1)**2:
        floor = math.isqrt(int(scaled))
    if floor * floor == scaled:
        digits = floor
    elif rounding_mode in (ROUND_UP, ROUND_CEILING):
        digits = floor + 1
    elif rounding_mode in (ROUND_DOWN, ROUND_FLOOR):
        digits = floor
    elif rounding_mode == ROUND_05UP:
        digits = floor + 1 if floor % 10 in (0, 5) else floor
    else:
        # sqrt(scaled) against floor + 1/2
        twice = decimal_math.multiply(scaled, Decimal(4))
        midpoint = (2 * floor + 1)**2
        if twice > midpoint:
            digits = floor + 1
        elif twice < midpoint:
            digits = floor
        elif rounding_mode == ROUND_HALF_UP:
            digits = floor + 1
        elif rounding_mode == ROUND_HALF_DOWN:
            digits = floor
        else:
            digits = floor + floor % 2
    return Decimal(digits).scaleb(-scale, context=decimal_math.EXACT)
