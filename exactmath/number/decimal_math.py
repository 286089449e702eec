"""
Exact and correctly rounded arithmetic on decimal.Decimal.

decimal's default context rounds every result to 28 significant digits. The
library needs big-decimal semantics instead: addition, subtraction and
multiplication are exact and only division rounds, to an explicit scale
(number of digits after the decimal point) with an explicit rounding mode, or
to an explicit number of significant digits via a decimal.Context.
"""

from decimal import Decimal, Context, InvalidOperation, ROUND_05UP, MAX_PREC, MAX_EMAX, MIN_EMIN
from typing import Union

from exactmath.errors import require_non_null, check_argument, InvalidArgumentError, InvalidParameterError
from exactmath.names import ROUNDING_MODES

# arithmetic in this context never rounds (precision is only bounded by memory)
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[])

ZERO = Decimal(0)
ONE = Decimal(1)
TWO = Decimal(2)


def to_decimal(value: Union[int, str, float, Decimal], parameter: str = 'value') -> Decimal:
    """
    Convert value to a Decimal without loss.

    Floats are converted through their shortest repr, so 0.1 becomes
    Decimal('0.1') and not the binary expansion of the float. Strings that
    do not parse and non-finite values (NaN, infinities) raise
    InvalidArgumentError naming the parameter.
    """
    require_non_null(value, parameter)
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {type(value)} to Decimal")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidArgumentError(f"expected {parameter} to be a decimal number but actual {value!r}") from e
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise TypeError(f"Cannot convert {type(value)} to Decimal")
    check_argument(result.is_finite(), f"expected finite {parameter} but actual {value!r}")
    return result


def check_scale(scale: int) -> int:
    require_non_null(scale, 'scale')
    check_argument(scale >= 0, f"expected scale >= 0 but actual {scale}", InvalidParameterError)
    return scale


def check_rounding_mode(rounding_mode: str) -> str:
    require_non_null(rounding_mode, 'rounding_mode')
    check_argument(rounding_mode in ROUNDING_MODES, f"expected rounding mode in {ROUNDING_MODES} but actual {rounding_mode}",
                   InvalidParameterError)
    return rounding_mode


def add(a: Decimal, b: Decimal) -> Decimal:
    return EXACT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return EXACT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    return EXACT.multiply(a, b)


def negate(a: Decimal) -> Decimal:
    return a.copy_negate()


def absolute(a: Decimal) -> Decimal:
    return a.copy_abs()


def power(a: Decimal, exponent: int) -> Decimal:
    """a ** exponent for a non-negative integer exponent, without rounding."""
    result = ONE
    for _ in range(exponent):
        result = EXACT.multiply(result, a)
    return result


def set_scale(value: Decimal, scale: int, rounding_mode: str) -> Decimal:
    """Round value to scale digits after the decimal point."""
    return value.quantize(Decimal(1).scaleb(-scale), rounding=rounding_mode, context=EXACT)


def divide(dividend: Decimal, divisor: Decimal, scale: int, rounding_mode: str) -> Decimal:
    """
    Quotient of dividend and divisor rounded to scale digits after the point.

    The quotient is first computed with a few digits more than needed using
    ROUND_05UP, which keeps the information whether the discarded tail was
    zero, and then quantized with the requested rounding mode. This gives the
    correctly rounded result without double rounding.

    Raises:
        ZeroDivisionError: If divisor is zero
    """
    check_scale(scale)
    check_rounding_mode(rounding_mode)
    if divisor.is_zero():
        raise ZeroDivisionError("Division by zero")
    if dividend.is_zero():
        return set_scale(ZERO, scale, rounding_mode)
    integer_digits = dividend.adjusted() - divisor.adjusted() + 1
    working = Context(prec=max(integer_digits + scale + 3, 1), rounding=ROUND_05UP, Emax=MAX_EMAX, Emin=MIN_EMIN,
                      traps=[])
    return set_scale(working.divide(dividend, divisor), scale, rounding_mode)


def divide_with_context(dividend: Decimal, divisor: Decimal, context: Context) -> Decimal:
    """Quotient of dividend and divisor rounded to the precision of context."""
    require_non_null(context, 'context')
    if divisor.is_zero():
        raise ZeroDivisionError("Division by zero")
    return context.divide(dividend, divisor)

