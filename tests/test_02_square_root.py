"""Square root approximation in the precision, scale and combined modes."""
import logging
from decimal import (Decimal, ROUND_05UP, ROUND_CEILING, ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN,
                     ROUND_HALF_UP, ROUND_UP)

import pytest

from exactmath import IntegerVector
from exactmath.errors import InvalidArgumentError, InvalidParameterError, NullArgumentError
from exactmath.names import ROUNDING_MODES
from exactmath.sqrt import SquareRootCalculator, sqrt, seed, is_perfect_square, sqrt_of_perfect_square

SQRT_2 = Decimal("1.41421356237309504880168872420969807856967187537694")


def test_default_precision():
    """Without arguments the result is within 1E-10 of the root."""
    calculator = SquareRootCalculator()
    assert calculator.precision == Decimal("1E-10")
    assert abs(calculator.sqrt(2) - SQRT_2) < Decimal("1E-10")
    assert abs(calculator.sqrt(25) - 5) < Decimal("1E-10")


@pytest.mark.parametrize("precision", [Decimal("0.5"), Decimal("1E-3"), Decimal("1E-20"), Decimal("1E-40")])
def test_precision_mode(precision):
    assert abs(sqrt(2, precision=precision) - SQRT_2) < precision


def test_scale_mode():
    assert sqrt(2, scale=5) == Decimal("1.41421")
    assert sqrt(2, scale=5).as_tuple().exponent == -5
    assert sqrt(2, scale=3, rounding_mode=ROUND_UP) == Decimal("1.415")
    assert sqrt(Decimal("0.0004"), scale=4) == Decimal("0.0200")
    assert sqrt(10**20, scale=0) == Decimal(10**10)


def test_precision_and_scale_mode():
    result = SquareRootCalculator(precision=Decimal("1E-12"), scale=6, rounding_mode=ROUND_DOWN).sqrt(2)
    assert result == Decimal("1.414213")
    assert result.as_tuple().exponent == -6


@pytest.mark.parametrize("value", [0, Decimal(0), Decimal("0.00")])
def test_zero(value):
    assert sqrt(value) == 0
    assert sqrt(value, scale=3) == Decimal("0.000")


def test_large_and_small_inputs():
    big = 12345678901234567890**2
    assert abs(sqrt(big) - Decimal(12345678901234567890)) < Decimal("1E-10")
    assert abs(sqrt(Decimal("2E-30"), precision=Decimal("1E-40")) - SQRT_2.scaleb(-15)) < Decimal("1E-40")


def test_invalid_arguments():
    with pytest.raises(InvalidArgumentError, match="expected value >= 0 but actual -1"):
        sqrt(-1)
    with pytest.raises(NullArgumentError):
        sqrt(None)
    with pytest.raises(InvalidParameterError, match=r"expected precision in \(0, 1\)"):
        SquareRootCalculator(precision=Decimal(1))
    with pytest.raises(InvalidParameterError, match=r"expected precision in \(0, 1\)"):
        SquareRootCalculator(precision=Decimal(0))
    with pytest.raises(InvalidParameterError, match="expected scale >= 0 but actual -1"):
        SquareRootCalculator(scale=-1)
    with pytest.raises(InvalidParameterError, match="expected rounding mode"):
        SquareRootCalculator(scale=2, rounding_mode="HALF_SIDEWAYS")


def test_seed():
    """Seeds lie close to the root for even and odd decimal exponents."""
    assert seed(Decimal(4)) == 2
    assert seed(Decimal(40)) == 6
    assert seed(Decimal(400)) == 20
    assert seed(Decimal("0.04")) == Decimal("0.2")


def test_iteration_bound_logs_warning(caplog):
    calculator = SquareRootCalculator(precision=Decimal("1E-30"), max_iterations=1)
    with caplog.at_level(logging.WARNING, logger="exactmath.sqrt.square_root_calculator"):
        result = calculator.sqrt(2)
    assert result > 1
    assert any("did not reach precision" in record.message for record in caplog.records)


def test_perfect_squares():
    assert is_perfect_square(0)
    assert is_perfect_square(144)
    assert not is_perfect_square(145)
    assert not is_perfect_square(-4)
    assert sqrt_of_perfect_square(10**40) == 10**20
    with pytest.raises(InvalidArgumentError, match="expected perfect square but actual 2"):
        sqrt_of_perfect_square(2)


def test_calculator_is_callable():
    calculator = SquareRootCalculator(scale=2, rounding_mode=ROUND_HALF_UP)
    assert calculator(9) == Decimal("3.00")


@pytest.mark.parametrize("rounding_mode", ROUNDING_MODES)
def test_exact_roots_in_every_rounding_mode(rounding_mode):
    """Roots with at most scale digits come back unchanged, also for directed modes."""
    assert sqrt(9, scale=2, rounding_mode=rounding_mode) == Decimal("3.00")
    assert sqrt(Decimal("2.25"), scale=2, rounding_mode=rounding_mode) == Decimal("1.50")
    assert sqrt(10**40, scale=1, rounding_mode=rounding_mode) == Decimal(10**20)
    combined = SquareRootCalculator(precision=Decimal("1E-10"), scale=2, rounding_mode=rounding_mode)
    assert combined.sqrt(9) == Decimal("3.00")
    assert IntegerVector.of(3, 4).euclidean_norm(scale=2, rounding_mode=rounding_mode) == Decimal("5.00")


@pytest.mark.parametrize("rounding_mode, expected", [(ROUND_UP, "1.415"), (ROUND_CEILING, "1.415"),
                                                     (ROUND_DOWN, "1.414"), (ROUND_FLOOR, "1.414"),
                                                     (ROUND_05UP, "1.414"), (ROUND_HALF_UP, "1.414"),
                                                     (ROUND_HALF_DOWN, "1.414"), (ROUND_HALF_EVEN, "1.414")])
def test_inexact_root_rounding(rounding_mode, expected):
    assert sqrt(2, scale=3, rounding_mode=rounding_mode) == Decimal(expected)


def test_round_05up_rounds_away_after_zero_or_five():
    assert sqrt(Decimal("1.1"), scale=1, rounding_mode=ROUND_05UP) == Decimal("1.1")
    assert sqrt(3, scale=1, rounding_mode=ROUND_05UP) == Decimal("1.7")


@pytest.mark.parametrize("rounding_mode, expected", [(ROUND_HALF_UP, 2), (ROUND_HALF_DOWN, 1), (ROUND_HALF_EVEN, 2),
                                                     (ROUND_UP, 2), (ROUND_DOWN, 1), (ROUND_05UP, 1)])
def test_root_on_a_midpoint(rounding_mode, expected):
    """sqrt(2.25) = 1.5 lies exactly between 1 and 2."""
    assert sqrt(Decimal("2.25"), scale=0, rounding_mode=rounding_mode) == expected
    assert sqrt(Decimal("6.25"), scale=0, rounding_mode=ROUND_HALF_EVEN) == 2
