"""Rounding of Decimal and real complex vector and matrix operations to a decimal.Context."""
from decimal import Context, Decimal

import pytest

from exactmath import (IntegerMatrix, DecimalMatrix, SimpleComplexNumberVector, RealComplexNumberMatrix, DecimalVector,
                       RealComplexNumberVector, RealComplexNumber)
from exactmath.errors import InvalidArgumentError, InvalidParameterError

CONTEXT_DOMAINS = [DecimalMatrix, RealComplexNumberMatrix]


def significant_digits(value) -> int:
    parts = (value.real, value.imaginary) if isinstance(value, RealComplexNumber) else (value,)
    return max(len(part.as_tuple().digits) for part in parts)


# =============================================================================
# Concrete roundings
# =============================================================================


def test_determinant_rounds_every_product():
    """1.234 * 4.567 = 5.635678 becomes 5.64, minus 2 * 3 gives -0.36."""
    matrix = DecimalMatrix([["1.234", "2"], ["3", "4.567"]])
    assert matrix.determinant() == Decimal("-0.364322")
    assert matrix.determinant(context=Context(prec=3)) == Decimal("-0.36")


def test_products_round_to_prec():
    """3.33 becomes 3.3 and 8.88 becomes 8.9, their sum 12.2 becomes 12."""
    row = DecimalMatrix([["1.11", "2.22"]])
    column = DecimalMatrix([["3"], ["4"]])
    assert row.multiply(column) == DecimalMatrix([["12.21"]])
    assert row.multiply(column, context=Context(prec=2)) == DecimalMatrix([["12"]])
    assert row.multiply_vector(DecimalVector.of(3, 4), Context(prec=2)) == DecimalVector.of(12)
    assert DecimalVector.of("1.11", "2.22").dot_product(DecimalVector.of(3, 4), Context(prec=2)) == 12


def test_real_complex_parts_round_separately():
    matrix = RealComplexNumberMatrix([[RealComplexNumber("1.234", "2.345")]])
    rounded = matrix.scalar_multiply(3, context=Context(prec=3))
    assert rounded == RealComplexNumberMatrix([[RealComplexNumber("3.70", "7.04")]])
    assert rounded.element(1, 1).real.as_tuple().digits == (3, 7, 0)


def test_norms_with_context():
    assert DecimalVector.of(1, 1).euclidean_norm(context=Context(prec=5)) == Decimal("1.4142")
    assert RealComplexNumberVector.of(RealComplexNumber(3, 4)).max_norm(Context(prec=5)) == 5
    assert DecimalMatrix([["1.11", "-2.22"]]).max_abs_row_sum_norm(Context(prec=2)) == Decimal("3.3")
    assert DecimalMatrix([[1, 1], [1, 1]]).frobenius_norm(context=Context(prec=3)) == 2
    assert DecimalVector.of("0.5", 2).taxicab_distance(DecimalVector.of(0, "0.123"), Context(prec=2)) == Decimal("2.4")


def test_trace_and_sum_with_context():
    matrix = DecimalMatrix([["1.25", 0], [0, "1.25"]])
    assert matrix.trace() == Decimal("2.50")
    assert matrix.trace(context=Context(prec=1)) == 2
    assert matrix.add(matrix, Context(prec=2)) == DecimalMatrix([["2.5", 0], [0, "2.5"]])


# =============================================================================
# Validation
# =============================================================================


def test_exact_domains_reject_a_context():
    with pytest.raises(InvalidArgumentError, match="for context rounding but actual int"):
        IntegerMatrix([[1, 2], [3, 4]]).determinant(context=Context(prec=3))
    with pytest.raises(InvalidArgumentError, match="SimpleComplexNumber"):
        SimpleComplexNumberVector.of(1).add(SimpleComplexNumberVector.of(2), Context(prec=3))


def test_context_type_and_root_arguments():
    with pytest.raises(TypeError, match="expected decimal.Context"):
        DecimalMatrix([[1]]).trace(context=3)
    with pytest.raises(InvalidParameterError):
        DecimalVector.of(1, 1).euclidean_norm(precision=Decimal("1E-5"), context=Context(prec=5))
    with pytest.raises(InvalidParameterError):
        DecimalMatrix([[1]]).frobenius_norm(scale=2, context=Context(prec=5))


# =============================================================================
# Properties on random matrices
# =============================================================================


@pytest.mark.parametrize("matrix_class", CONTEXT_DOMAINS, ids=["decimal", "real_complex"])
@pytest.mark.parametrize("size", [2, 3, 4])
def test_results_have_at_most_prec_digits(math_random, matrix_class, size):
    """Closed forms, the rule of Sarrus and the Leibniz formula all round."""
    context = Context(prec=4)
    a = math_random.matrix(matrix_class, size, size)
    b = math_random.matrix(matrix_class, size, size)
    assert significant_digits(a.determinant(context=context)) <= 4
    assert significant_digits(a.trace(context)) <= 4
    assert all(significant_digits(x) <= 4 for x in a.multiply(b, context).elements())
    assert all(significant_digits(x) <= 4 for x in a.subtract(b, context).elements())
    assert significant_digits(a.max_abs_column_sum_norm(context)) <= 4
    assert significant_digits(a.frobenius_norm_pow2(context)) <= 4


@pytest.mark.parametrize("matrix_class", CONTEXT_DOMAINS, ids=["decimal", "real_complex"])
def test_wide_context_is_exact(math_random, matrix_class):
    """With enough digits every rounding is a no-op."""
    context = Context(prec=60)
    a = math_random.matrix(matrix_class, 3, 3)
    b = math_random.matrix(matrix_class, 3, 3)
    assert a.determinant(context=context) == a.determinant()
    assert a.multiply(b, context) == a @ b
    assert a.negate(context) == -a
    v = math_random.vector(matrix_class, 3)
    assert a.multiply_vector(v, context) == a @ v
    assert v.dyadic_product(v, context) == v.dyadic_product(v)
    assert v.euclidean_norm_pow2(context) == v.euclidean_norm_pow2()
