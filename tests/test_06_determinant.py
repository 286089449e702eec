"""Determinants: closed forms, rule of Sarrus, Leibniz formula and cross-checks against sympy."""
import logging

import pytest
import sympy

from exactmath import IntegerMatrix, DecimalMatrix, SimpleComplexNumberMatrix, SimpleComplexNumber
from exactmath.linear import abstract_matrix


def test_two_by_two():
    assert IntegerMatrix([[1, 2], [3, 4]]).determinant() == -2


def test_one_by_one():
    assert IntegerMatrix([[-7]]).determinant() == -7


def test_sarrus():
    assert IntegerMatrix([[2, -3, 1], [2, 0, -1], [1, 4, 5]]).determinant() == 49
    assert IntegerMatrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).determinant() == 0


def test_leibniz():
    matrix = IntegerMatrix([[1, 0, 2, -1], [3, 0, 0, 5], [2, 1, 4, -3], [1, 0, 5, 0]])
    assert matrix.determinant() == 30


def test_decimal_determinant_is_exact():
    matrix = DecimalMatrix([["0.1", "0.2"], ["0.3", "0.4"]])
    assert matrix.determinant() == sympy_det_as_decimal(matrix)


def test_complex_determinant():
    i = SimpleComplexNumber.IMAGINARY
    matrix = SimpleComplexNumberMatrix([[i, 1], [1, i]])
    assert matrix.determinant() == SimpleComplexNumber(-2, 0)


def test_triangular_shortcut(math_random, matrix_class):
    for size in (2, 3, 5, 6):
        upper = math_random.upper_triangular(matrix_class, size)
        ops = matrix_class.operations()
        diagonal = ops.product(upper.element(i, i) for i in range(1, size + 1))
        assert upper.determinant() == diagonal
        assert upper.transpose().determinant() == diagonal


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_against_sympy(math_random, matrix_class, size):
    matrix = math_random.matrix(matrix_class, size, size)
    ops = matrix_class.operations()
    difference = matrix.to_sympy().det() - ops.to_sympy(matrix.determinant())
    assert sympy.expand(difference) == 0


def test_determinant_properties(math_random, matrix_class):
    a = math_random.matrix(matrix_class, 4, 4)
    b = math_random.matrix(matrix_class, 4, 4)
    r = math_random.scalar(matrix_class)
    ops = matrix_class.operations()
    assert (a @ b).determinant() == ops.multiply(a.determinant(), b.determinant())
    assert a.transpose().determinant() == a.determinant()
    assert a.scalar_multiply(r).determinant() == ops.multiply(ops.product([r] * 4), a.determinant())
    assert matrix_class.identity_matrix(4).determinant() == ops.one()
    assert matrix_class.zero_matrix(4, 4).determinant() == ops.zero()


def test_leibniz_warning(monkeypatch, caplog):
    """Sizes above the warning threshold log the factorial cost."""
    monkeypatch.setattr(abstract_matrix, "LEIBNIZ_WARNING_SIZE", 3)
    matrix = IntegerMatrix([[1, 2, 3, 4], [2, 3, 4, 1], [3, 4, 1, 2], [4, 1, 2, 3]])
    with caplog.at_level(logging.WARNING, logger="exactmath.linear.abstract_matrix"):
        assert matrix.determinant() == 160
    assert any("permutations" in record.message for record in caplog.records)


def sympy_det_as_decimal(matrix):
    from exactmath.interop import sympy_to_decimal
    return sympy_to_decimal(matrix.to_sympy().det())
