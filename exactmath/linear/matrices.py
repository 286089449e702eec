"""Matrices over the four scalar domains"""

from decimal import Decimal

from exactmath.number.operations import (IntegerOperations, DecimalOperations, SimpleComplexNumberOperations,
                                         RealComplexNumberOperations)
from .abstract_matrix import AbstractMatrix
from .vectors import IntegerVector, DecimalVector, SimpleComplexNumberVector, RealComplexNumberVector


class IntegerMatrix(AbstractMatrix[int]):
    """
    Matrix of big integers.

    is_invertible tests for a non-zero determinant, i.e. invertibility over the
    rationals. Over the integers themselves only determinants +1 and -1 admit
    an inverse with integer elements.
    """

    @classmethod
    def operations(cls) -> IntegerOperations:
        return IntegerOperations.instance()

    @classmethod
    def vector_class(cls) -> type:
        return IntegerVector


class DecimalMatrix(AbstractMatrix[Decimal]):

    @classmethod
    def operations(cls) -> DecimalOperations:
        return DecimalOperations.instance()

    @classmethod
    def vector_class(cls) -> type:
        return DecimalVector


class SimpleComplexNumberMatrix(AbstractMatrix['SimpleComplexNumber']):

    @classmethod
    def operations(cls) -> SimpleComplexNumberOperations:
        return SimpleComplexNumberOperations.instance()

    @classmethod
    def vector_class(cls) -> type:
        return SimpleComplexNumberVector


class RealComplexNumberMatrix(AbstractMatrix['RealComplexNumber']):

    @classmethod
    def operations(cls) -> RealComplexNumberOperations:
        return RealComplexNumberOperations.instance()

    @classmethod
    def vector_class(cls) -> type:
        return RealComplexNumberVector


def integer_zero_matrix(row_size: int, column_size: int) -> IntegerMatrix:
    return IntegerMatrix.zero_matrix(row_size, column_size)


def decimal_zero_matrix(row_size: int, column_size: int) -> DecimalMatrix:
    return DecimalMatrix.zero_matrix(row_size, column_size)


def simple_complex_number_zero_matrix(row_size: int, column_size: int) -> SimpleComplexNumberMatrix:
    return SimpleComplexNumberMatrix.zero_matrix(row_size, column_size)


def real_complex_number_zero_matrix(row_size: int, column_size: int) -> RealComplexNumberMatrix:
    return RealComplexNumberMatrix.zero_matrix(row_size, column_size)


def integer_identity_matrix(size: int) -> IntegerMatrix:
    return IntegerMatrix.identity_matrix(size)


def decimal_identity_matrix(size: int) -> DecimalMatrix:
    return DecimalMatrix.identity_matrix(size)


def simple_complex_number_identity_matrix(size: int) -> SimpleComplexNumberMatrix:
    return SimpleComplexNumberMatrix.identity_matrix(size)


def real_complex_number_identity_matrix(size: int) -> RealComplexNumberMatrix:
    return RealComplexNumberMatrix.identity_matrix(size)
