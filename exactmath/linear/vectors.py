"""Vectors over the four scalar domains"""

from decimal import Decimal

from exactmath.number.operations import (IntegerOperations, DecimalOperations, SimpleComplexNumberOperations,
                                         RealComplexNumberOperations)
from .abstract_vector import AbstractVector


class IntegerVector(AbstractVector[int]):
    """Vector of big integers; all norms except the Euclidean one are exact ints."""

    @classmethod
    def operations(cls) -> IntegerOperations:
        return IntegerOperations.instance()

    @classmethod
    def matrix_class(cls) -> type:
        from .matrices import IntegerMatrix
        return IntegerMatrix


class DecimalVector(AbstractVector[Decimal]):
    """Vector of big decimals with exact addition and multiplication."""

    @classmethod
    def operations(cls) -> DecimalOperations:
        return DecimalOperations.instance()

    @classmethod
    def matrix_class(cls) -> type:
        from .matrices import DecimalMatrix
        return DecimalMatrix


class SimpleComplexNumberVector(AbstractVector['SimpleComplexNumber']):
    """
    Vector of complex numbers with int components.

    The taxicab and max norms sum or compare the Decimal absolute values of
    the elements, euclidean_norm_pow2 is the exact int sum of abs_pow2.
    """

    @classmethod
    def operations(cls) -> SimpleComplexNumberOperations:
        return SimpleComplexNumberOperations.instance()

    @classmethod
    def matrix_class(cls) -> type:
        from .matrices import SimpleComplexNumberMatrix
        return SimpleComplexNumberMatrix


class RealComplexNumberVector(AbstractVector['RealComplexNumber']):
    """Vector of complex numbers with Decimal components."""

    @classmethod
    def operations(cls) -> RealComplexNumberOperations:
        return RealComplexNumberOperations.instance()

    @classmethod
    def matrix_class(cls) -> type:
        from .matrices import RealComplexNumberMatrix
        return RealComplexNumberMatrix


def integer_zero_vector(size: int) -> IntegerVector:
    return IntegerVector.zero_vector(size)


def decimal_zero_vector(size: int) -> DecimalVector:
    return DecimalVector.zero_vector(size)


def simple_complex_number_zero_vector(size: int) -> SimpleComplexNumberVector:
    return SimpleComplexNumberVector.zero_vector(size)


def real_complex_number_zero_vector(size: int) -> RealComplexNumberVector:
    return RealComplexNumberVector.zero_vector(size)
