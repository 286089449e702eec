import random
from decimal import Decimal

import pytest
from exactmath import (IntegerMatrix, DecimalMatrix, SimpleComplexNumberMatrix, RealComplexNumberMatrix,
                       IntegerVector, DecimalVector, SimpleComplexNumberVector, RealComplexNumberVector,
                       SimpleComplexNumber, RealComplexNumber)

BOUND = 10


class MathRandom:
    """Seeded source of random scalars, vectors and matrices for the four domains."""

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)

    def integer(self, bound: int = BOUND) -> int:
        return self.rng.randint(-bound, bound)

    def decimal(self, bound: int = BOUND, scale: int = 2) -> Decimal:
        return Decimal(self.rng.randint(-bound * 10**scale, bound * 10**scale)).scaleb(-scale)

    def simple_complex(self, bound: int = BOUND) -> SimpleComplexNumber:
        return SimpleComplexNumber(self.integer(bound), self.integer(bound))

    def real_complex(self, bound: int = BOUND, scale: int = 2) -> RealComplexNumber:
        return RealComplexNumber(self.decimal(bound, scale), self.decimal(bound, scale))

    def scalar(self, matrix_class: type):
        return {
            IntegerMatrix: self.integer,
            DecimalMatrix: self.decimal,
            SimpleComplexNumberMatrix: self.simple_complex,
            RealComplexNumberMatrix: self.real_complex
        }[matrix_class]()

    def matrix(self, matrix_class: type, row_size: int, column_size: int):
        return matrix_class([[self.scalar(matrix_class) for _ in range(column_size)] for _ in range(row_size)])

    def vector(self, matrix_class: type, size: int):
        return matrix_class.vector_class()([self.scalar(matrix_class) for _ in range(size)])

    def upper_triangular(self, matrix_class: type, size: int):
        zero = matrix_class.operations().zero()
        return matrix_class([[self.scalar(matrix_class) if j >= i else zero for j in range(size)] for i in range(size)])

    def lower_triangular(self, matrix_class: type, size: int):
        return self.upper_triangular(matrix_class, size).transpose()

    def diagonal(self, matrix_class: type, size: int):
        zero = matrix_class.operations().zero()
        return matrix_class([[self.scalar(matrix_class) if j == i else zero for j in range(size)] for i in range(size)])

    def symmetric(self, matrix_class: type, size: int):
        upper = self.upper_triangular(matrix_class, size)
        strict = upper.subtract(self._diagonal_of(upper))
        return upper.add(strict.transpose())

    def skew_symmetric(self, matrix_class: type, size: int):
        upper = self.upper_triangular(matrix_class, size)
        strict = upper.subtract(self._diagonal_of(upper))
        return strict.subtract(strict.transpose())

    @staticmethod
    def _diagonal_of(matrix):
        zero = matrix.operations().zero()
        n = matrix.row_size()
        return type(matrix)([[matrix.element(i, j) if i == j else zero for j in range(1, n + 1)]
                             for i in range(1, n + 1)])


@pytest.fixture
def math_random() -> MathRandom:
    """Provide a freshly seeded random source for every test."""
    return MathRandom()


@pytest.fixture(params=[IntegerMatrix, DecimalMatrix, SimpleComplexNumberMatrix, RealComplexNumberMatrix],
                ids=["int", "decimal", "simple_complex", "real_complex"])
def matrix_class(request: pytest.FixtureRequest) -> type:
    """Provide the matrix class of each scalar domain."""
    return request.param


@pytest.fixture
def vector_class(matrix_class: type) -> type:
    """Provide the vector class of the same scalar domain as matrix_class."""
    return matrix_class.vector_class()
