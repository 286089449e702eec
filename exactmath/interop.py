#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Conversion of vectors and matrices to sympy and back

Elements are converted exactly: ints to sympy.Integer, Decimals to
sympy.Rational and complex numbers to a + b*I. The reverse direction accepts
sympy matrices whose entries are integers (IntegerMatrix), rationals with a
finite decimal expansion (DecimalMatrix), Gaussian integers
(SimpleComplexNumberMatrix) or complex numbers whose parts have a finite
decimal expansion (RealComplexNumberMatrix).
"""

from decimal import Decimal
from typing import Union

import sympy

from exactmath.errors import require_non_null, InvalidArgumentError
from exactmath.linear import (AbstractMatrix, AbstractVector, IntegerMatrix, DecimalMatrix, SimpleComplexNumberMatrix,
                              RealComplexNumberMatrix)
from exactmath.number import SimpleComplexNumber, RealComplexNumber


def vector_to_sympy(vector: AbstractVector) -> sympy.Matrix:
    """Column matrix with the exact elements of vector"""
    require_non_null(vector, 'vector')
    ops = vector.operations()
    return sympy.Matrix([ops.to_sympy(x) for x in vector.elements()])


def matrix_to_sympy(matrix: AbstractMatrix) -> sympy.Matrix:
    require_non_null(matrix, 'matrix')
    ops = matrix.operations()
    return sympy.Matrix([[ops.to_sympy(x) for x in row.elements()] for row in matrix.rows()])


def _has_finite_expansion(value: sympy.Rational) -> bool:
    # no prime factors besides 2 and 5 in the denominator
    q = int(value.q)
    return q == 2**sympy.multiplicity(2, q) * 5**sympy.multiplicity(5, q)


def sympy_to_decimal(value: sympy.Expr) -> Decimal:
    """Exact Decimal of a rational with a finite decimal expansion"""
    value = sympy.nsimplify(value, rational=True)
    if not value.is_Rational:
        raise InvalidArgumentError(f"expected rational number but actual {value}")
    if not _has_finite_expansion(value):
        raise InvalidArgumentError(f"expected finite decimal expansion but actual {value}")
    q = int(value.q)
    digits = max(sympy.multiplicity(2, q), sympy.multiplicity(5, q))
    return Decimal(int(value.p) * (10**digits // q)).scaleb(-digits)


def from_sympy(matrix: sympy.Matrix) -> Union[IntegerMatrix, DecimalMatrix, SimpleComplexNumberMatrix,
                                              RealComplexNumberMatrix]:
    """
    Exact matrix of the smallest fitting domain for a sympy matrix.

    Integer entries give an IntegerMatrix, Gaussian integers a
    SimpleComplexNumberMatrix. Entries whose real and imaginary parts are
    rationals with a finite decimal expansion give a DecimalMatrix, or a
    RealComplexNumberMatrix if some imaginary part is not zero.

    Raises:
        InvalidArgumentError: If a real or imaginary part is irrational or has no finite decimal expansion
    """
    require_non_null(matrix, 'matrix')
    parts = [[sympy.nsimplify(matrix[i, j], rational=True).as_real_imag() for j in range(matrix.cols)]
             for i in range(matrix.rows)]
    _check_parts(matrix, parts, lambda x: x.is_Rational, "rational real and imaginary parts")
    real = all(imaginary == 0 for row in parts for _, imaginary in row)
    if all(x.is_Integer and y.is_Integer for row in parts for x, y in row):
        if real:
            return IntegerMatrix([[int(x) for x, _ in row] for row in parts])
        return SimpleComplexNumberMatrix([[SimpleComplexNumber(int(x), int(y)) for x, y in row] for row in parts])
    _check_parts(matrix, parts, _has_finite_expansion, "finite decimal expansion")
    if real:
        return DecimalMatrix([[sympy_to_decimal(x) for x, _ in row] for row in parts])
    return RealComplexNumberMatrix([[RealComplexNumber(sympy_to_decimal(x), sympy_to_decimal(y)) for x, y in row]
                                    for row in parts])


def _check_parts(matrix: sympy.Matrix, parts: list, condition, expected: str):
    for i, row in enumerate(parts):
        for j, (x, y) in enumerate(row):
            if not (condition(x) and condition(y)):
                raise InvalidArgumentError(f"expected {expected} but actual {matrix[i, j]}")
