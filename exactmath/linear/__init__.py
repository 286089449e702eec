"""Immutable vectors and matrices over exact scalar domains"""

from .abstract_vector import AbstractVector, VectorBuilder
from .abstract_matrix import AbstractMatrix, MatrixBuilder, Cell
from .vectors import *
from .matrices import *
