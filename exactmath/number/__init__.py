"""Scalar number types and the per-domain arithmetic operations"""

from .simple_complex_number import SimpleComplexNumber
from .real_complex_number import RealComplexNumber
from .polar_form import PolarForm
from .operations import (NumberOperations, IntegerOperations, DecimalOperations, SimpleComplexNumberOperations,
                         RealComplexNumberOperations)
