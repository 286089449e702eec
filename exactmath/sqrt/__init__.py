"""Square root approximation under arbitrary precision"""

from .square_root_calculator import SquareRootCalculator, sqrt, seed, is_perfect_square, sqrt_of_perfect_square

__all__ = ['SquareRootCalculator', 'sqrt', 'seed', 'is_perfect_square', 'sqrt_of_perfect_square']
