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
"""Exception hierarchy and argument validation helpers

Every public operation of exactmath validates its arguments eagerly, before
any computation starts, with the helpers of this module. The exceptions derive
from the matching builtin exception as well (TypeError, ValueError,
RuntimeError), so callers that only know the builtins can still catch them.
Division by zero is reported with the builtin ZeroDivisionError.
"""

import numbers
from typing import Any, Optional


class ExactMathError(Exception):
    """Base class of all errors raised by exactmath"""


class NullArgumentError(ExactMathError, TypeError):
    """A required argument was None"""

    def __init__(self, parameter: str, message: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message if message is not None else f"{parameter} must not be None")


class NullValueError(NullArgumentError):
    """A builder was asked to build while some of its slots were still empty"""


class InvalidArgumentError(ExactMathError, ValueError):
    """An argument violates a precondition"""


class InvalidTypeError(InvalidArgumentError, TypeError):
    """An argument has a type the operation does not accept, for example a float index"""


class DimensionMismatchError(InvalidArgumentError):
    """Two operands have incompatible sizes"""


class IndexOutOfRangeError(InvalidArgumentError):
    """A 1-based index lies outside of its admissible range"""


class InvalidParameterError(InvalidArgumentError):
    """A configuration parameter (precision, scale, rounding mode, size, exponent) is invalid"""


class InvalidStateError(ExactMathError, RuntimeError):
    """The operation is not defined for the current state of the object"""


class MatrixNotSquareError(InvalidStateError):
    """A square-only operation was called on a non-square matrix"""


def require_non_null(value: Any, parameter: str) -> Any:
    """Return value, or raise NullArgumentError naming the parameter if it is None."""
    if value is None:
        raise NullArgumentError(parameter)
    return value


def check_argument(condition: bool, message: str, error: type = InvalidArgumentError):
    """Raise error(message) unless condition holds.

    Args:
        condition: The precondition that has to hold
        message: Message of the raised exception, usually 'expected ... but actual ...'
        error: Subclass of InvalidArgumentError to raise
    """
    if not condition:
        raise error(message)


def check_state(condition: bool, message: str, error: type = InvalidStateError):
    """Raise error(message) unless condition holds."""
    if not condition:
        raise error(message)


def check_integer(value: Any, parameter: str) -> int:
    """Return value as an int, or raise InvalidTypeError unless it is an integral number other than bool."""
    require_non_null(value, parameter)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidTypeError(f"expected int {parameter} but actual {type(value).__name__} {value!r}")
    return int(value)


def check_index(index: Any, size: int, parameter: str = 'index') -> int:
    """Check that a 1-based index is an int in [1, size] and return it."""
    index = check_integer(index, parameter)
    check_argument(1 <= index <= size, f"expected {parameter} in [1, {size}] but actual {index}", IndexOutOfRangeError)
    return index


def check_size(size: Any, parameter: str = 'size') -> int:
    """Check that a dimension is a positive integer and return it."""
    size = check_integer(size, parameter)
    check_argument(size > 0, f"expected {parameter} > 0 but actual {size}", InvalidParameterError)
    return size
