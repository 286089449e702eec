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
"""Default values and keyword names used across exactmath"""

from decimal import (Decimal, ROUND_UP, ROUND_DOWN, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, ROUND_HALF_DOWN,
                     ROUND_HALF_EVEN, ROUND_05UP)

# square root approximation
DEFAULT_PRECISION = Decimal('1E-10')
DEFAULT_SCALE = 10
DEFAULT_ROUNDING_MODE = ROUND_HALF_UP
DEFAULT_MAX_ITERATIONS = 1000
SQRT_GUARD_DIGITS = 5

ROUNDING_MODES = (ROUND_UP, ROUND_DOWN, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_HALF_EVEN,
                  ROUND_05UP)

# determinant
LEIBNIZ_WARNING_SIZE = 8

# significant digits of the trigonometric functions in polar forms
POLAR_FORM_PRECISION = 100

