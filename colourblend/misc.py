# colourblend: colour values, colour model conversions and channel-wise compositing.
# Copyright (C) 2019 Antonio Strippoli (CoffeeStraw/YellowFlash)
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# colourblend is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
"""Miscellaneous and utility functions"""

__all__ = ['clamp_value', 'wrap_degrees', 'round_half_up', 'div', 'cbrt', 'sqrt']

import math

import numpy as np

from .types import Nb


def clamp_value(val: Nb, min_val: Nb, max_val: Nb) -> Nb:
    """
    Clamp value val between min_val and max_val.
    NaN goes through untouched.

    :param val:         Value to clamp
    :param min_val:     Minimum value
    :param max_val:     Maximum value
    :return:            Clamped value
    """
    return min_val if val < min_val else max_val if val > max_val else val  # type: ignore


def wrap_degrees(angle: float) -> float:
    """
    Wrap an angle into the range [0, 360)

    :param angle:       Angle in degrees
    :return:            Wrapped angle
    """
    return angle - 360 * math.floor(angle / 360) if math.isfinite(angle) else math.nan


def round_half_up(val: float) -> int:
    """
    Round to the nearest integer, ties going toward positive infinity

    :param val:         Finite value
    :return:            Rounded integer
    """
    return math.floor(val + 0.5)


# IEEE semantics: x/0 gives ±inf, 0/0 and sqrt(-x) give nan
def div(num: float, den: float) -> float:
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(num), np.float64(den)))


def cbrt(val: float) -> float:
    return float(np.cbrt(np.float64(val)))


def sqrt(val: float) -> float:
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(np.float64(val)))
