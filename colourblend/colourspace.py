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
"""Colourspace records module"""
from __future__ import annotations

__all__ = [
    'RGBValue', 'HSVValue', 'HSLValue',
    'XYZValue', 'YxyValue', 'LabValue', 'LuvValue', 'LCHabValue', 'LCHuvValue'
]

from typing import NamedTuple


class RGBValue(NamedTuple):
    """Linear RGB, channels conventionally in 0.0 - 1.0"""
    r: float
    g: float
    b: float
    alpha: float


class HSVValue(NamedTuple):
    """HSV with hue in degrees 0.0 - 360.0"""
    h: float
    s: float
    v: float
    alpha: float


class HSLValue(NamedTuple):
    """HSL with hue in degrees 0.0 - 360.0"""
    h: float
    s: float
    l: float
    alpha: float


class XYZValue(NamedTuple):
    """CIE 1931 XYZ tristimulus values"""
    x: float
    y: float
    """Luminance value"""
    z: float
    alpha: float


class YxyValue(NamedTuple):
    """Luminance Y and chromaticity coordinates x, y"""
    Y: float
    x: float
    y: float
    alpha: float


class LabValue(NamedTuple):
    """CIE L*a*b* relative to D65"""
    L: float
    a: float
    b: float
    alpha: float


class LuvValue(NamedTuple):
    """CIE L*u*v* relative to D65"""
    L: float
    u: float
    v: float
    alpha: float


class LCHabValue(NamedTuple):
    """Cylindrical L*a*b*, hue angle in degrees"""
    L: float
    C: float
    H: float
    alpha: float


class LCHuvValue(NamedTuple):
    """Cylindrical L*u*v*, hue angle in degrees"""
    L: float
    C: float
    H: float
    alpha: float
