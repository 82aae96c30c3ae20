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
from __future__ import annotations

__all__ = ['interpolate']

from typing import Any, overload

from .colour import Color
from .types import Nb


@overload
def interpolate(val1: Nb, val2: Nb, pct: float = 0.5, acc: float = 1.0) -> Nb:
    ...


@overload
def interpolate(val1: Color, val2: Color, pct: float = 0.5, acc: float = 1.0) -> Color:
    ...


def interpolate(val1: object, val2: object, pct: float = 0.5, acc: float = 1.0) -> Any:
    """
    Interpolate val1 and val2 (Color objects or numbers) by percent value

    :param val1:        First value to interpolate
    :param val2:        Second value to interpolate
    :param pct:         Percent value of the interpolation
    :param acc:         Optional acceleration, defaults to 1.0
    :return:            Interpolated value of val1 and val2
    """
    pct = pct ** acc

    if isinstance(val1, (float, int)) and isinstance(val2, (float, int)):
        return val1 * (1 - pct) + val2 * pct
    if isinstance(val1, Color) and isinstance(val2, Color):
        return val1.interpolate(val2, pct)

    raise ValueError(f'interpolate: couldn\'t interpolate val1 "{val1}" and val2 "{val2}"')
