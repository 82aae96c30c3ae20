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
"""Colour module"""
from __future__ import annotations

__all__ = ['Color']

import math
import re
from decimal import Decimal
from typing import Any, Iterator, NoReturn, Tuple, Type

from ._logging import logger
from .blend import AlphaBlendMode, BlendMode
from .colourspace import (
    HSLValue, HSVValue, LabValue, LCHabValue, LCHuvValue, LuvValue, RGBValue, XYZValue, YxyValue
)
from .convert import ConvertColour as CC
from .exception import ColourValueError, DegenerateColourError
from .misc import clamp_value, round_half_up
from .types import BlendFunc, Pct, check_annotations


def _format_number(x: float) -> str:
    """
    Shortest round-tripping decimal form laid out like an ECMAScript number.
    Plain notation for 1e-6 <= |x| < 1e21, ``1e-7`` or ``1.5e+21`` otherwise,
    ``NaN`` and ``Infinity`` for non finite values.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if not x:
        return '0'
    sign, digits_, exponent = Decimal(repr(x)).normalize().as_tuple()
    digits = ''.join(map(str, digits_))
    k = len(digits)
    n = int(exponent) + k

    if k <= n <= 21:
        out = digits + '0' * (n - k)
    elif 0 < n <= 21:
        out = digits[:n] + '.' + digits[n:]
    elif -6 < n <= 0:
        out = '0.' + '0' * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ('.' + digits[1:] if k > 1 else '')
        out = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return '-' + out if sign else out


class Color:
    """
    Immutable colour value.

    The canonical storage is linear RGB plus alpha, every other colour model is a view
    computed on access. Channels are conventionally in the range 0.0 - 1.0 but are never
    clamped at construction so out of gamut intermediate values survive, use :py:meth:`clip`.

    .. code-block:: python

        >>> c = Color.HSV(120, 1.0, 1.0)
        >>> c.to_hex()
        '#00ff00'
        >>> str(c.blend(Color.RGB(1.0, 0.0, 0.0), BlendMode.SCREEN))
        'rgb(1, 1, 0)'
    """

    __slots__ = ('_r', '_g', '_b', '_a')

    _r: float
    _g: float
    _b: float
    _a: float

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        """
        Make a Color object from RGB values, prefer the named constructors

        :param r:           Red value
        :param g:           Green value
        :param b:           Blue value
        :param a:           Alpha value, defaults to 1.0
        """
        for name, value in zip(self.__slots__, (r, g, b, a)):
            object.__setattr__(self, name, float(value))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f'{self.__class__.__name__} is immutable, can\'t set {name}')

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f'{self.__class__.__name__} is immutable, can\'t delete {name}')

    def __iter__(self) -> Iterator[float]:
        return iter((self._r, self._g, self._b, self._a))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __copy__(self) -> Color:
        return self

    def __deepcopy__(self, *args: Any) -> Color:
        return self

    def __reduce__(self) -> Tuple[Type[Color], Tuple[float, float, float, float]]:
        return self.__class__, tuple(self)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return '%s(r=%r, g=%r, b=%r, a=%r)' % (self.__class__.__name__, *self)

    def __str__(self) -> str:
        return self.to_string()

    @property
    def r(self) -> float:
        """Red value"""
        return self._r

    @property
    def g(self) -> float:
        """Green value"""
        return self._g

    @property
    def b(self) -> float:
        """Blue value"""
        return self._b

    @property
    def a(self) -> float:
        """Alpha value"""
        return self._a

    # -------------------------------------------------------------------------
    # ------------------------------ Constructors -----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def RGB(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """
        RGB colour, stored as is

        :param r:           Red value (0 ≤ r ≤ 1)
        :param g:           Green value (0 ≤ g ≤ 1)
        :param b:           Blue value (0 ≤ b ≤ 1)
        :param a:           Alpha value (0 ≤ a ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls(r, g, b, a)

    @classmethod
    def HSV(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        """
        HSV colour. S and V are clamped to 0.0 - 1.0, hue is wrapped

        :param h:           Hue in degrees
        :param s:           Saturation (0 ≤ s ≤ 1)
        :param v:           Value (0 ≤ v ≤ 1)
        :param a:           Alpha value (0 ≤ a ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.RGB(*CC.hsv_to_rgb(h, s, v), a)

    @classmethod
    def HSL(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        """
        HSL colour. S and L are clamped to 0.0 - 1.0, hue is wrapped

        :param h:           Hue in degrees
        :param s:           Saturation (0 ≤ s ≤ 1)
        :param l:           Lightness (0 ≤ l ≤ 1)
        :param a:           Alpha value (0 ≤ a ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.RGB(*CC.hsl_to_rgb(h, s, l), a)

    @classmethod
    def XYZ(cls, x: float, y: float, z: float, a: float = 1.0) -> Color:
        """
        CIE XYZ colour

        :param x:           X value
        :param y:           Y value
        :param z:           Z value
        :param a:           Alpha value (0 ≤ a ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.RGB(*CC.xyz_to_rgb(x, y, z), a)

    @classmethod
    def Yxy(cls, Y: float, x: float, y: float, a: float = 1.0) -> Color:
        """
        Yxy colour. ``y == 0`` gives non finite channels

        :param Y:           Luminance
        :param x:           Chromaticity x (0 ≤ x ≤ 1)
        :param y:           Chromaticity y (0 < y ≤ 1)
        :param a:           Alpha value (0 ≤ a ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.XYZ(*CC.yxy_to_xyz(Y, x, y), a)

    @classmethod
    def Lab(cls, L: float, a: float, b: float, alpha: float = 1.0) -> Color:
        """
        CIE L*a*b* colour relative to D65

        :param L:           L*
        :param a:           a*
        :param b:           b*
        :param alpha:       Alpha value (0 ≤ alpha ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.XYZ(*CC.lab_to_xyz(L, a, b), alpha)

    @classmethod
    def Luv(cls, L: float, u: float, v: float, alpha: float = 1.0) -> Color:
        """
        CIE L*u*v* colour relative to D65.
        ``u + 13·L·ur == 0`` or ``v + 13·L·vr == 0`` gives non finite channels

        :param L:           L*
        :param u:           u*
        :param v:           v*
        :param alpha:       Alpha value (0 ≤ alpha ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.XYZ(*CC.luv_to_xyz(L, u, v), alpha)

    @classmethod
    def LCHab(cls, L: float, C: float, H: float, alpha: float = 1.0) -> Color:
        """
        Cylindrical L*a*b* colour

        :param L:           Lightness
        :param C:           Chroma
        :param H:           Hue angle in degrees
        :param alpha:       Alpha value (0 ≤ alpha ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.Lab(*CC.lch_ab_to_lab(L, C, H), alpha)

    @classmethod
    def LCHuv(cls, L: float, C: float, H: float, alpha: float = 1.0) -> Color:
        """
        Cylindrical L*u*v* colour

        :param L:           Lightness
        :param C:           Chroma
        :param H:           Hue angle in degrees
        :param alpha:       Alpha value (0 ≤ alpha ≤ 1), defaults to 1.0
        :return:            Color object
        """
        return cls.Luv(*CC.lch_uv_to_luv(L, C, H), alpha)

    @classmethod
    def from_hex(cls, _x: str, /) -> Color:
        """
        Make a Color object from a hexadecimal string

        .. code-block:: python

            >>> Color.from_hex('#FF000080')
            Color(r=1.0, g=0.0, b=0.0, a=0.5019607843137255)

        :param _x:          String of the form #RRGGBB or #RRGGBBAA, the leading # is optional
        :return:            Color object
        """
        if not (fmatch := re.fullmatch(r"#?([0-9A-F]{2})([0-9A-F]{2})([0-9A-F]{2})([0-9A-F]{2})?", _x.strip().upper())):
            raise ColourValueError(f'{cls.__name__}: "{_x}" is not in the expected format #RRGGBB or #RRGGBBAA')
        r, g, b, a = (int(h, 16) / 255 if h is not None else 1.0 for h in fmatch.groups())
        return cls.RGB(r, g, b, a)

    # -------------------------------------------------------------------------
    # --------------------------------- Views ---------------------------------
    # -------------------------------------------------------------------------
    @property
    def rgb(self) -> RGBValue:
        return RGBValue(self._r, self._g, self._b, self._a)

    @property
    def hsv(self) -> HSVValue:
        """HSV view, hue in degrees, saturation 0 for greys"""
        return HSVValue(*CC.rgb_to_hsv(self._r, self._g, self._b), self._a)

    @property
    def hsl(self) -> HSLValue:
        """HSL view, hue in degrees, saturation 0 for greys"""
        return HSLValue(*CC.rgb_to_hsl(self._r, self._g, self._b), self._a)

    @property
    def xyz(self) -> XYZValue:
        return XYZValue(*CC.rgb_to_xyz(self._r, self._g, self._b), self._a)

    @property
    def yxy(self) -> YxyValue:
        """Yxy view, chromaticity is nan for black"""
        return YxyValue(*CC.rgb_to_yxy(self._r, self._g, self._b), self._a)

    @property
    def lab(self) -> LabValue:
        return LabValue(*CC.rgb_to_lab(self._r, self._g, self._b), self._a)

    @property
    def luv(self) -> LuvValue:
        """L*u*v* view, u and v are nan for black"""
        return LuvValue(*CC.rgb_to_luv(self._r, self._g, self._b), self._a)

    @property
    def lch_ab(self) -> LCHabValue:
        return LCHabValue(*CC.rgb_to_lch_ab(self._r, self._g, self._b), self._a)

    @property
    def lch_uv(self) -> LCHuvValue:
        return LCHuvValue(*CC.rgb_to_lch_uv(self._r, self._g, self._b), self._a)

    # -------------------------------------------------------------------------
    # ------------------------------- Operations ------------------------------
    # -------------------------------------------------------------------------
    def get_complementary(self) -> Color:
        """
        Reflect every channel about the middle of this colour's own span,
        min(r, g, b) + max(r, g, b) - channel. Applying it twice gives back the colour.

        :return:            Complementary Color object
        """
        min_plus_max = min(self._r, self._g, self._b) + max(self._r, self._g, self._b)
        return self.RGB(min_plus_max - self._r, min_plus_max - self._g, min_plus_max - self._b, self._a)

    def blend(
        self, another: Color, /,
        blend_mode: BlendFunc = BlendMode.LIGHTER, alpha_mode: BlendFunc = AlphaBlendMode.MAX
    ) -> Color:
        """
        Blend two colours channel by channel.
        This colour is the base and ``another`` is the top, the result is not clamped.

        :param another:     Top colour
        :param blend_mode:  Function applied on R, G and B, see :class:`BlendMode`, defaults to LIGHTER
        :param alpha_mode:  Function applied on alpha, see :class:`AlphaBlendMode`, defaults to MAX
        :return:            Blended Color object
        """
        if not isinstance(another, Color):
            raise TypeError(f'blend: expected a Color, got "{type(another).__name__}"')
        logger.trace(
            f'blend: {self!r} with {another!r} using {getattr(blend_mode, "__name__", blend_mode)}'
            f' / {getattr(alpha_mode, "__name__", alpha_mode)}'
        )
        return self.RGB(
            blend_mode(self._r, another._r),
            blend_mode(self._g, another._g),
            blend_mode(self._b, another._b),
            alpha_mode(self._a, another._a),
        )

    @check_annotations
    def interpolate(self, another: Color, pct: Pct, /) -> Color:
        """
        Interpolate linearly every channel of the current object with another

        :param another:     Second colour
        :param pct:         Percentage value in the range 0.0 - 1.0
        :return:            New Color object
        """
        if not isinstance(another, Color):
            raise TypeError(f'interpolate: expected a Color, got "{type(another).__name__}"')
        return self.RGB(*((1 - pct) * v1 + pct * v2 for v1, v2 in zip(self, another)))

    def clip(self) -> Color:
        """
        Clamp every channel, alpha included, to 0.0 - 1.0

        :return:            Clipped Color object
        """
        return self.RGB(*(clamp_value(v, 0.0, 1.0) for v in self))

    def round(self, ndigits: int = 3) -> Color:
        """
        Round every channel to a given precision in decimal digits.

        :param ndigits:     Number of digits, defaults to 3
        :return:            Rounded Color object
        """
        return self.RGB(*(round(v, ndigits) for v in self))

    def to_hex(self) -> str:
        """
        Convert to a lower case hexadecimal string after clipping.
        Channels are scaled by 255 and rounded half up.
        The alpha byte is omitted when it is 0xff.

        :return:            String of the form #rrggbb or #rrggbbaa
        """
        clipped = self.clip()
        if any(math.isnan(v) for v in clipped):
            raise DegenerateColourError(f'to_hex: {self!r} has a nan channel')
        r, g, b, a = (round_half_up(v * 0xff) for v in clipped)
        return f'#{r:02x}{g:02x}{b:02x}' if a == 0xff else f'#{r:02x}{g:02x}{b:02x}{a:02x}'

    def to_string(self) -> str:
        """
        Dump the raw stored values, neither scaled nor clamped

        :return:            ``rgb(r, g, b)`` when alpha is 1.0, ``rgba(r, g, b, a)`` otherwise
        """
        r, g, b, a = map(_format_number, self)
        return f'rgb({r}, {g}, {b})' if self._a == 1.0 else f'rgba({r}, {g}, {b}, {a})'

