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
"""Conversion module"""
from __future__ import annotations

__all__ = ['ConvertColour']

import math
from typing import Final, Tuple

import numpy as np
from numpy.typing import NDArray

from ._logging import logger
from .misc import cbrt, clamp_value, div, wrap_degrees
from .types import Tup3


class ConvertColour:
    """
    Colour conversion class.

    RGB is linear and normalised to 0.0 - 1.0, no sRGB companding is applied.
    Nothing is clamped except the S, V and L inputs of the hue based models.
    Degenerate inputs yield inf or nan instead of raising.
    """

    # Reference white
    D65_XYZ: Final[Tup3[float]] = (95.047, 100.000, 108.883)
    EPSILON: Final[float] = 0.008856
    KAPPA: Final[float] = 903.3

    _D65_DEN: Final[float] = D65_XYZ[0] + 15 * D65_XYZ[1] + 3 * D65_XYZ[2]
    UR: Final[float] = 4 * D65_XYZ[0] / _D65_DEN
    VR: Final[float] = 9 * D65_XYZ[1] / _D65_DEN

    RGB_TO_XYZ: Final[NDArray[np.float64]] = np.array(
        [(0.4124564, 0.3575761, 0.1804375),
         (0.2126729, 0.7151522, 0.0721750),
         (0.0193339, 0.1191920, 0.9503041)],
        np.float64
    )
    XYZ_TO_RGB: Final[NDArray[np.float64]] = np.array(
        [(3.2404542, -1.5371385, -0.4985314),
         (-0.9692660, 1.8760108, 0.0415560),
         (0.0556434, -0.2040259, 1.0572252)],
        np.float64
    )

    @staticmethod
    def _dot(conv_mat: NDArray[np.float64], a: float, b: float, c: float) -> Tuple[float, float, float]:
        with np.errstate(invalid='ignore', over='ignore'):
            x, y, z = np.dot(conv_mat, np.array((a, b, c), np.float64))
        return float(x), float(y), float(z)

    @staticmethod
    def _hue(r: float, g: float, b: float, max_: float, delta: float) -> float:
        if delta <= 0:
            return 0.0
        if r >= max_:
            h = div(g - b, delta) * 60
        elif g >= max_:
            h = (div(b - r, delta) + 2) * 60
        else:
            h = (div(r - g, delta) - 2) * 60
        return wrap_degrees(h)

    @staticmethod
    def _conic(h: float, max_: float, min_: float) -> Tuple[float, float, float]:
        # Tent centred on 0°, 120° and 240°, flat at max_ within 60° of the centre
        def _f(center: float) -> float:
            return clamp_value(abs(wrap_degrees(h - center) - 180) / 60 - 1, 0.0, 1.0) * (max_ - min_) + min_
        return _f(0), _f(120), _f(240)

    @staticmethod
    def _polar_to_cartesian(c: float, h: float) -> Tuple[float, float]:
        with np.errstate(invalid='ignore'):
            hr = np.radians(np.float64(h))
            return float(np.cos(hr)) * c, float(np.sin(hr)) * c

    # -------------------------------------------------------------------------
    # ----------------------- Hue and Saturation based ------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float) -> Tuple[float, float, float]:
        s, v = clamp_value(s, 0.0, 1.0), clamp_value(v, 0.0, 1.0)
        return cls._conic(h, v, v * (1 - s))

    @classmethod
    def hsl_to_rgb(cls, h: float, s: float, l: float) -> Tuple[float, float, float]:
        s, l = clamp_value(s, 0.0, 1.0), clamp_value(l, 0.0, 1.0)
        d = (0.5 - abs(l - 0.5)) * s
        return cls._conic(h, l + d, l - d)

    @classmethod
    def rgb_to_hsv(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        max_, min_ = max(r, g, b), min(r, g, b)
        delta = max_ - min_
        s = div(delta, max_) if max_ else 0.0
        return cls._hue(r, g, b, max_, delta), s, max_

    @classmethod
    def rgb_to_hsl(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        max_, min_ = max(r, g, b), min(r, g, b)
        delta = max_ - min_
        l = (max_ + min_) / 2
        s = div(delta, 1 - abs(2 * l - 1)) if delta else 0.0
        return cls._hue(r, g, b, max_, delta), s, l

    # -------------------------------------------------------------------------
    # ---------------------------- XYZ Conversions ----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def rgb_to_xyz(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_RGB_to_XYZ.html
        return cls._dot(cls.RGB_TO_XYZ, r, g, b)

    @classmethod
    def xyz_to_rgb(cls, x: float, y: float, z: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_RGB.html
        return cls._dot(cls.XYZ_TO_RGB, x, y, z)

    # -------------------------------------------------------------------------
    # ---------------------------- Yxy Conversions ----------------------------
    # -------------------------------------------------------------------------
    @staticmethod
    def xyz_to_yxy(x: float, y: float, z: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_xyY.html
        total_stimuli = x + y + z
        if not total_stimuli:
            logger.debug(f'xyz_to_yxy: total stimuli of XYZ({x}, {y}, {z}) is zero, chromaticity is undefined')
        return y, div(x, total_stimuli), div(y, total_stimuli)

    @staticmethod
    def yxy_to_xyz(Y: float, x: float, y: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_xyY_to_XYZ.html
        if not y:
            logger.debug(f'yxy_to_xyz: chromaticity y of Yxy({Y}, {x}, {y}) is zero')
        total_stimuli = div(Y, y)
        return x * total_stimuli, Y, (1 - x) * total_stimuli - Y

    @classmethod
    def rgb_to_yxy(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        xyz = cls.rgb_to_xyz(r, g, b)
        return cls.xyz_to_yxy(*xyz)

    @classmethod
    def yxy_to_rgb(cls, Y: float, x: float, y: float) -> Tuple[float, float, float]:
        xyz = cls.yxy_to_xyz(Y, x, y)
        return cls.xyz_to_rgb(*xyz)

    # -------------------------------------------------------------------------
    # ---------------------------- Lab Conversions ----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def xyz_to_lab(cls, x: float, y: float, z: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_Lab.html
        xr, yr, zr = (a / b for a, b in zip((x, y, z), cls.D65_XYZ))
        fx, fy, fz = (cbrt(a) if a > cls.EPSILON else (cls.KAPPA * a + 16) / 116 for a in (xr, yr, zr))
        return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

    @classmethod
    def lab_to_xyz(cls, l: float, a: float, b: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_Lab_to_XYZ.html
        fy = (l + 16) / 116
        fx = a / 500 + fy
        fz = fy - b / 200

        def _finv(f: float) -> float:
            cb = f * f * f
            return cb if cb > cls.EPSILON else (116 * f - 16) / cls.KAPPA

        yr = fy * fy * fy if l > cls.KAPPA * cls.EPSILON else l / cls.KAPPA
        xr, zr = _finv(fx), _finv(fz)
        x, y, z = (n * m for n, m in zip((xr, yr, zr), cls.D65_XYZ))
        return x, y, z

    @classmethod
    def rgb_to_lab(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        xyz = cls.rgb_to_xyz(r, g, b)
        return cls.xyz_to_lab(*xyz)

    @classmethod
    def lab_to_rgb(cls, l: float, a: float, b: float) -> Tuple[float, float, float]:
        xyz = cls.lab_to_xyz(l, a, b)
        return cls.xyz_to_rgb(*xyz)

    # -------------------------------------------------------------------------
    # ---------------------------- Luv Conversions ----------------------------
    # -------------------------------------------------------------------------
    @classmethod
    def xyz_to_luv(cls, x: float, y: float, z: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_Luv.html
        yr = y / cls.D65_XYZ[1]
        den = x + 15 * y + 3 * z
        if not den:
            logger.debug(f'xyz_to_luv: XYZ({x}, {y}, {z}) has no chromaticity, u and v are undefined')
        up = div(4 * x, den)
        vp = div(9 * y, den)

        l = 116 * cbrt(yr) - 16 if yr > cls.EPSILON else cls.KAPPA * yr
        u = 13 * l * (up - cls.UR)
        v = 13 * l * (vp - cls.VR)
        return l, u, v

    @classmethod
    def luv_to_xyz(cls, l: float, u: float, v: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_Luv_to_XYZ.html
        u_den = u + 13 * l * cls.UR
        v_den = v + 13 * l * cls.VR
        if not u_den or not v_den:
            logger.debug(f'luv_to_xyz: Luv({l}, {u}, {v}) is degenerate')

        fy = (l + 16) / 116
        yr = fy * fy * fy if l > cls.KAPPA * cls.EPSILON else l / cls.KAPPA
        y = yr * cls.D65_XYZ[1]

        a = (div(52 * l, u_den) - 1) / 3
        b = -5 * y
        c = -1 / 3
        d = y * (div(39 * l, v_den) - 5)

        x = div(d - b, a - c)
        z = x * a + b
        return x, y, z

    @classmethod
    def rgb_to_luv(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        xyz = cls.rgb_to_xyz(r, g, b)
        return cls.xyz_to_luv(*xyz)

    @classmethod
    def luv_to_rgb(cls, l: float, u: float, v: float) -> Tuple[float, float, float]:
        xyz = cls.luv_to_xyz(l, u, v)
        return cls.xyz_to_rgb(*xyz)

    # -------------------------------------------------------------------------
    # ---------------------------- LCH Conversions ----------------------------
    # -------------------------------------------------------------------------
    @staticmethod
    def lab_to_lch_ab(l: float, a: float, b: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_Lab_to_LCH.html
        return l, math.hypot(a, b), wrap_degrees(math.degrees(math.atan2(b, a)))

    @classmethod
    def lch_ab_to_lab(cls, l: float, c: float, h: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_LCH_to_Lab.html
        return (l, *cls._polar_to_cartesian(c, h))

    @staticmethod
    def luv_to_lch_uv(l: float, u: float, v: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_Luv_to_LCH.html
        return l, math.hypot(u, v), wrap_degrees(math.degrees(math.atan2(v, u)))

    @classmethod
    def lch_uv_to_luv(cls, l: float, c: float, h: float) -> Tuple[float, float, float]:
        # http://www.brucelindbloom.com/index.html?Eqn_LCH_to_Luv.html
        return (l, *cls._polar_to_cartesian(c, h))

    @classmethod
    def rgb_to_lch_ab(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        lab = cls.rgb_to_lab(r, g, b)
        return cls.lab_to_lch_ab(*lab)

    @classmethod
    def rgb_to_lch_uv(cls, r: float, g: float, b: float) -> Tuple[float, float, float]:
        luv = cls.rgb_to_luv(r, g, b)
        return cls.luv_to_lch_uv(*luv)

    @classmethod
    def lch_ab_to_rgb(cls, l: float, c: float, h: float) -> Tuple[float, float, float]:
        lab = cls.lch_ab_to_lab(l, c, h)
        return cls.lab_to_rgb(*lab)

    @classmethod
    def lch_uv_to_rgb(cls, l: float, c: float, h: float) -> Tuple[float, float, float]:
        luv = cls.lch_uv_to_luv(l, c, h)
        return cls.luv_to_rgb(*luv)
