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
"""Blend modes module"""
from __future__ import annotations

__all__ = ['BlendMode', 'AlphaBlendMode']

from typing import Dict, Final, Tuple

from ._logging import logger
from .misc import sqrt
from .types import BlendFunc


class _BlendCatalog:
    """Base class for a named catalog of (base, top) -> result functions"""

    NAMES: Tuple[str, ...] = ()

    @classmethod
    def get(cls, name: str, /) -> BlendFunc:
        """
        Look up a blend function by its name, case insensitive

        :param name:        Name of the function, e.g. ``"overlay"``
        :return:            Blend function
        """
        key = name.upper()
        if key not in cls.NAMES:
            raise KeyError(f'{cls.__name__}: unknown mode "{name}", expected one of {", ".join(cls.NAMES)}')
        return getattr(cls, key)

    @classmethod
    def as_dict(cls) -> Dict[str, BlendFunc]:
        """
        :return:            Every function of the catalog keyed by name
        """
        return {name: getattr(cls, name) for name in cls.NAMES}


class BlendMode(_BlendCatalog):
    """
    Per-channel blend functions used by :py:meth:`Color.blend`.

    Every function takes the base channel value ``b`` and the top channel value ``t``,
    both conventionally in 0.0 - 1.0 although nothing is enforced, and the result is not clamped.
    Any other callable of the same shape can be passed to :py:meth:`Color.blend`.
    """

    NAMES: Final[Tuple[str, ...]] = (
        'LIGHTER', 'MULTIPLE', 'SCREEN', 'OVERLAY', 'HARDLIGHT', 'SOFTLIGHT', 'DIFFERENCE'
    )

    @staticmethod
    def LIGHTER(b: float, t: float) -> float:
        """Additive, can exceed 1.0"""
        return b + t

    @staticmethod
    def MULTIPLE(b: float, t: float) -> float:
        return b * t

    @staticmethod
    def SCREEN(b: float, t: float) -> float:
        return b + t - b * t

    @staticmethod
    def OVERLAY(b: float, t: float) -> float:
        """Multiply or screen depending on the base"""
        return 2 * b * t if b < 0.5 else 2 * (b + t - b * t) - 1

    @staticmethod
    def HARDLIGHT(b: float, t: float) -> float:
        """Multiply or screen depending on the top, mirror of OVERLAY"""
        return 2 * b * t if t < 0.5 else 2 * (b + t - b * t) - 1

    @staticmethod
    def SOFTLIGHT(b: float, t: float) -> float:
        """
        Pegtop-like soft light.
        The base must be non negative when ``t >= 0.5``, otherwise the result is nan.
        """
        if t < 0.5:
            return 2 * b * t + b * b * (1 - 2 * t)
        if b < 0:
            logger.debug(f'SOFTLIGHT: negative base {b} under a top of {t}, result is nan')
        return 2 * b * (1 - t) + sqrt(b) * (2 * t - 1)

    @staticmethod
    def DIFFERENCE(b: float, t: float) -> float:
        return abs(t - b)


class AlphaBlendMode(_BlendCatalog):
    """Alpha channel blend functions used by :py:meth:`Color.blend`"""

    NAMES: Final[Tuple[str, ...]] = ('MAX', 'XOR')

    @staticmethod
    def MAX(b: float, t: float) -> float:
        return max(b, t)

    @staticmethod
    def XOR(b: float, t: float) -> float:
        return abs(t - b)
