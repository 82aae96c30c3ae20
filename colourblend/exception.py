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
__all__ = ['ColourValueError', 'DegenerateColourError']


class _StringRepresentable(BaseException):
    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({", ".join(map(repr, self.args))})'


class ColourValueError(ValueError, _StringRepresentable):
    """A textual colour representation could not be interpreted"""


class DegenerateColourError(ColourValueError):
    """A colour holds a non-finite channel that has no textual representation"""
