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
"""Internal types module"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import wraps
from inspect import signature
from typing import Any, Callable, Generic, Tuple, TypeVar, Union, cast, get_args, get_origin

from typing_extensions import Annotated, TypeAlias, get_type_hints

T = TypeVar('T')
F = TypeVar('F', bound=Callable[..., Any])
Nb = TypeVar('Nb', bound=Union[float, int])  # Number
Tup3 = Tuple[Nb, Nb, Nb]
Tup4 = Tuple[Nb, Nb, Nb, Nb]

BlendFunc: TypeAlias = Callable[[float, float], float]
"""Binary channel combinator taking (base, top) and returning the mixed value"""


class CheckAnnotated(Generic[T], ABC):
    @abstractmethod
    def check(self, val: T, param_name: str) -> None:
        ...


class ValueRangeIncInc(CheckAnnotated[float]):
    """Closed interval [x, y]"""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def check(self, val: float, param_name: str) -> None:
        if not self.x <= val <= self.y:
            raise ValueError(f'{param_name} "{val}" is not in the range [{self.x}, {self.y}]')


Pct = Annotated[float, ValueRangeIncInc(0.0, 1.0)]


def check_annotations(func: F, /) -> F:
    """
    Validate at call time every argument annotated with a :class:`CheckAnnotated` marker

    :param func:        Function to decorate
    :return:            Wrapped function
    """
    sig = signature(func)

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        type_hints = get_type_hints(func, include_extras=True)
        bound = sig.bind(*args, **kwargs)
        for param_name, value in bound.arguments.items():
            hint = type_hints.get(param_name)
            if get_origin(hint) is not Annotated:
                continue
            _, *hint_args = get_args(hint)
            for hint_arg in hint_args:
                if not isinstance(hint_arg, CheckAnnotated):
                    raise TypeError(f'{param_name}: unsupported annotation {hint_arg!r}')
                hint_arg.check(value, param_name)
        return func(*args, **kwargs)

    return cast(F, wrapper)
