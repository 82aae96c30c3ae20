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

__all__: List[str] = []

import sys
from abc import ABC, ABCMeta
from enum import IntEnum
from threading import Lock
from typing import Any, Dict, List

import loguru

loguru.logger.remove(0)


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    USER_WARNING = 60
    USER_INFO = 70


def _loguru_format(record: loguru.Record) -> str:
    # Messages meant for the user are printed bare unless the sink is verbose
    if record['extra']['user'] and record['level'].no >= LogLevel.USER_WARNING and record['extra']['level'] >= LogLevel.ERROR:
        return '<level>{message}</level>\n'

    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level.name: <12}</level> | "
        "<cyan>{name}</cyan>:<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>\n{exception}"
    )


class SingletonMeta(ABCMeta):
    _instances: Dict[object, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class Singleton(ABC, metaclass=SingletonMeta):
    ...


class Logger(Singleton):
    __slots__ = ('__id', '__level')

    def __init__(self) -> None:
        self.__level = LogLevel.ERROR.value
        ids_ = loguru.logger.configure(
            handlers=[
                dict(sink=sys.stderr, level=self.__level, format=_loguru_format, backtrace=True, diagnose=True)
            ],
            levels=[  # type: ignore
                dict(name='USER WARNING', no=LogLevel.USER_WARNING, color='<yellow><bold>'),
                dict(name='USER INFO', no=LogLevel.USER_INFO, color='<white><bold>')
            ],
            extra=dict(user=False, level=self.__level)
        )
        self.__id = ids_.pop(0)

    @property
    def level(self) -> int:
        """Current level of the stderr sink"""
        return self.__level

    def set_level(self, level: int) -> None:
        """
        Replace the stderr sink with a new one filtering at ``level``

        :param level:       Minimum severity, see :class:`LogLevel`
        """
        loguru.logger.remove(self.__id)
        self.__level = int(level)
        self.__id = loguru.logger.add(
            sys.stderr, level=self.__level, format=_loguru_format, backtrace=True, diagnose=True
        )

    def trace(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).bind(user=False, level=self.__level).trace(message)

    def debug(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).bind(user=False, level=self.__level).debug(message)

    def user_warning(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).bind(user=True, level=self.__level).log('USER WARNING', message)

    def user_info(self, message: str, /, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).bind(user=True, level=self.__level).log('USER INFO', message)


logger = Logger()
