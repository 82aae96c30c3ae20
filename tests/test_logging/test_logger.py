from __future__ import annotations

from types import SimpleNamespace
from typing import Iterator, List

import loguru
import pytest
import pytest_check as check
from colourblend import BlendMode, Color, ConvertColour, LogLevel, logger
from colourblend._logging import Logger, _loguru_format


@pytest.fixture
def messages() -> Iterator[List[str]]:
    captured: List[str] = []
    sink_id = loguru.logger.add(lambda m: captured.append(str(m)), level=LogLevel.TRACE, format='{message}')
    yield captured
    loguru.logger.remove(sink_id)


def test_logger_is_a_singleton() -> None:
    check.is_(Logger(), logger)


def test_default_level() -> None:
    check.equal(logger.level, LogLevel.ERROR)


def test_set_level() -> None:
    try:
        logger.set_level(LogLevel.DEBUG)
        check.equal(logger.level, LogLevel.DEBUG)
        logger.set_level(LogLevel.WARNING)
        check.equal(logger.level, 30)
    finally:
        logger.set_level(LogLevel.ERROR)
    check.equal(logger.level, LogLevel.ERROR)


def test_degenerate_conversion_is_logged(messages: List[str]) -> None:
    Color.Yxy(1.0, 0.3, 0.0)
    check.is_true(any('yxy_to_xyz' in m for m in messages))


def test_black_luv_is_logged(messages: List[str]) -> None:
    Color.RGB(0, 0, 0).luv
    check.is_true(any('xyz_to_luv' in m for m in messages))


def test_black_yxy_is_logged(messages: List[str]) -> None:
    Color.RGB(0, 0, 0).yxy
    check.is_true(any('xyz_to_yxy' in m for m in messages))


@pytest.mark.parametrize('luv', [(0.0, 0.0, 0.0), (50, -13 * 50 * ConvertColour.UR, 10.0), (50, 10.0, -13 * 50 * ConvertColour.VR)])
def test_degenerate_luv_is_logged(messages: List[str], luv: tuple) -> None:
    Color.Luv(*luv)
    check.is_true(any('luv_to_xyz' in m for m in messages))


def test_softlight_negative_base_is_logged(messages: List[str]) -> None:
    BlendMode.SOFTLIGHT(-0.5, 0.75)
    check.is_true(any('SOFTLIGHT' in m for m in messages))


def test_blend_is_traced(messages: List[str]) -> None:
    Color.RGB(0.1, 0.2, 0.3).blend(Color.RGB(0.3, 0.2, 0.1), BlendMode.SCREEN)
    check.is_true(any('blend' in m and 'SCREEN' in m for m in messages))


def test_regular_values_are_quiet(messages: List[str]) -> None:
    Color.RGB(0.2, 0.4, 0.6).luv
    Color.Yxy(0.5, 0.3, 0.3)
    check.equal(messages, [])


def test_user_levels() -> None:
    records: List[str] = []
    sink_id = loguru.logger.add(
        lambda m: records.append(f'{m.record["level"].name}:{m.record["level"].no}:{m.record["message"]}'),
        level=LogLevel.USER_WARNING
    )
    try:
        logger.debug('hidden')
        logger.user_warning('careful')
        logger.user_info('done')
    finally:
        loguru.logger.remove(sink_id)
    check.equal(records, ['USER WARNING:60:careful', 'USER INFO:70:done'])


def test_user_messages_are_bare_on_quiet_sinks() -> None:
    user = dict(extra=dict(user=True, level=LogLevel.ERROR), level=SimpleNamespace(no=LogLevel.USER_WARNING))
    check.equal(_loguru_format(user), '<level>{message}</level>\n')  # type: ignore[arg-type]
    verbose = dict(extra=dict(user=True, level=LogLevel.DEBUG), level=SimpleNamespace(no=LogLevel.USER_INFO))
    check.is_in('{time', _loguru_format(verbose))  # type: ignore[arg-type]
    internal = dict(extra=dict(user=False, level=LogLevel.ERROR), level=SimpleNamespace(no=LogLevel.DEBUG))
    check.is_in('{time', _loguru_format(internal))  # type: ignore[arg-type]
