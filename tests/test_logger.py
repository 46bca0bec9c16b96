from __future__ import annotations

import logging

import pytest

from pycar.exceptions import CarError, CarLoggerError
from pycar.logger import ComponentLog, ConsoleLogger, LogStyle, RecordingLogger


def test_component_log_prefixes_messages() -> None:
    sink = RecordingLogger()
    log = ComponentLog(sink, "Engine", LogStyle.ENGINE)
    log("Engine started.")
    assert sink.messages == ["[Engine] Engine started."]
    assert log.component == "Engine"


def test_component_log_colors_only_when_enabled() -> None:
    sink = RecordingLogger()
    ComponentLog(sink, "Brakes", LogStyle.BRAKING, colors=True)("held")
    ComponentLog(sink, "Brakes", None, colors=True)("held")
    assert sink.messages == ["\033[31m[Brakes]\033[0m held", "[Brakes] held"]


def test_component_log_requires_logger() -> None:
    with pytest.raises(CarLoggerError, match="Engine requires a logger"):
        ComponentLog(None, "Engine")
    assert issubclass(CarLoggerError, CarError)


def test_log_style_wrap_resets() -> None:
    assert LogStyle.STEERING.wrap("x") == "\033[33mx\033[0m"


def test_console_logger_emits_info(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="pycar.console"):
        ConsoleLogger().log("hello")
    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [("pycar.console", logging.INFO, "hello")]


def test_console_logger_uses_given_logger(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("tests.custom")
    with caplog.at_level(logging.INFO, logger="tests.custom"):
        ConsoleLogger(custom).log("routed")
    assert caplog.records[-1].name == "tests.custom"


def test_recording_logger_clear() -> None:
    sink = RecordingLogger()
    sink.log("a")
    sink.clear()
    assert sink.messages == []
