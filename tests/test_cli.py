from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from pycar._constants import CONSOLE_LOGGER_NAME
from pycar.cli import main, run_demo
from pycar.config import CarConfig
from pycar.logger import RecordingLogger
from pycar.models.state import Gear


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("PYCAR_MAX_BRAKE_FORCE", "PYCAR_MAX_TURN_ANGLE", "PYCAR_COLORS", "PYCAR_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    console = logging.getLogger(CONSOLE_LOGGER_NAME)
    handlers, level = root.handlers[:], root.level
    console_handlers, console_level, console_propagate = console.handlers[:], console.level, console.propagate
    yield
    # main() reconfigures logging; put back what pytest installed.
    root.handlers[:] = handlers
    root.setLevel(level)
    console.handlers[:] = console_handlers
    console.setLevel(console_level)
    console.propagate = console_propagate


def test_run_demo_sequence() -> None:
    sink = RecordingLogger()
    car = run_demo(sink, CarConfig())

    assert sink.messages[0] == "\n==== Initializing Car Components ===="
    assert "\n==== Car Simulation ====" in sink.messages
    simulation = sink.messages[sink.messages.index("\n==== Car Simulation ====") + 1 :]
    assert simulation == [
        "[Brakes] Emergency brakes applied with maximum force: 100",
        "[Car] Start rejected by policy.",
        "[Transmission] Gear -> D.",
        "[Car] Reverse rejected by policy.",
        "[Steering] Wheels turned to 30 degrees.",
        "[Steering] Wheels straightened to the straight-ahead position.",
        "[Brakes] Brakes applied with force: 50",
        "[Brakes] Emergency brakes applied with maximum force: 100",
        "[Car] Stop rejected by policy.",
        "\n==== Car test policy====",
        "[Car] Stop rejected by policy.",
    ]

    snapshot = car.snapshot()
    assert snapshot.gear is Gear.DRIVE
    assert snapshot.engine.is_active is False


def test_main_prints_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Log: [Engine] Engine initialized." in out
    assert "Log: [Car] Start rejected by policy." in out
    assert out.rstrip().endswith("Log: [Car] Stop rejected by policy.")


def test_main_rejects_flags(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--fast"])
    assert excinfo.value.code == 2


def test_demo_lines_ignore_diagnostic_level(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PYCAR_LOG_LEVEL", "WARNING")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Log: [Engine] Engine initialized." in out
    assert out.rstrip().endswith("Log: [Car] Stop rejected by policy.")


def test_debug_diagnostics_go_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PYCAR_LOG_LEVEL", "DEBUG")
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "DefaultCarPolicy" not in captured.out
    assert "DEBUG pycar.car: Start rejected by DefaultCarPolicy" in captured.err
    assert "Log: [Car] Start rejected by policy." in captured.out


def test_bad_environment_value_reported_as_usage_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PYCAR_MAX_TURN_ANGLE", "wide")
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "PYCAR_MAX_TURN_ANGLE must be an integer" in captured.err
    assert captured.out == ""
