"""Engine subsystem."""

from __future__ import annotations

from pycar.logger import CarLogger, ComponentLog, LogStyle
from pycar.models.state import EngineState


class Engine:
    """On/off engine that remembers the last accepted speed."""

    def __init__(self, logger: CarLogger, *, colors: bool = False) -> None:
        self._log = ComponentLog(logger, "Engine", LogStyle.ENGINE, colors=colors)
        self._active = False
        self._speed = 0
        self._log("Engine initialized.")

    def start(self) -> None:
        self._active = True
        self._log("Engine started.")

    def stop(self) -> None:
        self._active = False
        self._speed = 0
        self._log("Engine stopped.")

    def accelerate(self, speed: int) -> bool:
        if not self._active:
            self._log("Cannot accelerate. Engine is not running.")
            return False
        if isinstance(speed, bool) or not isinstance(speed, int) or speed < 0:
            self._log(f"Invalid speed {speed}. Must be a non-negative whole number.")
            return False
        self._speed = speed
        self._log(f"Accelerating to {speed} km/h.")
        return True

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def speed(self) -> int:
        return self._speed

    def snapshot(self) -> EngineState:
        return EngineState(active=self._active, speed=self._speed)
