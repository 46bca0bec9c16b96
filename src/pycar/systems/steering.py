"""Steering subsystem."""

from __future__ import annotations

from pycar._constants import MAX_TURN_ANGLE
from pycar.exceptions import CarConfigError
from pycar.logger import CarLogger, ComponentLog, LogStyle
from pycar.models.state import SteeringState


class SteeringSystem:
    """Steering with a symmetric angle limit, in degrees."""

    def __init__(self, logger: CarLogger, *, max_angle: int = MAX_TURN_ANGLE, colors: bool = False) -> None:
        if max_angle <= 0:
            raise CarConfigError(f"max_angle must be positive, got {max_angle}", field="max_angle")
        self._log = ComponentLog(logger, "Steering", LogStyle.STEERING, colors=colors)
        self._max_angle = max_angle
        self._angle = 0
        self._log("Steering system initialized with wheels straightened.")

    def turn_wheel(self, angle: int) -> bool:
        if isinstance(angle, bool) or not isinstance(angle, int) or not -self._max_angle <= angle <= self._max_angle:
            self._log(f"Invalid angle. Must be between {-self._max_angle} and {self._max_angle}.")
            return False
        self._angle = angle
        self._log(f"Wheels turned to {angle} degrees.")
        return True

    def straighten_wheels(self) -> None:
        self._angle = 0
        self._log("Wheels straightened to the straight-ahead position.")

    @property
    def current_angle(self) -> int:
        return self._angle

    @property
    def max_angle(self) -> int:
        return self._max_angle

    def snapshot(self) -> SteeringState:
        return SteeringState(angle=self._angle, max_angle=self._max_angle)
