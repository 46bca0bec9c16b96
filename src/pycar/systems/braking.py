"""Braking subsystem."""

from __future__ import annotations

from pycar._constants import MAX_BRAKE_FORCE
from pycar.exceptions import CarConfigError
from pycar.logger import CarLogger, ComponentLog, LogStyle
from pycar.models.state import BrakeState


class BrakingSystem:
    """Brakes holding a force between 0 and ``max_force``.

    Out-of-range requests are rejected and leave the current force
    untouched; emergency braking always applies exactly ``max_force``.
    """

    def __init__(self, logger: CarLogger, *, max_force: int = MAX_BRAKE_FORCE, colors: bool = False) -> None:
        if max_force <= 0:
            raise CarConfigError(f"max_force must be positive, got {max_force}", field="max_force")
        self._log = ComponentLog(logger, "Brakes", LogStyle.BRAKING, colors=colors)
        self._max_force = max_force
        self._force = 0
        self._log("Braking system initialized.")

    def apply_force_on_brakes(self, force: int) -> bool:
        if isinstance(force, bool) or not isinstance(force, int) or not 0 <= force <= self._max_force:
            self._log(f"Invalid force. Must be between 0 and {self._max_force}.")
            return False
        self._force = force
        self._log(f"Brakes applied with force: {force}")
        return True

    def apply_emergency_brakes(self) -> None:
        self._force = self._max_force
        self._log(f"Emergency brakes applied with maximum force: {self._max_force}")

    def release_brakes(self) -> None:
        self._force = 0
        self._log("Brakes released.")

    @property
    def current_force(self) -> int:
        return self._force

    @property
    def is_braking(self) -> bool:
        return self._force > 0

    @property
    def max_force(self) -> int:
        return self._max_force

    def snapshot(self) -> BrakeState:
        return BrakeState(force=self._force, max_force=self._max_force)
