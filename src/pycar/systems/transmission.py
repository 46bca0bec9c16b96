"""Transmission subsystem."""

from __future__ import annotations

from pycar.logger import CarLogger, ComponentLog, LogStyle
from pycar.models.state import Gear, TransmissionState


class Transmission:
    """Three-position gear selector, starting in Park."""

    def __init__(self, logger: CarLogger, *, colors: bool = False) -> None:
        self._log = ComponentLog(logger, "Transmission", LogStyle.TRANSMISSION, colors=colors)
        self._gear = Gear.PARK
        self._log(f"Transmission initialized in gear {self._gear}.")

    def to_park(self) -> bool:
        return self.shift_to(Gear.PARK)

    def to_drive(self) -> bool:
        return self.shift_to(Gear.DRIVE)

    def to_reverse(self) -> bool:
        return self.shift_to(Gear.REVERSE)

    def shift_to(self, gear: Gear) -> bool:
        """Select *gear*; returns ``False`` without logging when already selected."""
        gear = Gear(gear)
        if gear == self._gear:
            return False
        self._gear = gear
        self._log(f"Gear -> {gear}.")
        return True

    @property
    def current_gear(self) -> Gear:
        return self._gear

    @property
    def is_in_park(self) -> bool:
        return self._gear == Gear.PARK

    def snapshot(self) -> TransmissionState:
        return TransmissionState(gear=self._gear)
