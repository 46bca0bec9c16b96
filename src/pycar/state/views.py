"""Read-only views the transition policy is evaluated against.

Live subsystems and the frozen snapshot models both satisfy these
protocols.
"""

from __future__ import annotations

from typing import Protocol

from pycar.models.state import Gear


class EngineView(Protocol):
    @property
    def is_active(self) -> bool:
        ...


class TransmissionView(Protocol):
    @property
    def current_gear(self) -> Gear:
        ...

    @property
    def is_in_park(self) -> bool:
        ...


class BrakeView(Protocol):
    @property
    def current_force(self) -> int:
        ...

    @property
    def is_braking(self) -> bool:
        ...
