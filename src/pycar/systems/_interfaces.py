"""Structural interfaces for the car subsystems.

:class:`~pycar.car.Car` only depends on these protocols, so any
subsystem implementation (or test double) can be composed into it.
"""

from __future__ import annotations

from typing import Protocol

from pycar.models.state import BrakeState, EngineState, Gear, SteeringState, TransmissionState


class EngineInterface(Protocol):
    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def accelerate(self, speed: int) -> bool:
        ...

    @property
    def is_active(self) -> bool:
        ...

    def snapshot(self) -> EngineState:
        ...


class TransmissionInterface(Protocol):
    def to_park(self) -> bool:
        ...

    def to_drive(self) -> bool:
        ...

    def to_reverse(self) -> bool:
        ...

    @property
    def current_gear(self) -> Gear:
        ...

    @property
    def is_in_park(self) -> bool:
        ...

    def snapshot(self) -> TransmissionState:
        ...


class SteeringInterface(Protocol):
    def turn_wheel(self, angle: int) -> bool:
        ...

    def straighten_wheels(self) -> None:
        ...

    def snapshot(self) -> SteeringState:
        ...


class BrakingInterface(Protocol):
    def apply_force_on_brakes(self, force: int) -> bool:
        ...

    def apply_emergency_brakes(self) -> None:
        ...

    def release_brakes(self) -> None:
        ...

    @property
    def current_force(self) -> int:
        ...

    @property
    def is_braking(self) -> bool:
        ...

    def snapshot(self) -> BrakeState:
        ...
