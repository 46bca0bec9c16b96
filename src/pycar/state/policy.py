"""Deterministic transition policy.

This module intentionally contains *no* mutation and no logging.  The
:class:`~pycar.car.Car` facade asks the policy first and only then
touches its subsystems.
"""

from __future__ import annotations

from typing import Protocol

from pycar.models.state import Gear
from pycar.state.views import BrakeView, EngineView, TransmissionView


class CarPolicy(Protocol):
    """Structural policy interface accepted by :class:`~pycar.car.Car`."""

    def can_start(self, engine: EngineView, transmission: TransmissionView, brakes: BrakeView) -> bool:
        ...

    def can_stop(self, engine: EngineView, transmission: TransmissionView) -> bool:
        ...

    def can_accelerate(self, engine: EngineView, transmission: TransmissionView, brakes: BrakeView) -> bool:
        ...

    def can_reverse(self, transmission: TransmissionView, brakes: BrakeView) -> bool:
        ...


class DefaultCarPolicy:
    """Stateless rule set gating start, stop, acceleration and reverse.

    Policy:
    - start: engine off, in Park, no brake force.
    - stop: engine running and out of Park.
    - accelerate: engine running, out of Park, no brake force.
    - reverse: in Reverse with the brakes held.
    """

    def can_start(self, engine: EngineView, transmission: TransmissionView, brakes: BrakeView) -> bool:
        if engine.is_active:
            return False
        if not transmission.is_in_park:
            return False
        return brakes.current_force == 0

    def can_stop(self, engine: EngineView, transmission: TransmissionView) -> bool:
        if not engine.is_active:
            return False
        return not transmission.is_in_park

    def can_accelerate(self, engine: EngineView, transmission: TransmissionView, brakes: BrakeView) -> bool:
        if not engine.is_active:
            return False
        if transmission.is_in_park:
            return False
        # Accelerating against the brakes is never allowed.
        return brakes.current_force == 0

    def can_reverse(self, transmission: TransmissionView, brakes: BrakeView) -> bool:
        if transmission.current_gear != Gear.REVERSE:
            return False
        return brakes.current_force > 0
