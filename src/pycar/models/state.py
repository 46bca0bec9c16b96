"""Subsystem state snapshots.

The engine, brake and transmission snapshots expose the same read-only
properties as the live subsystems (``is_active``, ``current_gear``,
``is_in_park``, ``current_force``, ``is_braking``), so a
:class:`~pycar.state.policy.CarPolicy` can be evaluated against either.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, NonNegativeInt, model_validator

from pycar._constants import MAX_BRAKE_FORCE, MAX_TURN_ANGLE
from pycar.models._base import CarBaseModel


class Gear(StrEnum):
    """Transmission gear, rendered by its selector letter."""

    PARK = "P"
    DRIVE = "D"
    REVERSE = "R"


class EngineState(CarBaseModel):
    """Engine snapshot."""

    active: bool = False
    speed: NonNegativeInt = Field(default=0, description="Last accepted speed in km/h.")

    @model_validator(mode="after")
    def _idle_when_inactive(self) -> EngineState:
        if not self.active and self.speed:
            raise ValueError("an inactive engine cannot report a speed")
        return self

    @property
    def is_active(self) -> bool:
        return self.active


class TransmissionState(CarBaseModel):
    """Transmission snapshot."""

    gear: Gear = Gear.PARK

    @property
    def current_gear(self) -> Gear:
        return self.gear

    @property
    def is_in_park(self) -> bool:
        return self.gear == Gear.PARK


class BrakeState(CarBaseModel):
    """Braking system snapshot."""

    force: NonNegativeInt = 0
    max_force: int = Field(default=MAX_BRAKE_FORCE, gt=0)

    @model_validator(mode="after")
    def _force_within_limit(self) -> BrakeState:
        if self.force > self.max_force:
            raise ValueError(f"force must be between 0 and {self.max_force}, got {self.force}")
        return self

    @property
    def current_force(self) -> int:
        return self.force

    @property
    def is_braking(self) -> bool:
        return self.force > 0


class SteeringState(CarBaseModel):
    """Steering system snapshot; ``angle`` is in degrees, negative is left."""

    angle: int = 0
    max_angle: int = Field(default=MAX_TURN_ANGLE, gt=0)

    @model_validator(mode="after")
    def _angle_within_limit(self) -> SteeringState:
        if not -self.max_angle <= self.angle <= self.max_angle:
            raise ValueError(f"angle must be between {-self.max_angle} and {self.max_angle}, got {self.angle}")
        return self


class CarSnapshot(CarBaseModel):
    """All subsystem snapshots of one car."""

    engine: EngineState = Field(default_factory=EngineState)
    transmission: TransmissionState = Field(default_factory=TransmissionState)
    brakes: BrakeState = Field(default_factory=BrakeState)
    steering: SteeringState = Field(default_factory=SteeringState)

    @property
    def gear(self) -> Gear:
        return self.transmission.gear
