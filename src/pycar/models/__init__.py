"""State snapshot models."""

from pycar.models._base import CarBaseModel
from pycar.models.state import (
    BrakeState,
    CarSnapshot,
    EngineState,
    Gear,
    SteeringState,
    TransmissionState,
)

__all__ = [
    "BrakeState",
    "CarBaseModel",
    "CarSnapshot",
    "EngineState",
    "Gear",
    "SteeringState",
    "TransmissionState",
]
