"""Car subsystems: engine, transmission, steering and brakes."""

from pycar.systems._interfaces import (
    BrakingInterface,
    EngineInterface,
    SteeringInterface,
    TransmissionInterface,
)
from pycar.systems.braking import BrakingSystem
from pycar.systems.engine import Engine
from pycar.systems.steering import SteeringSystem
from pycar.systems.transmission import Transmission

__all__ = [
    "BrakingInterface",
    "BrakingSystem",
    "Engine",
    "EngineInterface",
    "SteeringInterface",
    "SteeringSystem",
    "Transmission",
    "TransmissionInterface",
]
