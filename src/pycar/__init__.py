"""pycar - Car simulation composed of policy-gated subsystems."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycar")
except PackageNotFoundError:
    __version__ = "0+local"
from pycar.car import Car
from pycar.config import CarConfig
from pycar.exceptions import CarConfigError, CarError, CarLoggerError
from pycar.logger import CarLogger, ComponentLog, ConsoleLogger, LogStyle, RecordingLogger
from pycar.models import (
    BrakeState,
    CarSnapshot,
    EngineState,
    Gear,
    SteeringState,
    TransmissionState,
)
from pycar.state import CarPolicy, DefaultCarPolicy
from pycar.systems import BrakingSystem, Engine, SteeringSystem, Transmission

__all__ = [
    "__version__",
    "BrakeState",
    "BrakingSystem",
    "Car",
    "CarConfig",
    "CarConfigError",
    "CarError",
    "CarLogger",
    "CarLoggerError",
    "CarPolicy",
    "CarSnapshot",
    "ComponentLog",
    "ConsoleLogger",
    "DefaultCarPolicy",
    "Engine",
    "EngineState",
    "Gear",
    "LogStyle",
    "RecordingLogger",
    "SteeringState",
    "SteeringSystem",
    "Transmission",
    "TransmissionState",
]
