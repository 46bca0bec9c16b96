"""State views and transition policy.

The policy is the single place deciding whether a high-level vehicle
operation may proceed given the current subsystem state.
"""

from pycar.state.policy import CarPolicy, DefaultCarPolicy
from pycar.state.views import BrakeView, EngineView, TransmissionView

__all__ = [
    "BrakeView",
    "CarPolicy",
    "DefaultCarPolicy",
    "EngineView",
    "TransmissionView",
]
