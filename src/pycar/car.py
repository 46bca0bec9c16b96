"""Car facade composing the subsystems under a transition policy."""

from __future__ import annotations

import logging

from pycar.config import CarConfig
from pycar.logger import CarLogger, ComponentLog, ConsoleLogger, LogStyle
from pycar.models.state import CarSnapshot, Gear
from pycar.state.policy import CarPolicy, DefaultCarPolicy
from pycar.systems import (
    BrakingInterface,
    BrakingSystem,
    Engine,
    EngineInterface,
    SteeringInterface,
    SteeringSystem,
    Transmission,
    TransmissionInterface,
)

_logger = logging.getLogger(__name__)


class Car:
    """Vehicle-level operations delegating to injected subsystems.

    ``start``, ``stop``, ``accelerate`` and ``reverse`` are gated by the
    policy.  A rejected operation is logged and returns ``False``; it
    never raises.  Gear, steering and brake operations delegate straight
    to their subsystem.
    """

    def __init__(
        self,
        logger: CarLogger,
        engine: EngineInterface,
        transmission: TransmissionInterface,
        steering: SteeringInterface,
        braking: BrakingInterface,
        policy: CarPolicy,
        *,
        colors: bool = False,
    ) -> None:
        self._log = ComponentLog(logger, "Car", LogStyle.CAR, colors=colors)
        self._engine = engine
        self._transmission = transmission
        self._steering = steering
        self._braking = braking
        self._policy = policy
        self._log("Initialized with all systems ready.")

    @classmethod
    def build(
        cls,
        logger: CarLogger | None = None,
        config: CarConfig | None = None,
        policy: CarPolicy | None = None,
    ) -> Car:
        """Assemble a car from the default subsystems.

        Parameters
        ----------
        logger : CarLogger or None
            Shared sink for every component. Defaults to :class:`ConsoleLogger`.
        config : CarConfig or None
            Limits and colour settings. Defaults to ``CarConfig()``.
        policy : CarPolicy or None
            Transition rules. Defaults to :class:`DefaultCarPolicy`.
        """
        config = config or CarConfig()
        sink: CarLogger = logger if logger is not None else ConsoleLogger()
        colors = config.colors
        return cls(
            sink,
            Engine(sink, colors=colors),
            Transmission(sink, colors=colors),
            SteeringSystem(sink, max_angle=config.max_turn_angle, colors=colors),
            BrakingSystem(sink, max_force=config.max_brake_force, colors=colors),
            policy or DefaultCarPolicy(),
            colors=colors,
        )

    # ------------------------------------------------------------------
    # Policy-gated operations
    # ------------------------------------------------------------------

    def start(self) -> bool:
        # Brakes are held before the policy is consulted.
        self._braking.apply_emergency_brakes()
        if not self._policy.can_start(self._engine, self._transmission, self._braking):
            return self._reject("Start")
        self._engine.start()
        self._log("Started, braking system holding emergency brakes.")
        return True

    def stop(self) -> bool:
        if not self._policy.can_stop(self._engine, self._transmission):
            return self._reject("Stop")
        self._braking.apply_emergency_brakes()
        self._engine.stop()
        self._log("Stopped, emergency brakes applied.")
        return True

    def accelerate(self, speed: int) -> bool:
        if not self._policy.can_accelerate(self._engine, self._transmission, self._braking):
            return self._reject("Acceleration")
        return self._engine.accelerate(speed)

    def reverse(self) -> bool:
        if not self._policy.can_reverse(self._transmission, self._braking):
            return self._reject("Reverse")
        self._braking.apply_emergency_brakes()
        self._transmission.to_reverse()
        return True

    # ------------------------------------------------------------------
    # Direct delegation
    # ------------------------------------------------------------------

    def shift_up(self) -> bool:
        """Move the selector up the gate, towards Park."""
        return self._transmission.to_park()

    def shift_down(self) -> bool:
        """Move the selector down the gate, towards Drive."""
        return self._transmission.to_drive()

    def shift_to(self, gear: Gear) -> bool:
        gear = Gear(gear)
        if gear == Gear.PARK:
            return self._transmission.to_park()
        if gear == Gear.DRIVE:
            return self._transmission.to_drive()
        return self._transmission.to_reverse()

    def turn_wheel(self, angle: int) -> bool:
        return self._steering.turn_wheel(angle)

    def straighten_wheels(self) -> None:
        self._steering.straighten_wheels()

    def apply_force_on_brakes(self, force: int) -> bool:
        return self._braking.apply_force_on_brakes(force)

    def apply_emergency_brakes(self) -> None:
        self._braking.apply_emergency_brakes()

    def release_brakes(self) -> None:
        self._braking.release_brakes()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def policy(self) -> CarPolicy:
        return self._policy

    def snapshot(self) -> CarSnapshot:
        return CarSnapshot(
            engine=self._engine.snapshot(),
            transmission=self._transmission.snapshot(),
            brakes=self._braking.snapshot(),
            steering=self._steering.snapshot(),
        )

    def _reject(self, operation: str) -> bool:
        _logger.debug("%s rejected by %s", operation, type(self._policy).__name__)
        self._log(f"{operation} rejected by policy.")
        return False
