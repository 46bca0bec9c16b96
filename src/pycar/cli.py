"""Command line entry point running the fixed car demonstration."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pycar._constants import CONSOLE_FORMAT, CONSOLE_LOGGER_NAME
from pycar.car import Car
from pycar.config import CarConfig
from pycar.exceptions import CarConfigError
from pycar.logger import CarLogger, ConsoleLogger
from pycar.state.policy import DefaultCarPolicy
from pycar.systems import BrakingSystem, Engine, SteeringSystem, Transmission


def run_demo(console: CarLogger, config: CarConfig) -> Car:
    """Build a car on *console* and drive it through the demonstration sequence."""
    colors = config.colors

    console.log("\n==== Initializing Car Components ====")
    engine = Engine(console, colors=colors)
    transmission = Transmission(console, colors=colors)
    steering = SteeringSystem(console, max_angle=config.max_turn_angle, colors=colors)
    braking = BrakingSystem(console, max_force=config.max_brake_force, colors=colors)
    car = Car(console, engine, transmission, steering, braking, DefaultCarPolicy(), colors=colors)

    console.log("\n==== Car Simulation ====")
    car.start()
    car.shift_up()
    car.shift_down()
    car.reverse()
    car.turn_wheel(30)
    car.straighten_wheels()
    car.apply_force_on_brakes(50)
    car.apply_emergency_brakes()
    car.stop()

    console.log("\n==== Car test policy====")
    car.stop()
    return car


def _configure_logging(config: CarConfig) -> None:
    """Send demo lines to stdout and diagnostics, at ``config.log_level``, to stderr."""
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    console = logging.getLogger(CONSOLE_LOGGER_NAME)
    for stale in console.handlers[:]:
        console.removeHandler(stale)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.addHandler(handler)
    console.setLevel(logging.INFO)
    console.propagate = False


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pycar",
        description=(
            "Run the fixed car simulation: start, shift, reverse, steer, brake and stop "
            "a car whose transitions are gated by the default policy. "
            "Settings are read from PYCAR_* environment variables."
        ),
    )
    parser.parse_args(argv)

    try:
        config = CarConfig.from_env()
    except CarConfigError as exc:
        parser.error(str(exc))
    _configure_logging(config)
    run_demo(ConsoleLogger(), config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
