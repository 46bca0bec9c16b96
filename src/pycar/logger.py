"""Message sinks and per-component log prefixes.

Subsystems report every mutation through a :class:`CarLogger`.  Rather
than inheriting a logging base class, each subsystem owns a
:class:`ComponentLog` that binds the sink to a component name and an
optional :class:`LogStyle`.
"""

from __future__ import annotations

import enum
import logging
from typing import Protocol

from pycar._constants import CONSOLE_LOGGER_NAME
from pycar.exceptions import CarLoggerError


class CarLogger(Protocol):
    """Structural sink for human-readable simulation messages."""

    def log(self, message: str) -> None:
        ...


class ConsoleLogger:
    """Forward messages to a :mod:`logging` logger at INFO level.

    Output formatting is left to the logging configuration; the command
    line entry point installs a ``"Log: %(message)s"`` stdout handler.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(CONSOLE_LOGGER_NAME)

    def log(self, message: str) -> None:
        self._logger.info(message)


class RecordingLogger:
    """Keep messages in memory, in the order they were logged."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class LogStyle(enum.Enum):
    """ANSI colour table for component prefixes."""

    RESET = "\033[0m"
    ENGINE = "\033[32m"  # green
    TRANSMISSION = "\033[34m"  # blue
    STEERING = "\033[33m"  # yellow
    BRAKING = "\033[31m"  # red
    CAR = "\033[35m"  # magenta

    def wrap(self, text: str) -> str:
        return f"{self.value}{text}{LogStyle.RESET.value}"


class ComponentLog:
    """Callable that prefixes messages with ``[<component>]``.

    Parameters
    ----------
    logger : CarLogger
        Destination sink. ``None`` raises :class:`CarLoggerError`.
    component : str
        Name shown in the prefix.
    style : LogStyle or None
        Colour for the prefix, only used when *colors* is true.
    colors : bool
        Emit ANSI escape codes around the prefix.
    """

    def __init__(
        self,
        logger: CarLogger | None,
        component: str,
        style: LogStyle | None = None,
        *,
        colors: bool = False,
    ) -> None:
        if logger is None:
            raise CarLoggerError(f"{component} requires a logger")
        self._logger = logger
        self._component = component
        self._style = style
        self._colors = colors

    @property
    def component(self) -> str:
        return self._component

    @property
    def prefix(self) -> str:
        tag = f"[{self._component}]"
        if self._colors and self._style is not None:
            return self._style.wrap(tag)
        return tag

    def __call__(self, message: str) -> None:
        self._logger.log(f"{self.prefix} {message}")
