"""Custom exception hierarchy for pycar.

Rejected vehicle operations are not exceptions: subsystems and the
:class:`~pycar.car.Car` facade log them and return ``False``.  The
classes below cover programming and configuration errors only.
"""

from __future__ import annotations


class CarError(Exception):
    """Base exception for all pycar errors."""


class CarConfigError(CarError):
    """Invalid configuration (limits, environment values)."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class CarLoggerError(CarError):
    """A component was wired without a logger.

    Raised at construction time; a missing logger is a wiring mistake,
    not a runtime condition.
    """
