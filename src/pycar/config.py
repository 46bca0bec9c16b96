"""Simulation configuration for pycar."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pycar._constants import MAX_BRAKE_FORCE, MAX_TURN_ANGLE
from pycar.exceptions import CarConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise CarConfigError(f"{env_key} must be an integer, got {value!r}", field=env_key) from exc


@dataclasses.dataclass(frozen=True)
class CarConfig:
    """Simulation configuration.

    Parameters
    ----------
    max_brake_force : int
        Upper bound accepted by the braking system. Emergency braking
        applies exactly this force.
    max_turn_angle : int
        Largest steering angle, in degrees, accepted either side of
        straight ahead.
    colors : bool
        Wrap component prefixes in ANSI colour codes.
    log_level : str
        Level name used by the command line entry point.
    """

    max_brake_force: int = MAX_BRAKE_FORCE
    max_turn_angle: int = MAX_TURN_ANGLE
    colors: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_brake_force <= 0:
            raise CarConfigError(
                f"max_brake_force must be positive, got {self.max_brake_force}",
                field="max_brake_force",
            )
        if self.max_turn_angle <= 0:
            raise CarConfigError(
                f"max_turn_angle must be positive, got {self.max_turn_angle}",
                field="max_turn_angle",
            )
        if not isinstance(self.log_level, str):
            raise CarConfigError(f"log_level must be a level name, got {self.log_level!r}", field="log_level")
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise CarConfigError(f"unknown log level {self.log_level!r}", field="log_level")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, **overrides: Any) -> CarConfig:
        """Create configuration from environment variables.

        Reads ``PYCAR_MAX_BRAKE_FORCE``, ``PYCAR_MAX_TURN_ANGLE``,
        ``PYCAR_COLORS`` and ``PYCAR_LOG_LEVEL``. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CarConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_INT_MAP = {
            "PYCAR_MAX_BRAKE_FORCE": "max_brake_force",
            "PYCAR_MAX_TURN_ANGLE": "max_turn_angle",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        if "colors" not in overrides:
            config_kwargs["colors"] = _env_bool(env.get("PYCAR_COLORS"), False)

        level_env = env.get("PYCAR_LOG_LEVEL")
        if level_env is not None and "log_level" not in overrides:
            config_kwargs["log_level"] = level_env

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
