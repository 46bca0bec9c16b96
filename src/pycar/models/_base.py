"""Base model for pycar state snapshots.

Snapshots are immutable reports of a subsystem at one moment; they are
produced by the subsystems themselves and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CarBaseModel(BaseModel):
    """Base for frozen state snapshots."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
