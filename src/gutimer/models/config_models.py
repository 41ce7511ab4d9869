"""Configuration models for gutimer.

``AppConfig`` is what lives in the user's config file; ``RunOptions`` carries
the per-invocation flags into the reader and the timing loop.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class AppConfig(BaseModel):
    """Persistent settings read from config.json."""

    model_config = {"extra": "ignore"}

    tick_interval_ms: int = Field(
        default=10, description="Display refresh cadence in milliseconds"
    )
    log_level: LogLevel = Field(default="INFO", description="Log file verbosity")

    @field_validator("tick_interval_ms")
    @classmethod
    def validate_tick_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("tick_interval_ms must be positive")
        return v

    @property
    def tick_interval(self) -> float:
        """Tick cadence in seconds."""
        return self.tick_interval_ms / 1000


class RunOptions(BaseModel):
    """Flags for a single run."""

    verbose: bool = Field(default=False, description="Echo diagnostics to stderr")
    quiet: bool = Field(default=False, description="Accepted for compatibility")
