"""Runtime settings for slimcommons."""

import os
import typing as tp

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings", "resolve_strict"]

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    STRICT_RANGES: bool = Field(
        default=False,
        description="Raise InvalidRangeError instead of clamping out-of-range requests",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Level of the project logger")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    @classmethod
    def load(cls) -> "Settings":
        strict = os.getenv("SLIMCOMMONS_STRICT_RANGES", "")
        return cls(
            STRICT_RANGES=strict.strip().lower() in _TRUTHY,
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        )


settings = Settings.load()


def resolve_strict(strict: tp.Optional[bool]) -> bool:
    """Pick the per-call ``strict`` flag, falling back to the global setting."""
    if strict is None:
        return settings.STRICT_RANGES
    return strict
