"""
Global configuration for the cryptographic facade.

Settings are read from the environment once, at import time.
"""

import os

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BACKEND: str = "pynacl"
"""Backend used when `SODIUM_PLUS_BACKEND` is not set."""

SODIUM_PLUS_BACKEND = os.environ.get("SODIUM_PLUS_BACKEND", DEFAULT_BACKEND).strip().lower()
"""The backend name requested through the environment."""


class SodiumPlusConfig(BaseModel):
    """Process-wide settings, fixed for the lifetime of the process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    backend: str = DEFAULT_BACKEND
    """Registry name of the backend to instantiate at startup."""

    @field_validator("backend")
    @classmethod
    def _normalise_backend(cls, v: str) -> str:
        name = v.strip().lower()
        if not name:
            raise ValueError("backend name must not be empty")
        return name


def load_config() -> SodiumPlusConfig:
    """Build the configuration from the environment snapshot taken at import."""
    return SodiumPlusConfig(backend=SODIUM_PLUS_BACKEND or DEFAULT_BACKEND)
