from __future__ import annotations

import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """Service-level knobs, read once at startup."""

    model_config = ConfigDict(extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    # Expansion cap for requests that don't set their own; the plane is unbounded.
    max_steps: int = Field(default=20000, gt=0)
    max_visited: int = Field(default=50000, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split(cls, v):
        # "a,b" from the environment
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw = {
            "log_level": env.get("BOXPATH_LOG_LEVEL"),
            "cors_origins": env.get("BOXPATH_CORS_ORIGINS"),
            "max_steps": env.get("BOXPATH_MAX_STEPS"),
            "max_visited": env.get("BOXPATH_MAX_VISITED"),
        }
        return cls(**{k: v for k, v in raw.items() if v not in (None, "")})
