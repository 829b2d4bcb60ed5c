from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


class ServerSettings(BaseModel):
    """Runtime configuration for the documentation file server."""

    site_dir: Path = Field(default_factory=lambda: Path(os.getenv("DOCS_SITE_DIR", "dist")))
    host: str = Field(default_factory=lambda: os.getenv("DOCS_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("DOCS_PORT", "8080")))

    model_config = {
        "frozen": True,
    }

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> ServerSettings:
    return ServerSettings()


__all__ = ["ServerSettings", "get_settings"]
