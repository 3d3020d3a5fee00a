"""Process settings read from environment variables.

HOTELVISITS_DATA_DIR  directory holding customers.json / hotels.json /
                      visitations.json (default: ./data)
CORS_ORIGINS          comma-separated browser origins allowed to call the API
                      (default: the local dashboard, http://localhost:3000)
ENABLE_DOCS           "true" mounts /docs and /openapi.json
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = "data"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """Resolved process settings.

    Attributes:
        data_dir: Seed directory for the three JSON snapshots.
        cors_origins: Origins allowed by the CORS middleware.
        docs_enabled: Whether the interactive API docs are served.
    """

    data_dir: Path = field(default_factory=lambda: Path(DEFAULT_DATA_DIR))
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    docs_enabled: bool = False


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def _parse_bool(raw: str | None) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        data_dir=Path(os.environ.get("HOTELVISITS_DATA_DIR") or DEFAULT_DATA_DIR),
        cors_origins=_parse_origins(os.environ.get("CORS_ORIGINS")),
        docs_enabled=_parse_bool(os.environ.get("ENABLE_DOCS")),
    )
