"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _optional_int(raw: str) -> int | None:
    """Parse an optional integer setting; empty means unset."""
    raw = raw.strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "doc-history"))
    container: str = field(default_factory=lambda: _env("COSMOS_CONTAINER", "documents"))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class VersioningConfig:
    """Defaults applied to versioned document types at startup."""

    max_history: int | None = field(
        default_factory=lambda: _optional_int(_env("DOC_HISTORY_MAX_VERSIONS"))
    )


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    app: AppConfig = field(default_factory=AppConfig)
    versioning: VersioningConfig = field(default_factory=VersioningConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build settings from the environment."""
    if load_dotenv():
        logger.debug("Loaded environment from .env")
    return Settings()
