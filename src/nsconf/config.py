"""Environment-driven configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .hosts import HOSTS_PATH
from .models import SettingsError
from .resolv import RESOLV_CONF_PATH

TRUE_VALUES = {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration values."""

    resolv_conf_path: Path
    hosts_path: Path
    strict: bool
    log_level: str


class SettingsSpec(BaseModel):
    """Schema for the raw environment values."""

    resolv_conf_path: str = RESOLV_CONF_PATH
    hosts_path: str = HOSTS_PATH
    strict: str = "false"
    log_level: str = "INFO"

    @field_validator("resolv_conf_path", "hosts_path")
    @classmethod
    def _non_empty_path(cls, value: str) -> str:
        """Reject blank paths."""
        if not value.strip():
            raise ValueError("path must not be empty")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Normalise and check the logging level name."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """Return a boolean parsed from a string."""
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def load_config() -> AppConfig:
    """Load configuration values from the environment (and .env)."""
    load_dotenv()
    raw = {
        "resolv_conf_path": os.getenv("NSCONF_RESOLV_CONF"),
        "hosts_path": os.getenv("NSCONF_HOSTS"),
        "strict": os.getenv("NSCONF_STRICT"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    try:
        spec = SettingsSpec(**{key: value for key, value in raw.items() if value is not None})
    except Exception as exc:  # noqa: BLE001
        raise SettingsError(f"Settings validation error: {exc}") from exc

    return AppConfig(
        resolv_conf_path=Path(spec.resolv_conf_path),
        hosts_path=Path(spec.hosts_path),
        strict=_parse_bool(spec.strict),
        log_level=spec.log_level,
    )
