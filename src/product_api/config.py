"""Process-wide settings, read once at startup.

Values come from the environment, with a ``.env`` file in the working
directory loaded first. Bad values fail fast with :class:`ConfigurationError`.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_API_KEY = "your-secret-api-key"
PRODUCTION = "production"


class ConfigurationError(Exception):
    """Raised when a setting is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    env: str = PRODUCTION
    api_key: str = DEFAULT_API_KEY
    log_level: str = "INFO"
    seed_sample_products: bool = True

    @property
    def expose_diagnostics(self) -> bool:
        return self.env != PRODUCTION


def _get_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable '{key}' must be an integer, got {raw!r}")


def _get_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"Environment variable '{key}' must be a boolean, got {raw!r}")


def _get_log_level(key: str, default: str) -> str:
    level = os.environ.get(key, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown log level in '{key}': {level!r}")
    return level


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=_get_int("PORT", 3000),
        env=os.environ.get("APP_ENV", PRODUCTION).strip().lower(),
        api_key=os.environ.get("API_KEY") or DEFAULT_API_KEY,
        log_level=_get_log_level("LOG_LEVEL", "INFO"),
        seed_sample_products=_get_bool("SEED_SAMPLE_PRODUCTS", True),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
