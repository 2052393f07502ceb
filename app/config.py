"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def resolve_locale() -> str:
    """Resolve the message locale; unknown values fall back to English."""

    locale = os.getenv("DRAW_LOCALE", "en").lower().strip()
    return locale if locale in ("en", "ko") else "en"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    TESTING: bool = False

    DRAW_LOCALE: str = resolve_locale()
    # Largest [start, end] span a single request may materialize.
    DRAW_MAX_RANGE_SIZE: int = int_env("DRAW_MAX_RANGE_SIZE", 1_000_000)
    DRAW_PREVIEW_LIMIT: int = int_env("DRAW_PREVIEW_LIMIT", 30)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    __test__ = False

    APP_ENV: str = "testing"
    TESTING: bool = True
    DEBUG: bool = False
    DRAW_LOCALE: str = "en"
    DRAW_MAX_RANGE_SIZE: int = 10_000
    DRAW_PREVIEW_LIMIT: int = 30


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
