"""Structured configuration with validation.

This module provides a type-safe, validated configuration system
built on top of the flat constants in the top-level ``config`` module.

Usage:
    from core.config import get_config

    config = get_config()
    if "+" in config.selectors.combinators:
        print("Adjacent sibling combinator enabled")
"""

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

import config as settings

# Load environment variables
load_dotenv()

KNOWN_COMBINATORS: Tuple[str, ...] = tuple(settings.COMBINATORS)


@dataclass(frozen=True)
class PathConfig:
    """Path configuration (immutable)."""

    base_dir: Path
    logs_dir: Path


@dataclass(frozen=True)
class FlaskConfig:
    """Flask server configuration."""

    host: str = "127.0.0.1"
    port: int = 5160
    debug: bool = False
    secret_key: str = "selectorsmith-dev-key-change-in-prod"

    def __post_init__(self):
        """Validate configuration values."""
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")


@dataclass(frozen=True)
class SelectorConfig:
    """Selector builder configuration."""

    combinators: Tuple[str, ...] = KNOWN_COMBINATORS

    def __post_init__(self):
        """Validate configuration values."""
        if not self.combinators:
            raise ValueError("At least one combinator is required")
        unknown = [c for c in self.combinators if c not in KNOWN_COMBINATORS]
        if unknown:
            raise ValueError(f"Unknown combinators: {unknown!r}")

    def is_allowed(self, combinator: str) -> bool:
        """Check if a combinator token may be used to join selectors."""
        return combinator in self.combinators


@dataclass(frozen=True)
class JsonConfig:
    """JSON encoding configuration."""

    ensure_ascii: bool = False
    sort_keys: bool = False

    @property
    def separators(self) -> Tuple[str, str]:
        """Compact separators, no whitespace between tokens."""
        return (",", ":")


@dataclass
class AppConfig:
    """
    Main application configuration.

    This is the top-level config object that contains all
    configuration sections.
    """

    paths: PathConfig
    flask: FlaskConfig
    selectors: SelectorConfig
    json: JsonConfig

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """
        Create configuration from environment variables and defaults.

        This is the main factory method for creating a validated
        configuration instance.
        """
        combinators = KNOWN_COMBINATORS
        raw = os.getenv("SELECTOR_COMBINATORS")
        if raw:
            # Space cannot be listed in a comma-separated env var, use "descendant"
            combinators = tuple(
                " " if token.strip() == "descendant" else token.strip()
                for token in raw.split(",")
                if token.strip()
            )

        return cls(
            paths=PathConfig(
                base_dir=settings.BASE_DIR,
                logs_dir=settings.LOGS_DIR,
            ),
            flask=FlaskConfig(
                host=settings.FLASK_HOST,
                port=settings.FLASK_PORT,
                debug=settings.FLASK_DEBUG,
                secret_key=settings.SECRET_KEY,
            ),
            selectors=SelectorConfig(combinators=combinators),
            json=JsonConfig(
                ensure_ascii=os.getenv("JSON_ENSURE_ASCII", "false").lower() == "true",
            ),
        )


# Thread-safe singleton
_config: Optional[AppConfig] = None
_config_lock = threading.Lock()


def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.

    Thread-safe with double-checked locking pattern.
    Configuration is created once on first access.

    Returns:
        The application configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = AppConfig.from_environment()
    return _config


def reset_config() -> None:
    """
    Reset the configuration singleton.

    Useful for testing with different configurations.
    """
    global _config
    with _config_lock:
        _config = None
