"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("CARDS_LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class StorageConfig:
    """Deck file configuration."""

    default_path: str = field(
        default_factory=lambda: os.getenv("CARDS_DECK_FILE", "deck.json")
    )
    indent: int = 2


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    log: LogConfig = field(default_factory=LogConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# Global configuration instance
config = AppConfig()
