"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CrawlerError: Base exception for all application errors.
        InventoryError and subclasses: Recoverable inventory failures.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dungeon_crawler.core.config import (
    MapSettings,
    PlayerSettings,
    Settings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
from dungeon_crawler.core.exceptions import (
    ConfigurationError,
    CrawlerError,
    GameEngineError,
    InputClosedError,
    InvalidGameStateError,
    InvalidIndexError,
    InventoryError,
    NotEquippableError,
    NotUsableError,
    UIError,
    ValidationError,
)
from dungeon_crawler.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "CrawlerError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "InventoryError",
    "InvalidIndexError",
    "NotEquippableError",
    "NotUsableError",
    # UI exceptions
    "UIError",
    "InputClosedError",
    # Configuration
    "Settings",
    "MapSettings",
    "PlayerSettings",
    "UISettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
