"""Configuration management for the dungeon crawler.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. Each concern gets its own settings class with
its own prefix; ``Settings`` aggregates them.

Example:
    >>> from dungeon_crawler.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.map.width
    60

Environment Variables:
    CRAWLER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CRAWLER_MAP_WIDTH / CRAWLER_MAP_HEIGHT: Map extent in tiles
    CRAWLER_MAP_ROOM_WIDTH / CRAWLER_MAP_ROOM_HEIGHT: Size of the stamped room
    CRAWLER_PLAYER_DEFAULT_NAME: Name given to new characters
    CRAWLER_PLAYER_STARTING_ITEMS: JSON list of item slugs, e.g. '["sword"]'
    CRAWLER_UI_CLEAR_SCREEN: Clear the terminal before each frame
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dungeon_crawler.core.constants import FALLBACK_TERMINAL_SIZE
from dungeon_crawler.core.exceptions import ConfigurationError


class MapSettings(BaseSettings):
    """Configuration for map generation.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        room_width: Width of the room stamped at the map center.
        room_height: Height of the room stamped at the map center.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_MAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: int = Field(default=60, gt=0, le=500, description="Map width in tiles")
    height: int = Field(default=20, gt=0, le=500, description="Map height in tiles")
    room_width: int = Field(default=20, gt=0, description="Room width in tiles")
    room_height: int = Field(default=10, gt=0, description="Room height in tiles")

    @model_validator(mode="after")
    def validate_room_fits(self) -> "MapSettings":
        """Ensure the configured room fits inside the configured map.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the room is wider or taller than the map.
        """
        if self.room_width > self.width or self.room_height > self.height:
            raise ConfigurationError(
                f"room ({self.room_width}x{self.room_height}) does not fit "
                f"the map ({self.width}x{self.height})",
                config_key="room_width" if self.room_width > self.width else "room_height",
            )
        return self


class PlayerSettings(BaseSettings):
    """Configuration for new characters.

    Attributes:
        default_name: Name given to a character when none is supplied.
        starting_items: Item slugs placed in a new character's inventory.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_PLAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_name: str = Field(default="Hero", min_length=1, description="Default character name")
    starting_items: list[str] = Field(
        default_factory=list,
        description="Item slugs granted at the start of a run",
    )

    @field_validator("starting_items", mode="after")
    @classmethod
    def validate_item_slugs(cls, value: list[str]) -> list[str]:
        """Reject item slugs that have no factory.

        Args:
            value: The configured slugs.

        Returns:
            The validated slugs.

        Raises:
            ConfigurationError: If a slug is unknown.
        """
        from dungeon_crawler.models.item import ITEM_FACTORIES

        unknown = [slug for slug in value if slug not in ITEM_FACTORIES]
        if unknown:
            raise ConfigurationError(
                f"Unknown starting items: {', '.join(unknown)}",
                config_key="starting_items",
                details={"known": sorted(ITEM_FACTORIES)},
            )
        return value


class UISettings(BaseSettings):
    """Configuration for the terminal collaborator.

    Attributes:
        fallback_width: Columns to assume when the size cannot be detected.
        fallback_height: Rows to assume when the size cannot be detected.
        clear_screen: Clear the terminal before drawing each frame.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fallback_width: int = Field(default=FALLBACK_TERMINAL_SIZE[0], ge=40)
    fallback_height: int = Field(default=FALLBACK_TERMINAL_SIZE[1], ge=12)
    clear_screen: bool = Field(default=True, description="Clear the screen between frames")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Log at DEBUG level whatever log_level says.
        log_level: Application logging level.
        log_json: Emit JSON log lines instead of console output.
        log_file: Optional file that also receives log lines.
        map: Map generation settings.
        player: New character settings.
        ui: Terminal settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Rusty Crawler", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    log_file: Path | None = Field(default=None, description="Optional log file")

    map: MapSettings = Field(default_factory=MapSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    ui: UISettings = Field(default_factory=UISettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Mostly useful in tests, after environment variables change.
    """
    get_settings.cache_clear()


__all__ = [
    "MapSettings",
    "PlayerSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
