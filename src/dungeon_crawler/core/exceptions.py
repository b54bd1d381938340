"""Custom exception hierarchy for the dungeon crawler.

All exceptions inherit from CrawlerError, so the session loop can catch
every recoverable game error at one boundary while each raise site still
attaches domain-specific context.

Example:
    >>> from dungeon_crawler.core.exceptions import NotUsableError
    >>> raise NotUsableError("Sword cannot be used", index=0)
"""

from __future__ import annotations

from typing import Any


class CrawlerError(Exception):
    """Base exception for all dungeon crawler errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(CrawlerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(CrawlerError):
    """Raised when a value handed to the engine violates a constraint."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(CrawlerError):
    """Base exception for all game engine errors."""


class InvalidGameStateError(GameEngineError):
    """Raised when a run status transition is not allowed.

    Pausing a finished run or resuming one that is not paused both end
    up here.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of states the transition accepts.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


# =============================================================================
# Inventory Exceptions
# =============================================================================


class InventoryError(GameEngineError):
    """Base exception for inventory transactions.

    These are local, recoverable failures. The player and inventory are
    left exactly as they were before the failed call.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize inventory error with the offending reference.

        Args:
            message: Human-readable error description.
            index: Inventory position or handle that was requested.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if index is not None:
            combined_details["index"] = index
        super().__init__(message, details=combined_details)


class InvalidIndexError(InventoryError):
    """Raised when an inventory position or handle does not exist."""


class NotEquippableError(InventoryError):
    """Raised when equipping an item that fits no equip slot."""


class NotUsableError(InventoryError):
    """Raised when consuming an item that is not a consumable."""


# =============================================================================
# UI Domain Exceptions
# =============================================================================


class UIError(CrawlerError):
    """Base exception for terminal collaborator errors."""


class InputClosedError(UIError):
    """Raised when the input stream has been closed."""


__all__ = [
    # Base exception
    "CrawlerError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    # Inventory exceptions
    "InventoryError",
    "InvalidIndexError",
    "NotEquippableError",
    "NotUsableError",
    # UI exceptions
    "UIError",
    "InputClosedError",
]
