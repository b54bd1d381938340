"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestCrawlerError:
    """Tests for the base CrawlerError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = CrawlerError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = CrawlerError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(CrawlerError("Test", details={"x": 1}))
        assert "CrawlerError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestInventoryExceptions:
    """Tests for inventory transaction errors."""

    def test_index_recorded(self) -> None:
        exc = InvalidIndexError("Invalid inventory index", index=7)
        assert exc.details["index"] == 7
        assert exc.message == "Invalid inventory index"
        assert "index=7" in str(exc)

    def test_index_omitted(self) -> None:
        exc = NotUsableError("Nope")
        assert "index" not in exc.details

    @pytest.mark.parametrize("exc_type", [InvalidIndexError, NotEquippableError, NotUsableError])
    def test_inheritance(self, exc_type: type[InventoryError]) -> None:
        """Test that every inventory error is a recoverable game error."""
        exc = exc_type("Error")
        assert isinstance(exc, InventoryError)
        assert isinstance(exc, GameEngineError)
        assert isinstance(exc, CrawlerError)


class TestGameEngineExceptions:
    """Tests for game engine exceptions."""

    def test_invalid_state_context(self) -> None:
        exc = InvalidGameStateError(
            "Cannot pause",
            current_state="game_over",
            expected_states=["running"],
        )
        assert exc.details["current_state"] == "game_over"
        assert exc.details["expected_states"] == ["running"]
        assert isinstance(exc, GameEngineError)


class TestOtherExceptions:
    """Tests for configuration, validation and UI errors."""

    def test_configuration_error_key(self) -> None:
        exc = ConfigurationError("Bad value", config_key="room_width")
        assert exc.details["config_key"] == "room_width"

    def test_validation_error_fields(self) -> None:
        exc = ValidationError("Negative", field_name="amount", invalid_value=-5)
        assert exc.details == {"field_name": "amount", "invalid_value": -5}

    def test_input_closed_is_ui_error(self) -> None:
        assert isinstance(InputClosedError("closed"), UIError)
