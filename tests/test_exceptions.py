"""Tests for the exception hierarchy and error handlers."""

import logging

import pytest

from colorfill.exceptions import (
    ColorFillError,
    ColorFormatError,
    ColorTypeError,
    ErrorContext,
    FormatReason,
    collect_errors,
    format_error_for_display,
)


class TestColorFillError:
    """Test the base error."""

    @pytest.mark.unit
    def test_messages(self):
        """Test technical message defaults to user message."""
        error = ColorFillError("Something broke")
        assert str(error) == "Something broke"
        assert error.technical_message == "Something broke"
        assert error.get_full_message() == "Something broke"

    @pytest.mark.unit
    def test_full_message_with_hint(self):
        """Test the recovery hint is appended."""
        error = ColorFillError("Bad", recovery_hint="Fix it")
        assert error.get_full_message() == "Bad\n\nSuggestion: Fix it"

    @pytest.mark.unit
    def test_color_errors(self):
        """Test color errors carry their diagnostics."""
        format_error = ColorFormatError("#ff", FormatReason.INVALID_LENGTH, "too short", index=3)
        assert format_error.recoverable is True
        assert "reason=invalid_length" in format_error.technical_message
        assert "at index 3" in format_error.user_message

        type_error = ColorTypeError("object")
        assert isinstance(type_error, TypeError)
        assert "object" in type_error.technical_message


class TestFormatErrorForDisplay:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_package_error(self):
        """Test package errors use their own message and hint."""
        message, hint = format_error_for_display(ColorTypeError("null"))
        assert "got null" in message
        assert hint is not None

    @pytest.mark.unit
    def test_builtin_error(self):
        """Test other errors are labelled with their type."""
        assert format_error_for_display(OSError("disk full")) == ("OSError: disk full", None)


class TestErrorContext:
    """Test ErrorContext."""

    @pytest.mark.unit
    def test_re_raises_by_default(self):
        """Test errors propagate out of the context."""
        with pytest.raises(ColorTypeError):
            with ErrorContext("parse"):
                raise ColorTypeError("number")

    @pytest.mark.unit
    def test_suppress(self, caplog):
        """Test errors can be suppressed and are logged."""
        with caplog.at_level(logging.ERROR):
            with ErrorContext("parse", re_raise=False) as ctx:
                raise ColorTypeError("number")

        assert isinstance(ctx.error, ColorTypeError)
        assert "Failed to parse" in caplog.text


class TestErrorCollector:
    """Test collect_errors."""

    @pytest.mark.unit
    def test_collects_and_continues(self):
        """Test failures are gathered and successes counted."""
        collector = collect_errors("check")

        with collector.try_operation("a.json"):
            pass
        with collector.try_operation("b.json"):
            raise ColorTypeError("number")
        with collector.try_operation("c.json"):
            raise FileNotFoundError("c.json")

        assert collector.success_count == 1
        assert collector.error_count == 2
        summary = collector.get_summary()
        assert summary.startswith("Failed 2 of 3 operations")
        assert "b.json: Expected a color string" in summary
        assert "c.json" in summary

    @pytest.mark.unit
    def test_unexpected_errors_propagate(self):
        """Test programming errors are not swallowed."""
        collector = collect_errors("check")

        with pytest.raises(KeyError):
            with collector.try_operation("a.json"):
                raise KeyError("oops")

    @pytest.mark.unit
    def test_summary_without_errors(self):
        """Test summary for an all-green batch."""
        collector = collect_errors("check")
        with collector.try_operation("a.json"):
            pass

        assert collector.get_summary() == "All operations completed successfully (1 total)"


class TestColorFillErrorRepr:
    """Test the debugging representation."""

    @pytest.mark.unit
    def test_repr(self):
        """Test repr names the concrete class and message."""
        assert repr(ColorTypeError("null")) == (
            "ColorTypeError('Expected a color string or an array of colors, got null')"
        )

    @pytest.mark.unit
    def test_options_are_keyword_only(self):
        """Test only the user message can be passed positionally."""
        with pytest.raises(TypeError):
            ColorFillError("Bad", "details")
