"""Tests for error conversion, logging and user-facing messages."""

import json
from unittest.mock import patch

import pytest
from hypothesis import given, strategies as st

from umd_inspector.services.errors import (
    AppError,
    ConfigurationError,
    ErrorCategory,
    ErrorHandlingService,
    ErrorSeverity,
    FileSystemError,
    LogParseError,
    ValidationError,
)


class TestErrorConversion:
    """Standard exceptions map to the application error hierarchy."""

    @pytest.mark.parametrize(
        "error, category",
        [
            (PermissionError("denied"), ErrorCategory.FILE_SYSTEM),
            (FileNotFoundError("gone"), ErrorCategory.FILE_SYSTEM),
            (IsADirectoryError("dir"), ErrorCategory.FILE_SYSTEM),
            (ValueError("bad value"), ErrorCategory.VALIDATION),
            (TypeError("bad type"), ErrorCategory.VALIDATION),
            (RuntimeError("boom"), ErrorCategory.UNEXPECTED),
        ],
    )
    def test_category_for_standard_exceptions(self, error: Exception, category: ErrorCategory) -> None:
        service = ErrorHandlingService()
        result = service.handle_error(error, operation="info", component="cli")

        assert result.category is category
        assert result.message

    def test_json_decode_error_is_validation(self) -> None:
        try:
            json.loads("{broken")
        except json.JSONDecodeError as e:
            result = ErrorHandlingService().handle_error(e, operation="load_config", component="config")

        assert result.category is ErrorCategory.VALIDATION
        assert "JSON" in result.message

    def test_app_error_passes_through(self) -> None:
        error = LogParseError("Bad line", path="game_disc.txt", line_number=4, line="FileSize: lots")

        result = ErrorHandlingService().handle_error(error, operation="aux_info", component="parser")

        assert result.message == "Bad line"
        assert result.category is ErrorCategory.PARSING
        assert result.severity is ErrorSeverity.WARNING
        assert result.technical_details is not None
        assert "game_disc.txt" in result.technical_details
        assert "Line: 4" in result.technical_details
        assert "FileSize: lots" in result.technical_details

    def test_file_system_error_keeps_path(self) -> None:
        result = ErrorHandlingService().handle_error(
            PermissionError("denied"),
            operation="check",
            component="cli",
            context={"path": "/dumps/game"},
        )

        assert result.technical_details is not None
        assert "/dumps/game" in result.technical_details
        assert any("permission" in action.lower() for action in result.suggested_actions)

    def test_unexpected_error_has_technical_details(self) -> None:
        result = ErrorHandlingService().handle_error(RuntimeError("boom"), operation="info", component="cli")
        assert result.technical_details == "RuntimeError: boom"


class TestErrorTypes:
    """Constructor behaviour of the specific error types."""

    def test_file_system_error(self) -> None:
        original = FileNotFoundError("missing")
        error = FileSystemError("Not found", original_error=original, path="/x", operation="read")

        assert error.category is ErrorCategory.FILE_SYSTEM
        assert error.original_error is original
        assert error.path == "/x"
        assert error.technical_details == "Path: /x\nFileNotFoundError: missing"

    def test_log_parse_error_truncates_content(self) -> None:
        error = LogParseError("Bad", line="x" * 500)

        assert error.line == "x" * 500
        assert error.technical_details is not None
        assert error.technical_details.endswith("x" * 100)
        assert "x" * 101 not in error.technical_details

    def test_validation_error_constraints(self) -> None:
        error = ValidationError("Bad indent", field="json_indent", value=12, constraints=["0 <= indent <= 8"])

        assert "Ensure: 0 <= indent <= 8" in error.suggested_actions
        assert error.technical_details == "Field: json_indent\nValue: 12"

    def test_configuration_error_expected(self) -> None:
        error = ConfigurationError("Invalid", setting="media_type", current_value="vhs", expected="umd")

        assert error.category is ErrorCategory.CONFIGURATION
        assert "Expected: umd" in error.suggested_actions
        assert isinstance(error, AppError)


class TestErrorHandlingService:
    """History, logging and message formatting."""

    def test_errors_are_logged(self) -> None:
        service = ErrorHandlingService()
        with patch("umd_inspector.services.errors.log") as mock_logger:
            service.handle_error(RuntimeError("boom"), operation="info", component="cli")

        assert mock_logger.error.called
        kwargs = mock_logger.error.call_args.kwargs
        assert kwargs["operation"] == "info"
        assert kwargs["technical_details"] == "RuntimeError: boom"

    def test_warnings_are_logged_as_warnings(self) -> None:
        service = ErrorHandlingService()
        with patch("umd_inspector.services.errors.log") as mock_logger:
            service.handle_error(LogParseError("Bad"), operation="pvd", component="parser")

        assert mock_logger.warning.called
        assert not mock_logger.error.called

    @given(message=st.text(min_size=1, max_size=100))
    def test_value_error_message_is_kept(self, message: str) -> None:
        result = ErrorHandlingService().handle_error(ValueError(message), operation="op", component="test")

        assert result.category is ErrorCategory.VALIDATION
        assert result.message == message
        assert result.severity is ErrorSeverity.WARNING

    def test_user_message_lists_top_suggestions(self) -> None:
        service = ErrorHandlingService()
        error = AppError("Something failed", suggested_actions=["one", "two", "three", "four"])

        message = service.create_user_message(error.to_user_friendly())

        assert message.startswith("Something failed")
        assert "Suggested actions:" in message
        assert "  • three" in message
        assert "four" not in message

    def test_user_message_without_suggestions(self) -> None:
        service = ErrorHandlingService()
        error = AppError("Something failed", suggested_actions=["one"]).to_user_friendly()

        assert service.create_user_message(error, include_suggestions=False) == "Something failed"
