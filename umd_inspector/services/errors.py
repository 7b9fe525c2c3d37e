"""Error handling for the UMD dump inspector.

This module provides:
- Exception classes for file system, log parsing, validation and configuration errors
- User-friendly error messages with suggested actions
- A centralized error handling service that logs and records errors
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import structlog

log = structlog.stdlib.get_logger()


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    FILE_SYSTEM = "file_system"
    PARSING = "parsing"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    UNEXPECTED = "unexpected"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ErrorContext:
    """Context information for an error."""
    operation: str
    component: str
    details: dict[str, Any]


@dataclass(frozen=True)
class UserFriendlyError:
    """User-friendly error representation with suggested actions."""
    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    suggested_actions: list[str]
    technical_details: str | None = None
    recoverable: bool = True


class AppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNEXPECTED,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        suggested_actions: list[str] | None = None,
        technical_details: str | None = None,
        recoverable: bool = True,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.suggested_actions = suggested_actions or []
        self.technical_details = technical_details
        self.recoverable = recoverable
        self.context = context

    def to_user_friendly(self) -> UserFriendlyError:
        """Convert to user-friendly error representation."""
        return UserFriendlyError(
            message=self.message,
            category=self.category,
            severity=self.severity,
            suggested_actions=self.suggested_actions,
            technical_details=self.technical_details,
            recoverable=self.recoverable,
        )


class FileSystemError(AppError):
    """Exception for file system-related errors."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        path: str | Path | None = None,
        operation: str | None = None,
    ) -> None:
        suggested_actions = self._get_suggested_actions(original_error)

        technical_details = None
        if original_error:
            technical_details = f"{type(original_error).__name__}: {str(original_error)}"
        if path:
            technical_details = f"Path: {path}" + (f"\n{technical_details}" if technical_details else "")

        super().__init__(
            message=message,
            category=ErrorCategory.FILE_SYSTEM,
            severity=ErrorSeverity.ERROR,
            suggested_actions=suggested_actions,
            technical_details=technical_details,
            recoverable=True,
        )
        self.original_error = original_error
        self.path = str(path) if path is not None else None
        self.operation = operation

    @staticmethod
    def _get_suggested_actions(original_error: Exception | None) -> list[str]:
        """Get suggested actions based on error type."""
        if isinstance(original_error, PermissionError):
            return [
                "Check file permissions on the dump directory",
                "Try running with appropriate permissions",
            ]
        elif isinstance(original_error, FileNotFoundError):
            return [
                "Verify the base path passed to the dumping tool",
                "Check that the dump finished writing its output files",
            ]
        return [
            "Check the dump path and permissions",
            "Re-run the dumping tool if output files are damaged",
        ]


class LogParseError(AppError):
    """Exception for content that does not match the dumping tool's log layout."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        technical_details = None
        if path:
            technical_details = f"File: {path}"
        if line_number is not None:
            technical_details = (technical_details or "") + f"\nLine: {line_number}"
        if line is not None:
            technical_details = (technical_details or "") + f"\nContent: {line[:100]}"

        super().__init__(
            message=message,
            category=ErrorCategory.PARSING,
            severity=ErrorSeverity.WARNING,
            suggested_actions=[
                "The log may come from an unsupported tool version",
                "Re-run the dump to regenerate the log files",
            ],
            technical_details=technical_details,
            recoverable=True,
        )
        self.path = str(path) if path is not None else None
        self.line_number = line_number
        self.line = line


class ValidationError(AppError):
    """Exception for validation-related errors."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        constraints: list[str] | None = None,
    ) -> None:
        suggested_actions = ["Review the input requirements"]
        if constraints:
            suggested_actions.extend([f"Ensure: {c}" for c in constraints])

        technical_details = None
        if field:
            technical_details = f"Field: {field}"
        if value is not None:
            value_str = str(value)[:100]
            technical_details = (technical_details or "") + f"\nValue: {value_str}"

        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            suggested_actions=suggested_actions,
            technical_details=technical_details,
            recoverable=True,
        )
        self.field = field
        self.value = value
        self.constraints = constraints or []


class ConfigurationError(AppError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        current_value: Any = None,
        expected: str | None = None,
    ) -> None:
        suggested_actions = [
            "Check the configuration file",
            "Delete it to fall back to default values",
        ]
        if expected:
            suggested_actions.append(f"Expected: {expected}")

        technical_details = None
        if setting:
            technical_details = f"Setting: {setting}"
        if current_value is not None:
            technical_details = (technical_details or "") + f"\nCurrent: {current_value}"

        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.ERROR,
            suggested_actions=suggested_actions,
            technical_details=technical_details,
            recoverable=True,
        )
        self.setting = setting
        self.current_value = current_value
        self.expected = expected


class ErrorHandlingService:
    """Centralized error handling service.

    Converts arbitrary exceptions into AppError instances and logs them
    with their technical details.
    """

    def __init__(self) -> None:
        log.debug("Error handling service initialized")

    def handle_error(
        self,
        error: Exception,
        operation: str,
        component: str,
        context: dict[str, Any] | None = None,
    ) -> UserFriendlyError:
        """Handle an error and return a user-friendly representation.

        Args:
            error: The exception that occurred
            operation: The operation being performed
            component: The component where the error occurred
            context: Additional context information

        Returns:
            User-friendly error representation
        """
        app_error = self._convert_to_app_error(error, operation, component, context)
        self._log_error(app_error, operation, component, context)

        return app_error.to_user_friendly()

    def _convert_to_app_error(
        self,
        error: Exception,
        operation: str,
        component: str,
        context: dict[str, Any] | None,
    ) -> AppError:
        """Convert a standard exception to an AppError."""
        if isinstance(error, AppError):
            return error

        path = context.get("path") if context else None

        if isinstance(error, PermissionError):
            return FileSystemError(
                message="Permission denied while reading the dump output.",
                original_error=error,
                path=path,
                operation=operation,
            )
        elif isinstance(error, FileNotFoundError):
            return FileSystemError(
                message="The file or directory was not found.",
                original_error=error,
                path=path,
                operation=operation,
            )
        elif isinstance(error, OSError):
            return FileSystemError(
                message=f"A file system error occurred: {str(error)}",
                original_error=error,
                path=path,
                operation=operation,
            )
        elif isinstance(error, json.JSONDecodeError):
            return ValidationError(
                message="Invalid JSON format. The data could not be parsed.",
                field="json_content",
            )
        elif isinstance(error, ValueError):
            return ValidationError(
                message=str(error),
                field=context.get("field") if context else None,
                value=context.get("value") if context else None,
            )
        elif isinstance(error, TypeError):
            return ValidationError(
                message=f"Invalid data type: {str(error)}",
                field=context.get("field") if context else None,
            )

        return AppError(
            message="An unexpected error occurred. Please try again.",
            category=ErrorCategory.UNEXPECTED,
            severity=ErrorSeverity.ERROR,
            technical_details=f"{type(error).__name__}: {str(error)}",
            recoverable=True,
            context=ErrorContext(
                operation=operation,
                component=component,
                details=context or {},
            ),
        )

    def _log_error(
        self,
        error: AppError,
        operation: str,
        component: str,
        context: dict[str, Any] | None,
    ) -> None:
        """Log error with full technical details."""
        log_method = log.warning if error.severity == ErrorSeverity.WARNING else log.error

        log_method(
            "Error occurred",
            error_message=error.message,
            category=error.category.value,
            severity=error.severity.value,
            operation=operation,
            component=component,
            technical_details=error.technical_details,
            recoverable=error.recoverable,
            context=context,
        )

    def create_user_message(
        self,
        error: UserFriendlyError,
        include_suggestions: bool = True,
    ) -> str:
        """Create a formatted user message from an error.

        Args:
            error: The user-friendly error
            include_suggestions: Whether to include suggested actions

        Returns:
            Formatted message string
        """
        parts = [error.message]

        if include_suggestions and error.suggested_actions:
            parts.append("\nSuggested actions:")
            for action in error.suggested_actions[:3]:
                parts.append(f"  • {action}")

        return "\n".join(parts)


_error_service: ErrorHandlingService | None = None


def get_error_service() -> ErrorHandlingService:
    """Get the global error handling service instance."""
    global _error_service
    if _error_service is None:
        _error_service = ErrorHandlingService()
    return _error_service


def handle_error(
    error: Exception,
    operation: str,
    component: str,
    context: dict[str, Any] | None = None,
) -> UserFriendlyError:
    """Convenience function to handle errors using the global service."""
    return get_error_service().handle_error(error, operation, component, context)
