"""Error models for Przelewy24 SDK.

Every error carries the operation that raised it so that failures can be
diagnosed from logs alone. Nothing in the SDK retries on error; retry
policy belongs to the caller.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Stable error codes exposed on every SDK exception."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"


class Przelewy24Error(Exception):
    """Base exception for Przelewy24 SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.code}] {self.operation}: {self.message}"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "operation": self.operation,
            }
        }


class ConfigurationError(Przelewy24Error):
    """Credentials or endpoint missing after settings resolution.

    Not retryable; an operator has to fix the configuration.
    """

    def __init__(
        self,
        message: str,
        missing: Optional[list[str]] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.CONFIGURATION_ERROR.value,
            details={"missing": list(missing or [])},
            operation=operation,
        )
        self.missing = list(missing or [])


class ValidationError(Przelewy24Error):
    """Caller passed an empty or invalid required field."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.VALIDATION_ERROR.value,
            details={"field": field},
            operation=operation,
        )
        self.field = field


class ProviderError(Przelewy24Error):
    """The provider answered with a non-2xx status.

    ``body`` is the raw response text, kept verbatim.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        operation: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.PROVIDER_ERROR.value,
            details={"status_code": status_code, **(details or {})},
            operation=operation,
        )
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: str,
        operation: Optional[str] = None,
    ) -> "ProviderError":
        """Create ProviderError from an HTTP status and raw body."""
        message = f"Przelewy24 returned {status_code}"
        details: dict[str, Any] = {}
        try:
            parsed = json.loads(body) if body else None
        except ValueError:
            parsed = None

        if isinstance(parsed, dict):
            error_data = parsed.get("error")
            if isinstance(error_data, str) and error_data:
                message = f"{message}: {error_data}"
            elif isinstance(error_data, (dict, list)):
                details["error"] = error_data
            if "code" in parsed:
                details["provider_code"] = parsed["code"]

        return cls(
            message=message,
            status_code=status_code,
            body=body,
            operation=operation,
            details=details,
        )


class DeserializationError(Przelewy24Error):
    """A 2xx response body did not match the expected shape."""

    def __init__(
        self,
        message: str,
        body: str = "",
        operation: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.DESERIALIZATION_ERROR.value,
            operation=operation,
        )
        self.body = body


class RequestTimeoutError(Przelewy24Error):
    """The request did not complete within the configured timeout."""

    def __init__(self, message: str = "Request timed out", operation: Optional[str] = None):
        super().__init__(message, code=ErrorCode.TIMEOUT_ERROR.value, operation=operation)


class ProviderConnectionError(Przelewy24Error):
    """The provider could not be reached."""

    def __init__(self, message: str = "Connection failed", operation: Optional[str] = None):
        super().__init__(message, code=ErrorCode.CONNECTION_ERROR.value, operation=operation)
