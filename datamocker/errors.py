"""Exception hierarchy for datamocker.

Every error raised by a generator derives from DataMockerError and carries:
- error_code: an ErrorCode enum member for programmatic handling
- context: extra fields describing the offending call
- suggestions: actionable hints for fixing the call

Errors are always raised synchronously at the offending call. There is no
retry and no partial result.

Example:
    try:
        mock.number.even(11, 11)
    except InvalidRangeError as e:
        print(f"Error [{e.error_code.value}]: {e.message}")
        for suggestion in e.suggestions:
            print(f"  - {suggestion}")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for datamocker.

    Error codes are organized by category:
    - E2xx: Validation errors (arguments and ranges)
    - E3xx: Provider/registry errors
    - E4xx: Static data table errors
    - E9xx: Unknown/internal errors
    """

    # Validation errors (E2xx)
    VALIDATION_FAILED = "E201"
    INVALID_ARGUMENT = "E202"
    INVALID_RANGE = "E203"

    # Provider errors (E3xx)
    PROVIDER_ERROR = "E301"
    PROVIDER_NOT_FOUND = "E302"

    # Data table errors (E4xx)
    DATA_TABLE_INVALID = "E401"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 300:
            return "validation"
        elif code_num < 400:
            return "provider"
        elif code_num < 500:
            return "data"
        else:
            return "unknown"


class DataMockerError(Exception):
    """Base exception for all datamocker errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: Extra fields describing the failing call
        suggestions: List of actionable steps to resolve the issue
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        suggestions: list[str] | None = None,
        **context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context: dict[str, Any] = dict(context)
        self._suggestions = suggestions
        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [f"Error [{self.error_code.value}]: {self.message}"]

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key} = {value!r}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": {k: repr(v) for k, v in self.context.items()},
        }


class ValidationError(DataMockerError):
    """Caller input was rejected before any value was drawn."""

    error_code = ErrorCode.VALIDATION_FAILED
    default_message = "Validation failed"


class InvalidArgumentError(ValidationError):
    """Malformed or out-of-domain caller input.

    Raised for negative lengths or years, empty required strings and lists,
    unknown region/country/format tags and precision out of bounds.
    """

    error_code = ErrorCode.INVALID_ARGUMENT
    default_message = "Invalid argument"
    default_suggestions = [
        "Check the argument against the documented domain of the operation",
        "Use the enum members (Region, Gender, NameFormat, ...) instead of free strings",
    ]


class InvalidRangeError(ValidationError):
    """A well-formed range admits no value satisfying the request.

    Covers min > max as well as ranges that contain no even/odd value, no
    multiple of the divisor, or no prime.
    """

    error_code = ErrorCode.INVALID_RANGE
    default_message = "Invalid range"
    default_suggestions = [
        "Ensure min <= max",
        "Widen the range so that at least one qualifying value exists",
    ]


class ProviderError(DataMockerError):
    """Base class for provider registry errors."""

    error_code = ErrorCode.PROVIDER_ERROR
    default_message = "Provider error"


class ProviderNotFoundError(ProviderError):
    """No provider is registered under the requested key."""

    error_code = ErrorCode.PROVIDER_NOT_FOUND
    default_message = "Provider not found"

    def __init__(self, key: str, available: list[str] | None = None, **kwargs: Any) -> None:
        self.key = key
        self.available = sorted(available or [])
        message = f"No provider found for: {key}"
        if self.available:
            message += f". Registered: {', '.join(self.available)}"
        suggestions = [
            "Register the provider through DataMocker(providers={...})",
            "Use one of the built-in keys: name, date, number, username, address, "
            "phone_number, company, string, email",
        ]
        super().__init__(message, suggestions=suggestions, key=key, **kwargs)


class DataTableError(DataMockerError):
    """A static lookup table violates its invariants."""

    error_code = ErrorCode.DATA_TABLE_INVALID
    default_message = "Invalid lookup table"
