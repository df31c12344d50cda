"""Error Hierarchy: typed, categorized exceptions for all Movies API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Title errors (400-level) never touch the store; the store stays usable
    - to_response() produces the REST envelope; internal details never leak

Design Decisions:
    - Single hierarchy with MoviesError base: one FastAPI handler catches all
    - Title rejections are WARNING severity: client mistakes, not service faults
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None


class MoviesError(Exception):
    """Base exception for all Movies API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"path": self.context.path},
            }
        }


# ─── Title Errors (400-level) ───────────────────────────────────

class EmptyTitleError(MoviesError):
    """POST body was empty or absent."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Received POST request with empty body.",
            "EMPTY_TITLE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MalformedTitleError(MoviesError):
    """POST body could not be decoded as text."""
    def __init__(self, encoding: str, context: ErrorContext | None = None):
        super().__init__(
            f"Received POST request with a body that is not valid {encoding} text.",
            "MALFORMED_TITLE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.encoding = encoding


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(MoviesError):
    """Unhandled failure; the message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
