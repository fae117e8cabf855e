"""Error Hierarchy — typed, categorized exceptions for all Book Explorer failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope {"error": {...}}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookExplorerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data travels with the error, not the logger
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    book_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class BookExplorerError(Exception):
    """Base exception for all Book Explorer errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BookValidationError(BookExplorerError):
    """A required field is missing or a value breaks a store constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class BookNotFoundError(BookExplorerError):
    """No book matches the requested id."""
    def __init__(self, book_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.book_id = book_id
        super().__init__(
            f"Book '{book_id}' not found",
            "BOOK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.book_id = book_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(BookExplorerError):
    """The store could not be reached or failed internally."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class BookApiError(BookExplorerError):
    """Catalog API call failed (client side). status_code is None on transport errors."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Catalog API error: {message}",
            "BOOK_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.status_code = status_code
