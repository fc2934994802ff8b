"""Error Hierarchy: typed, categorized exceptions for all Stargate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (NotFound, Conflict, Validation) map to HTTP 400
    - Infrastructure errors (Persistence, DataIntegrity) map to HTTP 500
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StargateError base: FastAPI global handler catches all
    - NotFound and Conflict both surface as 400: clients distinguish failures by
      status code only, the error code in the body is informational
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_name: str | None = None
    person_id: int | None = None
    debug_info: dict[str, Any] | None = None


class StargateError(Exception):
    """Base exception for all Stargate errors."""

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
            "success": False,
            "message": self.message,
            "responseCode": self.http_status,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(StargateError):
    """Request input failed a domain-level check (e.g. blank name)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class NotFoundError(StargateError):
    """Referenced resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 400,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(StargateError):
    """Uniqueness rule violated (person name, duty title + start date)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(StargateError):
    """Database operation failed; the transaction was rolled back."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class DataIntegrityError(StargateError):
    """Stored duty history is inconsistent and cannot be extended safely."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATA_INTEGRITY_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
