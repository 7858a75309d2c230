"""Error Hierarchy — typed, categorized exceptions for every failure the action layer surfaces.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Record/statement errors are 400-level and recoverable per request
    - PresenterNotFoundError is a configuration error (500), never defaulted away
    - to_response() produces the flat REST envelope {"error": "<text>"}

Design Decisions:
    - Single hierarchy with CrudKitError base: one FastAPI handler converts all
      (ADR: uniform error shape at the outermost boundary)
    - Operation failures are NOT modelled here: they travel in the Result tag
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STATEMENT = "statement"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-side context attached to an error for log lines."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CrudKitError(Exception):
    """Base exception for all crudkit errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidInputError(CrudKitError):
    """Transport parameters could not be turned into action params."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class RecordNotFoundError(CrudKitError):
    """Requested record does not exist."""
    def __init__(
        self, model_name: str, record_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Couldn't find {model_name} with 'id'={record_id}",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.model_name = model_name
        self.record_id = record_id


class UnknownResourceError(CrudKitError):
    """Routing segment names no registered resource."""
    def __init__(self, resource: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown resource '{resource}'",
            "UNKNOWN_RESOURCE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class UnknownOperationError(CrudKitError):
    """Operation name is not registered (or not for this resource)."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown operation '{operation}'",
            "UNKNOWN_OPERATION", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class RecordInvalidError(CrudKitError):
    """A strict save was rejected by the record's validation rules."""
    def __init__(self, record: Any, context: ErrorContext | None = None):
        super().__init__(
            record.errors.to_sentence(),
            "RECORD_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.record = record


class StatementInvalidError(CrudKitError):
    """The database rejected a statement (constraint, bad value)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STATEMENT_INVALID", ErrorCategory.STATEMENT,
            ErrorSeverity.ERROR, context, 400,
        )


class RecordNotUniqueError(StatementInvalidError):
    """A unique index was violated."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, context)
        self.code = "RECORD_NOT_UNIQUE"
        self.category = ErrorCategory.CONFLICT


class RecordNotDestroyedError(CrudKitError):
    """A strict destroy was blocked by the record itself."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RECORD_NOT_DESTROYED", ErrorCategory.STATEMENT,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Configuration / Infrastructure Errors (500-level) ──────────

class PresenterNotFoundError(CrudKitError):
    """No presenter is registered under the derived name."""
    def __init__(self, presenter_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"No presenter registered as '{presenter_name}'",
            "PRESENTER_NOT_FOUND", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.presenter_name = presenter_name


class DatabaseError(CrudKitError):
    """Database connection or driver failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
