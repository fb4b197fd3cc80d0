"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input/lookup errors are 400/404; infrastructure errors are 5xx
    - to_response() always produces the {"msg": ...} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GameReviewsError base: one FastAPI handler catches all
    - Status code lives on the error, not in the route: routes only raise
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    REFERENCE = "reference"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTING = "routing"
    DATABASE = "database"
    INTERNAL = "internal"


class GameReviewsError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"msg": self.message}


# ─── Request Errors (400/404) ───────────────────────────────────

class InvalidInputError(GameReviewsError):
    """A path or body value has the wrong shape or type."""
    def __init__(self, field: str):
        super().__init__(
            "Invalid input", "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class MissingInputError(GameReviewsError):
    """A required body field is absent or empty."""
    def __init__(self, field: str):
        super().__init__(
            "Missing input", "MISSING_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UnknownReferenceError(GameReviewsError):
    """A supplied foreign value does not resolve to an existing row."""
    def __init__(self, label: str, value: str):
        super().__init__(
            f"{label} {value} does not exist", "UNKNOWN_REFERENCE",
            ErrorCategory.REFERENCE, ErrorSeverity.WARNING, 400,
        )
        self.value = value


class ResourceNotFoundError(GameReviewsError):
    """A well-formed identifier does not resolve to any row."""
    def __init__(self, resource_id: int | str):
        super().__init__(
            f"ID {resource_id} does not exist", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.resource_id = resource_id


class RouteNotFoundError(GameReviewsError):
    """No declared route matches the request."""
    def __init__(self):
        super().__init__(
            "Invalid URL", "ROUTE_NOT_FOUND", ErrorCategory.ROUTING,
            ErrorSeverity.INFO, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GameReviewsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
