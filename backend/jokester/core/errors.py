"""Error Hierarchy — typed, categorized exceptions for terminal request failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries an http_status: 400/401/403/404 for domain, 503 for infrastructure
    - Every error carries a user_message safe to show verbatim to the end user
    - to_response() produces the REST envelope; internal details never leak into it

Design Decisions:
    - Single hierarchy with JokesterError base: one global handler catches all
    - Field-level form errors are NOT exceptions; they are returned as data
      (see core/validate_joke_form.py) so the form can be redisplayed
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    joke_id: str | None = None
    user_id: str | None = None
    intent: str | None = None
    user_message: str | None = None


class JokesterError(Exception):
    """Base exception for all Jokester errors."""

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

    @property
    def user_message(self) -> str:
        return self.context.user_message or self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "user_message": self.user_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "joke_id": self.context.joke_id,
                    "intent": self.context.intent,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnsupportedIntentError(JokesterError):
    """Form submitted with an intent the action does not handle."""
    def __init__(self, intent: object, context: ErrorContext | None = None):
        message = f"The intent {intent} is not supported"
        ctx = context or ErrorContext()
        ctx.intent = None if intent is None else str(intent)
        ctx.user_message = ctx.user_message or message
        super().__init__(
            message, "UNSUPPORTED_INTENT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class UnauthorizedError(JokesterError):
    """No identity present where one is required."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(JokesterError):
    """Identity present but lacks permission for the operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(JokesterError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        message = (
            f"{resource_type} '{resource_id}' not found"
            if resource_id is not None else f"No {resource_type} found"
        )
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JokesterError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
