"""Error Hierarchy — typed, categorized exceptions for all Threadboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Repositories raise these; the graph layer settles them into Outcomes
    - to_response() produces the REST envelope; to_extensions() the GraphQL error extensions
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ThreadboardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and error envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: str | None = None
    operation: str | None = None
    field_name: str | None = None


class ThreadboardError(Exception):
    """Base exception for all Threadboard errors."""

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
                "context": {
                    "entity_id": self.context.entity_id,
                    "operation": self.context.operation,
                    "field_name": self.context.field_name,
                },
            }
        }

    def to_extensions(self) -> dict:
        """Convert to the `extensions` member of a GraphQL error."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": self.severity in (
                ErrorSeverity.INFO, ErrorSeverity.WARNING,
            ),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ThreadboardError):
    """Point lookup matched zero rows."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class MalformedIdentifierError(ThreadboardError):
    """Identifier bytes are not a 16-byte UUID encoding."""
    def __init__(self, length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Identifier must be exactly 16 bytes, got {length}",
            "MALFORMED_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.length = length


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ThreadboardError):
    """Store connectivity, constraint or serialization failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class HashFailureError(ThreadboardError):
    """Credential hashing failed."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Password hashing failed: {reason}",
            "HASH_FAILURE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
