"""Error Hierarchy: typed, categorized exceptions for every account-service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the uniform envelope: success=false plus a message
    - No internal details leaked in user-facing messages (detail is opt-in)

Design Decisions:
    - Single hierarchy with AccountServiceError base: one FastAPI handler catches all
    - Login failures for unknown user and wrong password share one class so the
      response cannot be used as an account-existence oracle
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, one per HTTP status family used."""
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


class AccountServiceError(Exception):
    """Base exception for all account-service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        body = {
            "success": False,
            "message": self.message,
            "code": self.code,
        }
        if self.detail is not None:
            body["detail"] = self.detail
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidCredentialsError(AccountServiceError):
    """Unknown username or wrong password (deliberately indistinguishable)."""
    def __init__(self):
        super().__init__(
            "Incorrect username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class AccountDisabledError(AccountServiceError):
    """Account exists but is_active is false."""
    def __init__(self):
        super().__init__(
            "Account is disabled. Contact the administrator",
            "ACCOUNT_DISABLED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class CurrentPasswordMismatchError(AccountServiceError):
    """Supplied currentPassword does not match the stored one."""
    def __init__(self):
        super().__init__(
            "Current password is incorrect",
            "CURRENT_PASSWORD_MISMATCH", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class ResourceNotFoundError(AccountServiceError):
    """Requested resource does not exist (or is not visible)."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class ConflictError(AccountServiceError):
    """Unique field already taken."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Store / Internal Errors (500-level) ────────────────────────

class DatabaseError(AccountServiceError):
    """Store operation failed. message is client-facing; operation is for logs."""
    def __init__(self, message: str, operation: str, detail: Any = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, detail,
        )
        self.operation = operation
