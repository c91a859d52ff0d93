"""Error Hierarchy — typed exceptions for the failure modes that escape a handler.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the REST envelope; no internal details leaked
    - Expected outcomes (not found, store failure) are StoreResult values, not
      exceptions — only request-level preconditions and infrastructure faults
      live here

Design Decisions:
    - Single hierarchy with LedgerError base: FastAPI global handler catches all
    - SessionRequiredError keeps the flat {"error": "Unauthorized"} body that
      existing clients of the ledger expect
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    UNAUTHENTICATED = "unauthenticated"
    DATABASE = "database"


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to REST error response body."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class SessionRequiredError(LedgerError):
    """Request reached a guarded route without a session cookie."""
    def __init__(self):
        super().__init__(
            "Unauthorized", "SESSION_REQUIRED",
            ErrorCategory.UNAUTHENTICATED, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(LedgerError):
    """Database operation failed outside the repository boundary."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": "Internal Server Error"}
