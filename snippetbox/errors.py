# snippetbox/errors.py
# Structured errors raised by the snippet store.
# Each error carries a machine-readable code and the HTTP status a handler
# layer would map it to.

from typing import Optional


class AppError(Exception):
    """Base application error with structured fields."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[dict] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict:
        """Standardized error payload."""
        content = {
            "code": self.error_code,
            "message": self.message,
        }
        if self.details:
            content["details"] = self.details
        return {"error": content}


class StoreError(AppError):
    """Database operation failed. The driver exception is chained as __cause__."""
    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[dict] = None
    ):
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        super().__init__(
            message=message,
            error_code="STORE_ERROR",
            status_code=503,
            details=details
        )
        self.operation = operation


class SnippetNotFoundError(AppError):
    """No live snippet matches the requested id."""
    def __init__(self, snippet_id: int):
        super().__init__(
            message=f"Snippet {snippet_id} not found",
            error_code="NOT_FOUND",
            status_code=404,
            details={"snippet_id": snippet_id}
        )
        self.snippet_id = snippet_id
