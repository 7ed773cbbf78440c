from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the application.
    Keeps the error payload returned to clients in one shape.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. DOMAIN ERRORS
# =========================================================

class IllegalStateException(BaseAPIException):
    """
    500: an operation was requested against state that does not allow it,
    e.g. deleting a record that does not exist.
    """
    def __init__(self, message: str, details: dict = None):
        super().__init__(
            message=message,
            code="ILLEGAL_STATE",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )

# =========================================================
# 2. INFRASTRUCTURE ERRORS
# =========================================================

class DatabaseUnavailableError(BaseAPIException):
    """
    503: the database cannot be reached (raised at startup by init_db).
    """
    def __init__(self, url: str):
        super().__init__(
            message=f"Cannot connect to database: {url}",
            code="DATABASE_UNAVAILABLE",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
