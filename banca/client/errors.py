# Banca Client - Exceptions
# =========================
"""Errors raised by the evaluation data-source client."""

from typing import Optional


class ApiError(Exception):
    """Base exception for data-source errors."""
    pass


class ApiConnectionError(ApiError):
    """Raised when the data source cannot be reached."""

    def __init__(self, url: str, original_error: Optional[str] = None):
        self.url = url
        self.original_error = original_error
        super().__init__(
            f"Cannot connect to the evaluation data source at {url}. "
            "Check your connection and try again in a moment."
        )


class ApiTimeoutError(ApiError):
    """Raised when the data source does not answer in time."""

    def __init__(self, url: str, timeout: int):
        self.url = url
        self.timeout = timeout
        super().__init__(
            f"The evaluation data source at {url} did not answer within {timeout} seconds. "
            "Try again later."
        )


class ApiResponseError(ApiError):
    """Raised when the data source answers with an error or an unreadable body."""

    def __init__(self, action: str, message: Optional[str] = None, status_code: Optional[int] = None):
        self.action = action
        self.message = message
        self.status_code = status_code
        super().__init__(
            f"The data source rejected '{action}': {message or 'Unknown error'}."
        )
