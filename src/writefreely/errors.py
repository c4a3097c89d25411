"""
WriteFreely error types — one class per failure kind the client can report.
"""

from typing import Any, Optional


class WriteFreelyError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class RequestError(WriteFreelyError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status: int, reason: Optional[str] = None):
        message = f"HTTP {status}: {reason}" if reason else f"HTTP {status}"
        super().__init__("request_error", message, {"status": status, "reason": reason})
        self.status = status
        self.reason = reason


class AuthenticationError(WriteFreelyError):
    def __init__(self, message: str = "Authentication failed", code: str = "authentication_error"):
        super().__init__(code, message)


class ConnectionError(WriteFreelyError):
    def __init__(self, message: str):
        super().__init__("connection_error", message)


class UrlError(WriteFreelyError):
    def __init__(self, message: str):
        super().__init__("url_error", message)


class ParseError(WriteFreelyError):
    """Response body did not match the expected envelope or payload shape."""

    def __init__(self, text: str, message: str = "Could not parse API response"):
        super().__init__("parse_error", message, {"text": text})
        self.text = text


class LoggedOutError(WriteFreelyError):
    def __init__(self, message: str = "This action requires an authenticated client"):
        super().__init__("logged_out", message)


class UsageError(WriteFreelyError):
    def __init__(self, message: str):
        super().__init__("usage_error", message)


class UnknownError(WriteFreelyError):
    def __init__(self, message: str = "Unexpected API state"):
        super().__init__("unknown_error", message)
