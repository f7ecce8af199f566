"""Custom exception classes for conn-uri."""

from typing import Optional


class ConnURIError(Exception):
    """Base exception for conn-uri errors."""

    def __init__(self, message: str, code: str = "internal", detail: str = ""):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class URISyntaxError(ConnURIError, ValueError):
    """A string could not be parsed as a URI reference."""

    def __init__(self, input: str, reason: str, index: int = -1):
        self.input = input
        self.reason = reason
        self.index = index
        if index >= 0:
            message = f"{reason} at index {index}: {input}"
        else:
            message = f"{reason}: {input}"
        super().__init__(message, code="uri_syntax")


class InvalidConnectionStringError(ConnURIError):
    """The connection string cannot be resolved into an http(s) address."""

    def __init__(
        self,
        connection_string: str,
        reason: str,
        suppressed: Optional[str] = None,
    ):
        self.connection_string = connection_string
        self.reason = reason
        # Failure of the first (as-is) parse attempt, kept for diagnostics
        self.suppressed = suppressed
        super().__init__(
            f"Invalid connection configuration [{connection_string}]: {reason}",
            code="invalid_connection_string",
            detail=suppressed or "",
        )


class InvalidArgumentError(ConnURIError, ValueError):
    """Structurally invalid call arguments."""

    def __init__(self, message: str):
        super().__init__(message, code="invalid_argument")
