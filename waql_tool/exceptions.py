"""
WAQL Tool Exceptions

Every error carries the pipeline stage that raised it, so callers can tell
input problems from transport problems from service-reported errors.
"""


class WaqlToolError(Exception):
    """Base exception for WAQL Tool."""

    stage = "waql"

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return self.message

    def tagged(self) -> str:
        """Return the message prefixed with the stage that produced it."""
        return f"{self.stage}: {self.message}"


class EmptyQueryError(WaqlToolError):
    """Raised when the query text is empty after trimming."""

    stage = "query"

    def __init__(self, message: str = "Please enter a WAQL statement."):
        super().__init__(message)


class TransportError(WaqlToolError):
    """Raised when the exchange with the query service fails."""

    stage = "transport"


class SendFailedError(TransportError):
    """Raised when the request cannot be completed (refused, timeout, DNS)."""
    pass


class InvalidResponseBodyError(TransportError):
    """Raised when the response body is not parseable JSON."""
    pass


class NotAnObjectError(TransportError):
    """Raised when the response JSON is not an object at the top level."""
    pass


class ServiceError(SendFailedError):
    """Raised when the service answers with an HTTP error status."""

    stage = "service"

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        super().__init__(message, details=details)
        self.status_code = status_code

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    def tagged(self) -> str:
        return f"{self.stage}: {self}"


class ExportError(WaqlToolError):
    """Raised when a table cannot be exported."""

    stage = "export"


class WriteFailedError(ExportError):
    """Raised when the export destination cannot be written."""
    pass
