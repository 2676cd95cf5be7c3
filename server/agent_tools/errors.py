from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Where a tool failure originated."""
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"


class ToolError(Exception):
    """Base class for failures that end a tool invocation."""
    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ToolValidationError(ToolError):
    """Raised when input or a remote payload does not have the expected shape."""
    kind = ErrorKind.VALIDATION


class ApiError(ToolError):
    """Raised when a remote service answers with a non-success status."""
    kind = ErrorKind.API

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class TransportError(ToolError):
    """Raised when a request could not be completed."""
    kind = ErrorKind.TRANSPORT


class GitHubAPIError(ApiError):
    pass


class GitHubTransportError(TransportError):
    pass


def describe_exception(exc: BaseException) -> str:
    """Text of an exception, or its class name when it carries no message."""
    return str(exc) or exc.__class__.__name__
