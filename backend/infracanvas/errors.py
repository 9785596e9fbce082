from typing import Dict, List


class InfraCanvasError(Exception):
    """Base class for errors raised by the compiler and its transport."""


class GraphValidationError(InfraCanvasError):
    """Raised when a graph fails service validation before compilation."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        count = sum(len(messages) for messages in errors.values())
        super().__init__(
            f"{len(errors)} service(s) not fully configured ({count} issue(s))"
        )


class TransportError(InfraCanvasError):
    """Base class for failures talking to the deployment backend."""


class ClientSideError(TransportError):
    """Request rejected locally, nothing was sent."""


class BackendError(TransportError):
    """Backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)
