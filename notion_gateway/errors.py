"""Error types shared across the gateway."""


class GatewayError(Exception):
    """Base error for all gateway failures."""


class ConfigurationError(GatewayError):
    """The process is missing configuration required to serve a request.

    Raised before any backend call is attempted and surfaced as HTTP 500.
    """


class BackendError(GatewayError):
    """A Notion operation failed."""

    def __init__(self, message: str, status: int | None = None, code: str | None = None) -> None:
        self.message = message
        self.status = status
        self.code = code
        super().__init__(message)


class ToolArgumentError(BackendError):
    """A required tool argument was not supplied."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Missing required argument: {argument}")
