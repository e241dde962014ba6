"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DownstreamError(ApplicationError):
    """Base for failures extending the chain through the configured downstream."""


class DownstreamCallError(DownstreamError):
    """Raised when the downstream could not be reached (refused, DNS, timeout, deadline)."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"downstream call failed: {detail}")


class DownstreamShapeError(DownstreamError):
    """Raised when the downstream body is not a JSON array of hop records. Status code is ignored."""

    def __init__(self) -> None:
        super().__init__("downstream returned non-JSON or unexpected shape")
