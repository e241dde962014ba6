"""Domain-specific exceptions. Pure domain layer, no I/O."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyTargetError(DomainError):
    """Raised when a downstream target is empty or whitespace only."""

    def __init__(self, message: str = "empty target url") -> None:
        super().__init__(message)
