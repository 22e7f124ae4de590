class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_business_outcome(self) -> bool:
        return self.status_code < 500


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class InvalidStateError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class ValidationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class StoreUnavailableError(CustomBaseError):
    """Persistence backend unreachable or failing. `detail` is for logs only."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__('Internal server error', 500)


class SinkUnavailableError(CustomBaseError):
    """Event sink delivery failure. Never leaves the sink adapter."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
