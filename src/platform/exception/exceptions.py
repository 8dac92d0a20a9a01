class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class ValidationError(DomainError):
    def __init__(self, message: str = 'eventId and userEmail are required') -> None:
        super().__init__(message, 400)


class DuplicateBookingError(DomainError):
    def __init__(self, message: str = 'You have already booked this event') -> None:
        super().__init__(message, 400)


# Reference and temporal violations keep the 500 classification clients already rely on
class EventReferenceError(DomainError):
    def __init__(self, message: str = 'Referenced event does not exist') -> None:
        super().__init__(message, 500)


class TemporalError(DomainError):
    def __init__(self, message: str = 'Cannot create booking for an event in the past') -> None:
        super().__init__(message, 500)


class InfrastructureError(CustomBaseError):
    """Backing store unreachable or failing; nothing was persisted, safe to retry."""

    def __init__(self, message: str) -> None:
        super().__init__(message or 'Unknown error', 500)


class ConfigurationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
