"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class EventException(DomainException):
    """Base exception for license event errors."""

    pass


class EventNotFoundError(EventException):
    """Raised when no event matches a lookup that expects exactly one."""

    def __init__(self, message: str = "Event not found"):
        super().__init__(message, code="EVENT_NOT_FOUND")


class InvalidEventTypeError(EventException):
    """Raised when an event type is not part of the status vocabulary."""

    def __init__(self, message: str = "Invalid event type"):
        super().__init__(message, code="INVALID_EVENT_TYPE")


class StorageException(DomainException):
    """Base exception for failures of the backing store."""

    pass


class StorageError(StorageException):
    """Raised on an I/O, protocol or constraint failure of the backing store."""

    def __init__(self, message: str = "Storage error"):
        super().__init__(message, code="STORAGE_ERROR")


class StorageUnavailableError(StorageException):
    """Raised when the event table cannot be created or reached at startup."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message, code="STORAGE_UNAVAILABLE")
