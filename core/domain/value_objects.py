"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class EventType(Enum):
    """
    License status event types.

    The value is the status name; `code` is the integer stored in the
    event table by the default vocabulary.
    """

    REGISTER = "register"
    RENEW = "renew"
    RETURN = "return"
    REVOKE = "revoke"
    CANCEL = "cancel"

    @property
    def code(self) -> int:
        """Return the default integer type code."""
        return _DEFAULT_CODES[self]

    def __str__(self) -> str:
        """Return type as string."""
        return self.value


_DEFAULT_CODES = {
    EventType.REGISTER: 1,
    EventType.RENEW: 2,
    EventType.RETURN: 3,
    EventType.REVOKE: 4,
    EventType.CANCEL: 5,
}
