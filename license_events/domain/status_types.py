"""
Status vocabulary.

Maps the integer type codes stored in the event table to their
human-readable names. The vocabulary is injected into the event
repository so it can be swapped in tests and per deployment.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from core.domain.exceptions import InvalidEventTypeError
from core.domain.value_objects import EventType

logger = logging.getLogger(__name__)


class StatusVocabulary:
    """Lookup table between event type codes and status names."""

    def __init__(self, types: Mapping[int, str], registered_code: int):
        """
        Initialize the vocabulary.

        Args:
            types: Mapping of type code to status name
            registered_code: Code of the device registration action

        Raises:
            ValueError: If the registered code is not in the mapping
        """
        self._names: Dict[int, str] = {int(code): name for code, name in types.items()}
        self._codes: Dict[str, int] = {name: code for code, name in self._names.items()}
        if int(registered_code) not in self._names:
            raise ValueError(f"Registered type code {registered_code} is not in the vocabulary")
        self.registered_code = int(registered_code)

    @classmethod
    def default(cls) -> "StatusVocabulary":
        """Build the vocabulary from the EventType enum."""
        return cls(
            types={event_type.code: event_type.value for event_type in EventType},
            registered_code=EventType.REGISTER.code,
        )

    @classmethod
    def from_settings(cls, config: Optional[Mapping] = None) -> "StatusVocabulary":
        """
        Build the vocabulary from the LICENSE_EVENTS setting.

        Falls back to the default vocabulary for missing keys.
        """
        if config is None:
            from django.conf import settings

            config = getattr(settings, "LICENSE_EVENTS", {})

        default = cls.default()
        types = config.get("STATUS_TYPES") or default._names
        registered_code = config.get("REGISTERED_TYPE", default.registered_code)
        return cls(types=types, registered_code=registered_code)

    def name_for(self, code: int) -> str:
        """
        Return the status name of a type code.

        Unknown codes map to an empty string.
        """
        name = self._names.get(code)
        if name is None:
            logger.warning("Unknown event type code %s", code)
            return ""
        return name

    def code_for(self, value: Union[int, str, EventType]) -> int:
        """
        Resolve a status name, EventType or code to a type code.

        Raises:
            InvalidEventTypeError: If the value is not in the vocabulary
        """
        if isinstance(value, EventType):
            value = value.value
        if isinstance(value, bool):
            raise InvalidEventTypeError(f"Invalid event type: {value!r}")
        if isinstance(value, int):
            if value not in self._names:
                raise InvalidEventTypeError(f"Unknown event type code: {value}")
            return value
        try:
            return self._codes[value]
        except KeyError:
            raise InvalidEventTypeError(f"Unknown event type: {value!r}") from None

    @property
    def registered_name(self) -> str:
        return self._names[self.registered_code]

    def __contains__(self, code: int) -> bool:
        return code in self._names

    def __repr__(self) -> str:
        return f"StatusVocabulary({self._names!r}, registered_code={self.registered_code})"
