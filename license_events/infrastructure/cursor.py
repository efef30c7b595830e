"""
Scoped iteration over ORM query results.
"""

import logging
from typing import Any, Callable, Iterator, Optional

from core.infrastructure.database import storage_errors
from license_events.ports.event_repository import EventCursorPort

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class EventCursor(EventCursorPort):
    """
    Lazy single-pass cursor over a queryset iterator.

    The query runs on the first advance, so database errors surface
    there as StorageError rather than when the cursor is created.
    After an error, exhaustion or close() every further advance stops.

    Usage:
        with repository.find_by_license_status(7) as events:
            for event in events:
                ...
    """

    def __init__(self, rows: Iterator, convert: Callable[[Any], Any], operation: str):
        """
        Initialize cursor.

        Args:
            rows: Queryset iterator (not yet started)
            convert: Maps one row to a domain object
            operation: Store operation name for error reporting
        """
        self._rows: Optional[Iterator] = rows
        self._convert = convert
        self._operation = operation

    @property
    def closed(self) -> bool:
        return self._rows is None

    def __next__(self):
        if self._rows is None:
            raise StopIteration
        try:
            with storage_errors(self._operation):
                row = next(self._rows, _EXHAUSTED)
        except Exception:
            self.close()
            raise
        if row is _EXHAUSTED:
            self.close()
            raise StopIteration
        return self._convert(row)

    def close(self) -> None:
        if self._rows is None:
            return
        rows, self._rows = self._rows, None
        close = getattr(rows, "close", None)
        if close is not None:
            close()
        logger.debug("Closed %s cursor", self._operation)
