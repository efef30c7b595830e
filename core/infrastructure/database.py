"""
Database utilities and error translation.
"""

import contextlib
import logging
from typing import Iterator, Type

from django.db import DatabaseError

from core.domain.exceptions import StorageError, StorageException
from core.metrics import storage_errors_total

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def storage_errors(
    operation: str,
    error_class: Type[StorageException] = StorageError,
) -> Iterator[None]:
    """
    Translate database errors raised inside the block into domain errors.

    Usage:
        with storage_errors("get"):
            # Database operations
            pass

    Args:
        operation: Name of the store operation, used for logs and metrics
        error_class: Domain exception raised in place of the database error
    """
    try:
        yield
    except DatabaseError as exc:
        storage_errors_total.labels(operation=operation).inc()
        logger.warning("Event store %s failed: %s", operation, exc)
        raise error_class(f"{operation} failed: {exc}") from exc
