"""
Unit tests for database error translation.
"""
import pytest
from django.db import IntegrityError, OperationalError
from prometheus_client import REGISTRY

from core.domain.exceptions import (
    DomainException,
    EventNotFoundError,
    StorageError,
    StorageUnavailableError,
)
from core.infrastructure.database import storage_errors


def error_count(operation):
    return (
        REGISTRY.get_sample_value(
            "license_events_storage_errors_total", {"operation": operation}
        )
        or 0.0
    )


class TestStorageErrors:
    """Tests for the storage_errors context manager."""

    def test_translates_database_error(self):
        """Test database errors become StorageError."""
        with pytest.raises(StorageError) as exc_info:
            with storage_errors("add"):
                raise IntegrityError("NOT NULL constraint failed: event.type")

        assert exc_info.value.code == "STORAGE_ERROR"
        assert "NOT NULL" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, IntegrityError)

    def test_custom_error_class(self):
        """Test translating to StorageUnavailableError."""
        with pytest.raises(StorageUnavailableError) as exc_info:
            with storage_errors("initialize", StorageUnavailableError):
                raise OperationalError("could not connect to server")

        assert exc_info.value.code == "STORAGE_UNAVAILABLE"

    def test_domain_errors_pass_through(self):
        """Test not-found is never reported as a storage failure."""
        with pytest.raises(EventNotFoundError):
            with storage_errors("get"):
                raise EventNotFoundError()

    def test_no_error(self):
        """Test the block runs normally without errors."""
        with storage_errors("get"):
            value = 1
        assert value == 1

    def test_counts_failures(self):
        """Test failures are counted per operation."""
        before = error_count("unit_test_op")

        with pytest.raises(StorageError):
            with storage_errors("unit_test_op"):
                raise OperationalError("disk I/O error")

        assert error_count("unit_test_op") == before + 1


class TestDomainExceptions:
    """Tests for the failure taxonomy."""

    @pytest.mark.parametrize(
        "exc_class, code",
        [
            (EventNotFoundError, "EVENT_NOT_FOUND"),
            (StorageError, "STORAGE_ERROR"),
            (StorageUnavailableError, "STORAGE_UNAVAILABLE"),
        ],
    )
    def test_codes(self, exc_class, code):
        """Test machine-readable error codes."""
        exc = exc_class()
        assert isinstance(exc, DomainException)
        assert exc.code == code

    def test_not_found_is_not_storage_error(self):
        """Test absence and storage failure are distinct."""
        assert not issubclass(EventNotFoundError, StorageError)
        assert not issubclass(StorageUnavailableError, StorageError)
