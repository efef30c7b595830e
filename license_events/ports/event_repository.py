"""
Event repository port (interface).

This defines the contract for license event persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from collections.abc import Iterator

from license_events.domain.event import Event, RegisteredDevicesList
from license_events.domain.status_types import StatusVocabulary


class EventCursorPort(Iterator):
    """
    Scoped, single-pass sequence of query results.

    Iterating advances the underlying database cursor. The cursor is
    released when the sequence is exhausted, when close() is called,
    or when a `with` block around it exits.
    """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying database cursor."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class EventRepository(ABC):
    """
    Abstract repository for license status events.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    The event log is append-only: there is no update or delete.
    """

    vocabulary: StatusVocabulary

    @abstractmethod
    def initialize(self) -> None:
        """
        Ensure the event table exists.

        Idempotent: existing rows are left untouched.

        Raises:
            StorageUnavailableError: If the schema cannot be created
        """
        pass

    @abstractmethod
    def get(self, event_id: int) -> Event:
        """
        Find an event by ID.

        Args:
            event_id: Event primary key

        Returns:
            Event entity

        Raises:
            EventNotFoundError: If no event has this ID
            StorageError: On database failure
        """
        pass

    @abstractmethod
    def add(self, event: Event, type_code: int) -> Event:
        """
        Append an event.

        Args:
            event: Event to store; its `type` is ignored
            type_code: Integer type code stored for the event

        Returns:
            Stored Event with its assigned ID

        Raises:
            StorageError: On constraint violation or database failure
        """
        pass

    @abstractmethod
    def find_by_license_status(self, license_status_id: int) -> EventCursorPort:
        """
        Stream every event of a license status.

        Args:
            license_status_id: License status record ID

        Returns:
            Cursor yielding Event entities in storage order
        """
        pass

    @abstractmethod
    def check_device_status(self, license_status_id: int, device_id: str) -> str:
        """
        Get the status name of a device's most recent event.

        Args:
            license_status_id: License status record ID
            device_id: Device identifier

        Returns:
            Status name of the latest event for the pair

        Raises:
            EventNotFoundError: If the device has no event for this license
            StorageError: On database failure
        """
        pass

    @abstractmethod
    def list_registered_devices(self, license_status_id: int) -> EventCursorPort:
        """
        Stream one Device per registration event of a license status.

        Args:
            license_status_id: License status record ID

        Returns:
            Cursor yielding Device projections
        """
        pass

    def registered_devices(
        self, license_status_id: int, license_id: str
    ) -> RegisteredDevicesList:
        """
        Collect the registered devices of a license into a list.

        Args:
            license_status_id: License status record ID
            license_id: Public license identifier carried in the result

        Returns:
            RegisteredDevicesList
        """
        with self.list_registered_devices(license_status_id) as devices:
            return RegisteredDevicesList(license_id=license_id, devices=list(devices))

