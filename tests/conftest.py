"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from core.domain.exceptions import EventNotFoundError
from license_events.domain.event import Device, Event
from license_events.domain.status_types import StatusVocabulary
from license_events.infrastructure.cursor import EventCursor
from license_events.ports.event_repository import EventRepository

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryEventRepository(EventRepository):
    """EventRepository backed by a list, for handler tests."""

    def __init__(self, vocabulary: StatusVocabulary = None):
        self.vocabulary = vocabulary or StatusVocabulary.default()
        self.rows: List[tuple] = []
        self.initialized = 0

    def initialize(self) -> None:
        self.initialized += 1

    def get(self, event_id: int) -> Event:
        for event, type_code in self.rows:
            if event.id == event_id:
                return replace(event, type=self.vocabulary.name_for(type_code))
        raise EventNotFoundError(f"Event {event_id} not found")

    def add(self, event: Event, type_code: int) -> Event:
        stored = replace(event, id=len(self.rows) + 1, type="")
        self.rows.append((stored, type_code))
        return replace(stored, type=self.vocabulary.name_for(type_code))

    def find_by_license_status(self, license_status_id: int) -> EventCursor:
        rows = [row for row in self.rows if row[0].license_status_id == license_status_id]
        return EventCursor(
            iter(rows),
            lambda row: replace(row[0], type=self.vocabulary.name_for(row[1])),
            "find_by_license_status",
        )

    def check_device_status(self, license_status_id: int, device_id: str) -> str:
        matches = [
            row
            for row in self.rows
            if device_id is not None
            and row[0].license_status_id == license_status_id
            and row[0].device_id == device_id
        ]
        if not matches:
            raise EventNotFoundError("No event for device")
        _, type_code = max(matches, key=lambda row: (row[0].timestamp, row[0].id))
        return self.vocabulary.name_for(type_code)

    def list_registered_devices(self, license_status_id: int) -> EventCursor:
        rows = [
            row[0]
            for row in self.rows
            if row[0].license_status_id == license_status_id
            and row[1] == self.vocabulary.registered_code
        ]
        return EventCursor(
            iter(rows),
            lambda event: Device(event.device_id, event.device_name, event.timestamp),
            "list_registered_devices",
        )


@pytest.fixture
def vocabulary():
    """Fixture for the default StatusVocabulary."""
    return StatusVocabulary.default()


@pytest.fixture
def memory_repository(vocabulary):
    """Fixture for an in-memory EventRepository."""
    return InMemoryEventRepository(vocabulary)


@pytest.fixture
def event_repository(vocabulary):
    """Fixture for the Django EventRepository."""
    from license_events.infrastructure.repositories.django_event_repository import (
        DjangoEventRepository,
    )

    return DjangoEventRepository(vocabulary=vocabulary)


@pytest.fixture
def t0():
    """Fixture for the base timestamp used by make_event."""
    return T0


@pytest.fixture
def make_event():
    """Fixture returning a factory for unsaved events."""

    def factory(
        license_status_id: int = 7,
        device_id: str = "dev-1",
        device_name: str = "Kindle",
        offset: int = 0,
    ) -> Event:
        return Event.create(
            license_status_id=license_status_id,
            timestamp=T0 + timedelta(minutes=offset),
            device_id=device_id,
            device_name=device_name,
        )

    return factory
