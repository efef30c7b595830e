"""
Django implementation of EventRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import connections, transaction
from django.utils import timezone
from django.utils.connection import ConnectionDoesNotExist

from core.domain.exceptions import EventNotFoundError, StorageUnavailableError
from core.infrastructure.database import storage_errors
from core.metrics import db_query_duration_seconds, license_events_appended_total
from license_events.domain.event import Device, Event
from license_events.domain.status_types import StatusVocabulary
from license_events.infrastructure.cursor import EventCursor
from license_events.infrastructure.models import Event as EventModel
from license_events.ports.event_repository import EventRepository

logger = logging.getLogger(__name__)

TABLE = EventModel._meta.db_table  # pylint: disable=protected-access


class DjangoEventRepository(EventRepository):
    """
    Django ORM implementation of EventRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Builds a parameterized query per call
    3. Maps type codes to names through the injected vocabulary
    """

    def __init__(
        self,
        vocabulary: Optional[StatusVocabulary] = None,
        using: Optional[str] = None,
        chunk_size: Optional[int] = None,
    ):
        """
        Initialize repository.

        Args:
            vocabulary: Status vocabulary (defaults to LICENSE_EVENTS settings)
            using: Database alias (defaults to LICENSE_EVENTS["DATABASE"])
            chunk_size: Rows fetched per round-trip while streaming
        """
        config = getattr(settings, "LICENSE_EVENTS", {})
        self.vocabulary = vocabulary or StatusVocabulary.from_settings(config)
        self.using = using or config.get("DATABASE", "default")
        self.chunk_size = chunk_size or config.get("ITERATOR_CHUNK_SIZE", 100)

    def _to_domain(self, model: EventModel) -> Event:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Event model

        Returns:
            Event domain entity
        """
        return Event(
            id=model.id,
            device_name=model.device_name,
            timestamp=model.timestamp,
            type=self.vocabulary.name_for(model.type),
            device_id=model.device_id,
            license_status_id=model.license_status_fk,
        )

    def _to_model(self, event: Event, type_code: int) -> EventModel:
        """
        Build an unsaved Django model; the row ID is left to the database.

        Naive timestamps are read in the current time zone, so the stored
        event compares equal to what GetById returns.
        """
        timestamp = event.timestamp
        if settings.USE_TZ and timezone.is_naive(timestamp):
            timestamp = timezone.make_aware(timestamp)
        return EventModel(
            device_name=event.device_name,
            timestamp=timestamp,
            type=type_code,
            device_id=event.device_id,
            license_status_fk=event.license_status_id,
        )

    def _objects(self):
        return EventModel.objects.using(self.using)  # pylint: disable=no-member

    def initialize(self) -> None:
        """
        Create the event table unless it already exists.

        On SQLite the table cannot be created inside `transaction.atomic`
        (the schema editor refuses while foreign key checks are on); that
        surfaces as StorageUnavailableError like any other DDL failure.
        """
        try:
            connection = connections[self.using]
        except ConnectionDoesNotExist as exc:
            raise StorageUnavailableError(f"Unknown database alias: {self.using}") from exc

        with storage_errors("initialize", StorageUnavailableError):
            with connection.cursor() as cursor:
                tables = connection.introspection.table_names(cursor)
            if TABLE in tables:
                logger.debug("Table %s already exists on %s", TABLE, self.using)
                return
            with connection.schema_editor() as schema_editor:
                schema_editor.create_model(EventModel)
        logger.info("Created table %s on %s", TABLE, self.using)

    def get(self, event_id: int) -> Event:
        """Look up one event; ids that are not integers never match a row."""
        try:
            event_id = int(event_id)
        except (TypeError, ValueError) as exc:
            raise EventNotFoundError(f"Event {event_id!r} not found") from exc

        with storage_errors("get"), db_query_duration_seconds.labels("get", TABLE).time():
            model = self._objects().filter(id=event_id).first()

        if model is None:
            raise EventNotFoundError(f"Event {event_id} not found")
        return self._to_domain(model)

    def add(self, event: Event, type_code: int) -> Event:
        model = self._to_model(event, type_code)
        with storage_errors("add"), db_query_duration_seconds.labels("add", TABLE).time():
            with transaction.atomic(using=self.using):
                model.save(using=self.using, force_insert=True)

        stored = self._to_domain(model)
        license_events_appended_total.labels(type=stored.type or str(type_code)).inc()
        logger.debug(
            "Appended event %s (%s) for license status %s, device %s",
            stored.id,
            stored.type,
            stored.license_status_id,
            stored.device_id,
        )
        return stored

    def find_by_license_status(self, license_status_id: int) -> EventCursor:
        queryset = self._objects().filter(license_status_fk=license_status_id)
        return EventCursor(
            queryset.iterator(chunk_size=self.chunk_size),
            self._to_domain,
            "find_by_license_status",
        )

    def check_device_status(self, license_status_id: int, device_id: str) -> str:
        """
        Name of the most recent event for the device.

        Events without a device never match, so a None device_id is
        reported as absent.
        """
        if device_id is None:
            raise EventNotFoundError(
                f"No event for device None on license status {license_status_id}"
            )

        with storage_errors("check_device_status"), db_query_duration_seconds.labels(
            "check_device_status", TABLE
        ).time():
            type_code = (
                self._objects()
                .filter(license_status_fk=license_status_id, device_id=device_id)
                .order_by("-timestamp", "-id")
                .values_list("type", flat=True)
                .first()
            )

        if type_code is None:
            raise EventNotFoundError(
                f"No event for device {device_id} on license status {license_status_id}"
            )
        return self.vocabulary.name_for(type_code)

    def list_registered_devices(self, license_status_id: int) -> EventCursor:
        queryset = self._objects().filter(
            license_status_fk=license_status_id,
            type=self.vocabulary.registered_code,
        )
        rows = queryset.values_list("device_id", "device_name", "timestamp")
        return EventCursor(
            rows.iterator(chunk_size=self.chunk_size),
            lambda row: Device(*row),
            "list_registered_devices",
        )


def open_event_store(
    using: Optional[str] = None,
    vocabulary: Optional[StatusVocabulary] = None,
) -> DjangoEventRepository:
    """
    Create an event repository and make sure its table exists.

    Raises:
        StorageUnavailableError: If the table cannot be created
    """
    repository = DjangoEventRepository(vocabulary=vocabulary, using=using)
    repository.initialize()
    return repository
