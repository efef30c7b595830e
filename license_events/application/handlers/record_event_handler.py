"""
RecordEventHandler.

Handler for appending a device action to the license event log.
"""

import logging

from asgiref.sync import sync_to_async
from django.utils import timezone

from license_events.application.commands.record_event import RecordEventCommand
from license_events.application.dto.event_dto import EventDTO
from license_events.domain.event import Event
from license_events.ports.event_repository import EventRepository

logger = logging.getLogger(__name__)


class RecordEventHandler:
    """Handler for RecordEventCommand."""

    def __init__(self, event_repository: EventRepository):
        """Initialize handler with repository."""
        self.event_repository = event_repository

    async def handle(self, command: RecordEventCommand) -> EventDTO:
        """
        Handle record event command.

        Args:
            command: RecordEventCommand

        Returns:
            EventDTO of the stored event

        Raises:
            InvalidEventTypeError: If the type is not in the status vocabulary
            StorageError: If the event cannot be stored
        """
        type_code = self.event_repository.vocabulary.code_for(command.type)

        event = Event.create(
            license_status_id=command.license_status_id,
            timestamp=command.timestamp or timezone.now(),
            device_id=command.device_id,
            device_name=command.device_name,
        )
        stored = await sync_to_async(self.event_repository.add)(event, type_code)

        logger.info(
            "Recorded %s event for license status %s",
            stored.type,
            stored.license_status_id,
        )
        return EventDTO.from_entity(stored)
