"""
Read-side handlers for license events.

Handlers for device status, registered devices and the raw event list.
Cursors are drained inside the worker thread so the database cursor
never outlives the sync_to_async call.
"""

from typing import List

from asgiref.sync import sync_to_async

from core.domain.exceptions import EventNotFoundError
from license_events.application.dto.event_dto import (
    DeviceStatusDTO,
    EventDTO,
    RegisteredDevicesDTO,
)
from license_events.application.queries.get_device_status import GetDeviceStatusQuery
from license_events.application.queries.list_license_events import ListLicenseEventsQuery
from license_events.application.queries.list_registered_devices import (
    ListRegisteredDevicesQuery,
)
from license_events.ports.event_repository import EventRepository


class GetDeviceStatusHandler:
    """Handler for GetDeviceStatusQuery."""

    def __init__(self, event_repository: EventRepository):
        """Initialize handler with repository."""
        self.event_repository = event_repository

    async def handle(self, query: GetDeviceStatusQuery) -> DeviceStatusDTO:
        """
        Handle get device status query.

        A device with no events yields found=False and an empty status;
        storage failures propagate.

        Args:
            query: GetDeviceStatusQuery

        Returns:
            DeviceStatusDTO
        """
        try:
            status = await sync_to_async(self.event_repository.check_device_status)(
                query.license_status_id, query.device_id
            )
        except EventNotFoundError:
            return DeviceStatusDTO(
                license_status_id=query.license_status_id,
                device_id=query.device_id,
                status="",
                found=False,
            )

        return DeviceStatusDTO(
            license_status_id=query.license_status_id,
            device_id=query.device_id,
            status=status,
            found=True,
        )


class ListRegisteredDevicesHandler:
    """Handler for ListRegisteredDevicesQuery."""

    def __init__(self, event_repository: EventRepository):
        """Initialize handler with repository."""
        self.event_repository = event_repository

    async def handle(self, query: ListRegisteredDevicesQuery) -> RegisteredDevicesDTO:
        """
        Handle list registered devices query.

        Every registration event is listed; a device registered twice
        appears twice.
        """
        registered = await sync_to_async(self.event_repository.registered_devices)(
            query.license_status_id, query.license_id
        )
        return RegisteredDevicesDTO.from_entity(registered)


class ListLicenseEventsHandler:
    """Handler for ListLicenseEventsQuery."""

    def __init__(self, event_repository: EventRepository):
        """Initialize handler with repository."""
        self.event_repository = event_repository

    async def handle(self, query: ListLicenseEventsQuery) -> List[EventDTO]:
        def collect() -> List[EventDTO]:
            with self.event_repository.find_by_license_status(query.license_status_id) as events:
                return [EventDTO.from_entity(event) for event in events]

        return await sync_to_async(collect)()
