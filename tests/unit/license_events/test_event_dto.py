"""
Unit tests for license event DTOs.
"""

import dataclasses
from datetime import datetime, timezone

from license_events.application.dto.event_dto import (
    DeviceDTO,
    EventDTO,
    RegisteredDevicesDTO,
)
from license_events.domain.event import Device, Event, RegisteredDevicesList


class TestEventDTO:
    """Tests for EventDTO."""

    def test_to_dict(self, make_event, t0):
        """Test JSON projection of an event (row id and license fk are hidden)."""
        event = dataclasses.replace(make_event(), id=42, type="renew")

        assert EventDTO.from_entity(event).to_dict() == {
            "name": "Kindle",
            "timestamp": t0.isoformat(),
            "type": "renew",
            "id": "dev-1",
        }

    def test_to_dict_without_device(self, t0):
        """Test JSON projection with missing device fields."""
        dto = EventDTO.from_entity(Event.create(license_status_id=7, timestamp=t0))

        assert dto.to_dict()["id"] == ""
        assert dto.to_dict()["name"] == ""


class TestDeviceDTOs:
    """Tests for DeviceDTO and RegisteredDevicesDTO."""

    def test_device_to_dict(self):
        """Test JSON projection of a device."""
        timestamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        device = Device(device_id="dev-9", device_name="Kobo", timestamp=timestamp)

        assert DeviceDTO.from_entity(device).to_dict() == {
            "id": "dev-9",
            "name": "Kobo",
            "timestamp": "2024-01-02T03:04:05+00:00",
        }

    def test_device_without_name(self, t0):
        """Test a registration without device fields."""
        dto = DeviceDTO.from_entity(Device(device_id=None, device_name=None, timestamp=t0))

        assert dto.id == ""
        assert dto.name == ""

    def test_registered_devices(self, t0):
        """Test registered devices keep one entry per registration."""
        devices = [Device("dev-1", "Kindle", t0), Device("dev-1", "Kindle", t0)]
        registered = RegisteredDevicesList(license_id="lic-7", devices=devices)

        payload = RegisteredDevicesDTO.from_entity(registered).to_dict()

        assert payload["id"] == "lic-7"
        assert [d["id"] for d in payload["devices"]] == ["dev-1", "dev-1"]

    def test_empty_registered_devices(self):
        """Test a license without registrations."""
        registered = RegisteredDevicesList(license_id="lic-7")

        assert RegisteredDevicesDTO.from_entity(registered).to_dict() == {
            "id": "lic-7",
            "devices": [],
        }
