"""
License event DTOs for API responses.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from license_events.domain.event import Device, Event, RegisteredDevicesList


@dataclass
class EventDTO:
    """DTO for a license event."""

    id: int
    license_status_id: int
    type: str
    timestamp: datetime
    device_id: Optional[str]
    device_name: Optional[str]

    @classmethod
    def from_entity(cls, event: Event) -> "EventDTO":
        return cls(
            id=event.id,
            license_status_id=event.license_status_id,
            type=event.type,
            timestamp=event.timestamp,
            device_id=event.device_id,
            device_name=event.device_name,
        )

    def to_dict(self) -> Dict:
        return {
            "name": self.device_name or "",
            "timestamp": self.timestamp.isoformat(),
            "type": self.type,
            "id": self.device_id or "",
        }


@dataclass
class DeviceDTO:
    """DTO for a registered device."""

    id: str
    name: str
    timestamp: datetime

    @classmethod
    def from_entity(cls, device: Device) -> "DeviceDTO":
        return cls(
            id=device.device_id or "",
            name=device.device_name or "",
            timestamp=device.timestamp,
        )

    def to_dict(self) -> Dict:
        return {"id": self.id, "name": self.name, "timestamp": self.timestamp.isoformat()}


@dataclass
class RegisteredDevicesDTO:
    """DTO for the registered devices of a license."""

    id: str
    devices: List[DeviceDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, registered: RegisteredDevicesList) -> "RegisteredDevicesDTO":
        return cls(
            id=registered.license_id,
            devices=[DeviceDTO.from_entity(device) for device in registered.devices],
        )

    def to_dict(self) -> Dict:
        return {"id": self.id, "devices": [device.to_dict() for device in self.devices]}


@dataclass
class DeviceStatusDTO:
    """DTO for device status response."""

    license_status_id: int
    device_id: str
    status: str
    found: bool
