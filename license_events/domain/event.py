"""
Event domain entities.

An Event is an immutable fact about a license/device interaction.
Device and RegisteredDevicesList are read models derived from
registration events; they have no storage of their own.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Event:
    """
    License status event.

    `id` is assigned by storage and is None until the event is appended.
    `type` holds the status name; it is ignored on write, where the
    type code is passed separately.
    """

    timestamp: datetime
    license_status_id: int
    type: str = ""
    device_id: Optional[str] = None
    device_name: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        """Validate event entity."""
        if self.timestamp is None:
            raise ValueError("Event timestamp is required")
        if self.license_status_id is None:
            raise ValueError("License status ID is required")

    @classmethod
    def create(
        cls,
        license_status_id: int,
        timestamp: datetime,
        device_id: Optional[str] = None,
        device_name: Optional[str] = None,
    ) -> "Event":
        """
        Create a new, not yet stored, Event.

        Args:
            license_status_id: Owning license status record
            timestamp: When the action happened
            device_id: Optional device identifier
            device_name: Optional human-readable device name

        Returns:
            Event entity instance
        """
        return cls(
            timestamp=timestamp,
            license_status_id=license_status_id,
            device_id=device_id,
            device_name=device_name,
        )


@dataclass(frozen=True)
class Device:
    """Projection of a registration event."""

    device_id: Optional[str]
    device_name: Optional[str]
    timestamp: datetime


@dataclass(frozen=True)
class RegisteredDevicesList:
    """A license identifier paired with the devices registered to it."""

    license_id: str
    devices: List[Device] = field(default_factory=list)
