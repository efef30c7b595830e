"""
GetDeviceStatusQuery.

Query to get the latest status of a device on a license.
"""
from dataclasses import dataclass


@dataclass
class GetDeviceStatusQuery:
    """Query to get device status."""

    license_status_id: int
    device_id: str
