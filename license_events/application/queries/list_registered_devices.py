"""
ListRegisteredDevicesQuery.

Query to list the devices registered to a license.
"""
from dataclasses import dataclass


@dataclass
class ListRegisteredDevicesQuery:
    """Query to list registered devices."""

    license_status_id: int
    license_id: str
