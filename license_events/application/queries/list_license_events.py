"""
ListLicenseEventsQuery.

Query to list every event recorded for a license.
"""
from dataclasses import dataclass


@dataclass
class ListLicenseEventsQuery:
    """Query to list license events."""

    license_status_id: int
