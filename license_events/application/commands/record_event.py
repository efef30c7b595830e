"""
RecordEventCommand.

Command to append a device action to a license's event log.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from core.domain.value_objects import EventType


@dataclass
class RecordEventCommand:
    """Command to record a license status event."""

    license_status_id: int
    type: Union[EventType, str, int]
    timestamp: Optional[datetime] = None
    device_id: Optional[str] = None
    device_name: Optional[str] = None
