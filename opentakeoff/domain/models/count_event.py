# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CountEvent:
    """
    Notification that the aggregate count of a device (optionally scoped to a
    location) on a plan has changed. Ephemeral, never persisted.
    """
    plan_id: str
    device_id: str
    location_id: Optional[str]
    total: int
    timestamp: datetime

    def __post_init__(self) -> None:
        if not self.plan_id:
            raise ValueError("Plan ID is required")
        if self.total < 0:
            raise ValueError("Count total cannot be negative")
