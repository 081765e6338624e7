from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from ..models.stamp import Stamp


@dataclass
class StampCountRow:
    """Aggregated number of stamps for one (device, location) pair on a plan"""
    device_id: str
    location_id: Optional[str]
    total: int
    updated_at: Optional[datetime] = None


class StampRepository(ABC):
    """Repository interface - defines contract for stamp data access"""

    @abstractmethod
    async def find_by_id(self, stamp_id: str) -> Optional[Stamp]:
        """Find stamp by ID"""
        pass

    @abstractmethod
    async def list_by_plan(self, plan_id: str, limit: int, after_id: Optional[str] = None) -> List[Stamp]:
        """List stamps of a plan ordered by ID, starting after `after_id`"""
        pass

    @abstractmethod
    async def find_by_plan(self, plan_id: str) -> List[Stamp]:
        """Find all stamps of a plan"""
        pass

    @abstractmethod
    async def find_by_device(self, device_id: str) -> List[Stamp]:
        """Find all stamps of a device (across plans)"""
        pass

    @abstractmethod
    async def save(self, stamp: Stamp) -> Stamp:
        """Save stamp (create or replace)"""
        pass

    @abstractmethod
    async def delete(self, stamp_id: str) -> bool:
        """Delete stamp; returns False if it did not exist"""
        pass

    @abstractmethod
    async def delete_by_plan(self, plan_id: str) -> int:
        """Delete every stamp of a plan; returns the number deleted"""
        pass

    @abstractmethod
    async def delete_by_device(self, device_id: str) -> int:
        """Delete every stamp of a device; returns the number deleted"""
        pass

    @abstractmethod
    async def set_location(self, stamp_ids: List[str], location_id: Optional[str], updated_at: datetime) -> int:
        """Assign (or clear) the location of several stamps; returns the number modified"""
        pass

    @abstractmethod
    async def count(self, plan_id: str, device_id: str, location_id: Optional[str]) -> int:
        """Number of stamps for one (plan, device, location) pair"""
        pass

    @abstractmethod
    async def aggregate_counts(self, plan_id: str) -> List[StampCountRow]:
        """Stamp totals of a plan grouped by (device, location)"""
        pass
