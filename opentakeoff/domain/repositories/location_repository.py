from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.location import Location


class LocationRepository(ABC):
    """Repository interface - defines contract for location data access"""

    @abstractmethod
    async def find_by_id(self, location_id: str) -> Optional[Location]:
        """Find location by ID"""
        pass

    @abstractmethod
    async def find_by_plan(self, plan_id: str) -> List[Location]:
        """Find all locations of a plan in creation order"""
        pass

    @abstractmethod
    async def save(self, location: Location) -> Location:
        """Save location (create or update)"""
        pass

    @abstractmethod
    async def delete(self, location_id: str) -> bool:
        """Delete location; returns False if it did not exist"""
        pass

    @abstractmethod
    async def delete_by_plan(self, plan_id: str) -> int:
        """Delete every location of a plan; returns the number deleted"""
        pass
