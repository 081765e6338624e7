from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.device import Device


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def find_by_project(self, project_id: str) -> List[Device]:
        """Find all devices of a project ordered by name"""
        pass

    @abstractmethod
    async def find_by_project_name(self, project_id: str, name: str) -> Optional[Device]:
        """Find a device by its (unique) name within a project"""
        pass

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (create or update)"""
        pass

    @abstractmethod
    async def delete(self, device_id: str) -> bool:
        """Delete device; returns False if it did not exist"""
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> int:
        """Delete every device of a project; returns the number deleted"""
        pass
