# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import AlreadyExistsError, DatabaseError
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.constants import DeviceFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_device_collection


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        if not device_id:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: device_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error finding device by ID: {str(e)}", operation="find_device", cause=e)

        if document is None:
            return None
        return self._document_to_device(document)

    async def find_by_project(self, project_id: str) -> List[Device]:
        """Find all devices of a project"""
        if not project_id:
            return []

        try:
            cursor = self.device_collection.find({DeviceFields.PROJECT_ID: project_id}).sort(
                DeviceFields.NAME, ASCENDING
            )
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except PyMongoError as e:
            raise DatabaseError(f"Error listing devices for project: {str(e)}", operation="list_devices", cause=e)

    async def find_by_project_name(self, project_id: str, name: str) -> Optional[Device]:
        try:
            document = await self.device_collection.find_one(
                {DeviceFields.PROJECT_ID: project_id, DeviceFields.NAME: name}
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error finding device by name: {str(e)}", operation="find_device", cause=e)

        if document is None:
            return None
        return self._document_to_device(document)

    async def save(self, device: Device) -> Device:
        """Save device (create new or replace existing)"""
        if not device:
            raise ValueError("Device cannot be None")

        try:
            await self.device_collection.replace_one(
                {DeviceFields.MONGO_ID: device.id},
                self._device_to_dict(device),
                upsert=True,
            )
        except DuplicateKeyError as e:
            raise AlreadyExistsError(
                f"Device '{device.name}' already exists in project",
                details={"project_id": device.project_id, "name": device.name},
                cause=e,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving device: {str(e)}", operation="save_device", cause=e)
        return device

    async def delete(self, device_id: str) -> bool:
        try:
            result = await self.device_collection.delete_one({DeviceFields.MONGO_ID: device_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting device: {str(e)}", operation="delete_device", cause=e)
        return result.deleted_count > 0

    async def delete_by_project(self, project_id: str) -> int:
        try:
            result = await self.device_collection.delete_many({DeviceFields.PROJECT_ID: project_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting devices: {str(e)}", operation="delete_devices", cause=e)
        return result.deleted_count

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        return Device(
            id=document[DeviceFields.MONGO_ID],
            project_id=document.get(DeviceFields.PROJECT_ID, ""),
            name=document.get(DeviceFields.NAME, ""),
            description=document.get(DeviceFields.DESCRIPTION),
            color=document.get(DeviceFields.COLOR),
            icon_key=document.get(DeviceFields.ICON_KEY),
            created_at=ensure_utc(document.get(DeviceFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(DeviceFields.UPDATED_AT)),
        )

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document"""
        return {
            DeviceFields.MONGO_ID: device.id,
            DeviceFields.PROJECT_ID: device.project_id,
            DeviceFields.NAME: device.name,
            DeviceFields.DESCRIPTION: device.description,
            DeviceFields.COLOR: device.color,
            DeviceFields.ICON_KEY: device.icon_key,
            DeviceFields.CREATED_AT: device.created_at,
            DeviceFields.UPDATED_AT: device.updated_at,
        }
