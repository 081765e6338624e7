# Standard library imports
from datetime import datetime
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.stamp_repository import StampRepository, StampCountRow
from ...domain.models.stamp import Stamp, StampPosition
from ...domain.constants import StampFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_stamp_collection


class MongoStampRepository(StampRepository):
    """MongoDB implementation of StampRepository"""

    def __init__(self, stamp_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.stamp_collection = stamp_collection if stamp_collection is not None else get_stamp_collection()

    async def find_by_id(self, stamp_id: str) -> Optional[Stamp]:
        """Find stamp by ID"""
        if not stamp_id:
            return None

        try:
            document = await self.stamp_collection.find_one({StampFields.MONGO_ID: stamp_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error finding stamp by ID: {str(e)}", operation="find_stamp", cause=e)

        if document is None:
            return None
        return self._document_to_stamp(document)

    async def list_by_plan(self, plan_id: str, limit: int, after_id: Optional[str] = None) -> List[Stamp]:
        query: Dict[str, Any] = {StampFields.PLAN_ID: plan_id}
        if after_id:
            query[StampFields.MONGO_ID] = {"$gt": after_id}

        try:
            cursor = (
                self.stamp_collection.find(query)
                .sort(StampFields.MONGO_ID, ASCENDING)
                .limit(max(1, int(limit)))
            )
            return await self._collect(cursor)
        except PyMongoError as e:
            raise DatabaseError(f"Error listing stamps for plan: {str(e)}", operation="list_stamps", cause=e)

    async def find_by_plan(self, plan_id: str) -> List[Stamp]:
        try:
            return await self._collect(self.stamp_collection.find({StampFields.PLAN_ID: plan_id}))
        except PyMongoError as e:
            raise DatabaseError(f"Error listing stamps for plan: {str(e)}", operation="list_stamps", cause=e)

    async def find_by_device(self, device_id: str) -> List[Stamp]:
        try:
            return await self._collect(self.stamp_collection.find({StampFields.DEVICE_ID: device_id}))
        except PyMongoError as e:
            raise DatabaseError(f"Error listing stamps for device: {str(e)}", operation="list_stamps", cause=e)

    async def save(self, stamp: Stamp) -> Stamp:
        """Save stamp (create new or replace existing)"""
        if not stamp:
            raise ValueError("Stamp cannot be None")

        try:
            await self.stamp_collection.replace_one(
                {StampFields.MONGO_ID: stamp.id},
                self._stamp_to_dict(stamp),
                upsert=True,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving stamp: {str(e)}", operation="save_stamp", cause=e)
        return stamp

    async def delete(self, stamp_id: str) -> bool:
        try:
            result = await self.stamp_collection.delete_one({StampFields.MONGO_ID: stamp_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting stamp: {str(e)}", operation="delete_stamp", cause=e)
        return result.deleted_count > 0

    async def delete_by_plan(self, plan_id: str) -> int:
        try:
            result = await self.stamp_collection.delete_many({StampFields.PLAN_ID: plan_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting stamps: {str(e)}", operation="delete_stamps", cause=e)
        return result.deleted_count

    async def delete_by_device(self, device_id: str) -> int:
        try:
            result = await self.stamp_collection.delete_many({StampFields.DEVICE_ID: device_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting stamps: {str(e)}", operation="delete_stamps", cause=e)
        return result.deleted_count

    async def set_location(self, stamp_ids: List[str], location_id: Optional[str], updated_at: datetime) -> int:
        if not stamp_ids:
            return 0

        try:
            result = await self.stamp_collection.update_many(
                {StampFields.MONGO_ID: {"$in": list(stamp_ids)}},
                {"$set": {StampFields.LOCATION_ID: location_id, StampFields.UPDATED_AT: updated_at}},
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error updating stamp locations: {str(e)}", operation="set_location", cause=e)
        return result.modified_count

    async def count(self, plan_id: str, device_id: str, location_id: Optional[str]) -> int:
        try:
            return await self.stamp_collection.count_documents(
                {
                    StampFields.PLAN_ID: plan_id,
                    StampFields.DEVICE_ID: device_id,
                    StampFields.LOCATION_ID: location_id,
                }
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error counting stamps: {str(e)}", operation="count_stamps", cause=e)

    async def aggregate_counts(self, plan_id: str) -> List[StampCountRow]:
        """Group the stamps of a plan by (device, location)"""
        pipeline = [
            {"$match": {StampFields.PLAN_ID: plan_id}},
            {
                "$group": {
                    "_id": {
                        "device_id": f"${StampFields.DEVICE_ID}",
                        "location_id": f"${StampFields.LOCATION_ID}",
                    },
                    "total": {"$sum": 1},
                    "updated_at": {"$max": f"${StampFields.UPDATED_AT}"},
                }
            },
        ]
        try:
            rows = []
            async for document in self.stamp_collection.aggregate(pipeline):
                key = document["_id"]
                rows.append(
                    StampCountRow(
                        device_id=key["device_id"],
                        location_id=key.get("location_id"),
                        total=document["total"],
                        updated_at=ensure_utc(document.get("updated_at")),
                    )
                )
            return rows
        except PyMongoError as e:
            raise DatabaseError(f"Error aggregating stamp counts: {str(e)}", operation="aggregate_counts", cause=e)

    async def _collect(self, cursor) -> List[Stamp]:
        stamps = []
        async for document in cursor:
            stamps.append(self._document_to_stamp(document))
        return stamps

    def _document_to_stamp(self, document: Dict[str, Any]) -> Stamp:
        """Convert MongoDB document to Stamp domain model"""
        return Stamp(
            id=document[StampFields.MONGO_ID],
            plan_id=document.get(StampFields.PLAN_ID, ""),
            device_id=document.get(StampFields.DEVICE_ID, ""),
            location_id=document.get(StampFields.LOCATION_ID),
            position=StampPosition.from_dict(document.get(StampFields.POSITION) or {"x": 0, "y": 0}),
            created_at=ensure_utc(document.get(StampFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(StampFields.UPDATED_AT)),
        )

    def _stamp_to_dict(self, stamp: Stamp) -> Dict[str, Any]:
        """Convert Stamp domain model to MongoDB document"""
        return {
            StampFields.MONGO_ID: stamp.id,
            StampFields.PLAN_ID: stamp.plan_id,
            StampFields.DEVICE_ID: stamp.device_id,
            StampFields.LOCATION_ID: stamp.location_id,
            StampFields.POSITION: stamp.position.to_dict(),
            StampFields.CREATED_AT: stamp.created_at,
            StampFields.UPDATED_AT: stamp.updated_at,
        }
