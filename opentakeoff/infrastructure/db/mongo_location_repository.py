# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.location_repository import LocationRepository
from ...domain.models.location import Location, RectangleBounds, Vertex
from ...domain.constants import LocationFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_location_collection


class MongoLocationRepository(LocationRepository):
    """MongoDB implementation of LocationRepository"""

    def __init__(self, location_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.location_collection = (
            location_collection if location_collection is not None else get_location_collection()
        )

    async def find_by_id(self, location_id: str) -> Optional[Location]:
        """Find location by ID"""
        if not location_id:
            return None

        try:
            document = await self.location_collection.find_one({LocationFields.MONGO_ID: location_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error finding location by ID: {str(e)}", operation="find_location", cause=e)

        if document is None:
            return None
        return self._document_to_location(document)

    async def find_by_plan(self, plan_id: str) -> List[Location]:
        if not plan_id:
            return []

        try:
            cursor = self.location_collection.find({LocationFields.PLAN_ID: plan_id}).sort(
                [(LocationFields.CREATED_AT, ASCENDING), (LocationFields.MONGO_ID, ASCENDING)]
            )
            locations = []
            async for document in cursor:
                locations.append(self._document_to_location(document))
            return locations
        except PyMongoError as e:
            raise DatabaseError(f"Error listing locations for plan: {str(e)}", operation="list_locations", cause=e)

    async def save(self, location: Location) -> Location:
        """Save location (create new or replace existing)"""
        if not location:
            raise ValueError("Location cannot be None")

        try:
            await self.location_collection.replace_one(
                {LocationFields.MONGO_ID: location.id},
                self._location_to_dict(location),
                upsert=True,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving location: {str(e)}", operation="save_location", cause=e)
        return location

    async def delete(self, location_id: str) -> bool:
        try:
            result = await self.location_collection.delete_one({LocationFields.MONGO_ID: location_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting location: {str(e)}", operation="delete_location", cause=e)
        return result.deleted_count > 0

    async def delete_by_plan(self, plan_id: str) -> int:
        try:
            result = await self.location_collection.delete_many({LocationFields.PLAN_ID: plan_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting locations: {str(e)}", operation="delete_locations", cause=e)
        return result.deleted_count

    def _document_to_location(self, document: Dict[str, Any]) -> Location:
        """Convert MongoDB document to Location domain model"""
        bounds = document.get(LocationFields.BOUNDS)
        return Location(
            id=document[LocationFields.MONGO_ID],
            plan_id=document.get(LocationFields.PLAN_ID, ""),
            name=document.get(LocationFields.NAME, ""),
            type=document.get(LocationFields.TYPE, ""),
            bounds=(
                RectangleBounds(
                    x=bounds["x"], y=bounds["y"], width=bounds["width"], height=bounds["height"]
                )
                if bounds
                else None
            ),
            vertices=[Vertex(x=v["x"], y=v["y"]) for v in document.get(LocationFields.VERTICES) or []],
            color=document.get(LocationFields.COLOR),
            revision=document.get(LocationFields.REVISION, 0),
            created_at=ensure_utc(document.get(LocationFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(LocationFields.UPDATED_AT)),
        )

    def _location_to_dict(self, location: Location) -> Dict[str, Any]:
        """Convert Location domain model to MongoDB document"""
        snapshot = location.to_snapshot()
        return {
            LocationFields.MONGO_ID: location.id,
            LocationFields.PLAN_ID: location.plan_id,
            LocationFields.NAME: location.name,
            LocationFields.TYPE: location.type,
            LocationFields.BOUNDS: snapshot["bounds"],
            LocationFields.VERTICES: snapshot["vertices"],
            LocationFields.COLOR: location.color,
            LocationFields.REVISION: location.revision,
            LocationFields.CREATED_AT: location.created_at,
            LocationFields.UPDATED_AT: location.updated_at,
        }
