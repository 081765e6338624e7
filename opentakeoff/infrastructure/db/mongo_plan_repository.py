# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import AlreadyExistsError, DatabaseError
from ...domain.repositories.plan_repository import PlanRepository
from ...domain.models.plan import Plan
from ...domain.constants import PlanFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_plan_collection


class MongoPlanRepository(PlanRepository):
    """MongoDB implementation of PlanRepository"""

    def __init__(self, plan_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.plan_collection = plan_collection if plan_collection is not None else get_plan_collection()

    async def find_by_id(self, plan_id: str) -> Optional[Plan]:
        """Find plan by ID"""
        if not plan_id:
            return None

        try:
            document = await self.plan_collection.find_one({PlanFields.MONGO_ID: plan_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error finding plan by ID: {str(e)}", operation="find_plan", cause=e)

        if document is None:
            return None
        return self._document_to_plan(document)

    async def find_by_project(self, project_id: str) -> List[Plan]:
        if not project_id:
            return []

        try:
            cursor = self.plan_collection.find({PlanFields.PROJECT_ID: project_id}).sort(
                PlanFields.PAGE_NUMBER, ASCENDING
            )
            plans = []
            async for document in cursor:
                plans.append(self._document_to_plan(document))
            return plans
        except PyMongoError as e:
            raise DatabaseError(f"Error listing plans for project: {str(e)}", operation="list_plans", cause=e)

    async def find_by_project_page(self, project_id: str, page_number: int) -> Optional[Plan]:
        try:
            document = await self.plan_collection.find_one(
                {PlanFields.PROJECT_ID: project_id, PlanFields.PAGE_NUMBER: page_number}
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error finding plan by page: {str(e)}", operation="find_plan", cause=e)

        if document is None:
            return None
        return self._document_to_plan(document)

    async def save(self, plan: Plan) -> Plan:
        """Save plan (create new or replace existing)"""
        if not plan:
            raise ValueError("Plan cannot be None")

        try:
            await self.plan_collection.replace_one(
                {PlanFields.MONGO_ID: plan.id},
                self._plan_to_dict(plan),
                upsert=True,
            )
        except DuplicateKeyError as e:
            raise AlreadyExistsError(
                f"Page {plan.page_number} already exists in project",
                details={"project_id": plan.project_id, "page_number": plan.page_number},
                cause=e,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving plan: {str(e)}", operation="save_plan", cause=e)
        return plan

    async def delete(self, plan_id: str) -> bool:
        try:
            result = await self.plan_collection.delete_one({PlanFields.MONGO_ID: plan_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting plan: {str(e)}", operation="delete_plan", cause=e)
        return result.deleted_count > 0

    def _document_to_plan(self, document: Dict[str, Any]) -> Plan:
        """Convert MongoDB document to Plan domain model"""
        return Plan(
            id=document[PlanFields.MONGO_ID],
            project_id=document.get(PlanFields.PROJECT_ID, ""),
            name=document.get(PlanFields.NAME, ""),
            page_number=document.get(PlanFields.PAGE_NUMBER, 1),
            page_count=document.get(PlanFields.PAGE_COUNT, 1),
            file_path=document.get(PlanFields.FILE_PATH, ""),
            file_size=document.get(PlanFields.FILE_SIZE, 0),
            file_hash=document.get(PlanFields.FILE_HASH, ""),
            width=document.get(PlanFields.WIDTH),
            height=document.get(PlanFields.HEIGHT),
            created_at=ensure_utc(document.get(PlanFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PlanFields.UPDATED_AT)),
        )

    def _plan_to_dict(self, plan: Plan) -> Dict[str, Any]:
        """Convert Plan domain model to MongoDB document"""
        return {
            PlanFields.MONGO_ID: plan.id,
            PlanFields.PROJECT_ID: plan.project_id,
            PlanFields.NAME: plan.name,
            PlanFields.PAGE_NUMBER: plan.page_number,
            PlanFields.PAGE_COUNT: plan.page_count,
            PlanFields.FILE_PATH: plan.file_path,
            PlanFields.FILE_SIZE: plan.file_size,
            PlanFields.FILE_HASH: plan.file_hash,
            PlanFields.WIDTH: plan.width,
            PlanFields.HEIGHT: plan.height,
            PlanFields.CREATED_AT: plan.created_at,
            PlanFields.UPDATED_AT: plan.updated_at,
        }
