# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import DatabaseError
from ...domain.repositories.project_repository import ProjectRepository
from ...domain.models.project import Project
from ...domain.constants import ProjectFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_project_collection


class MongoProjectRepository(ProjectRepository):
    """MongoDB implementation of ProjectRepository"""

    def __init__(self, project_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.project_collection = project_collection if project_collection is not None else get_project_collection()

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        """Find project by ID"""
        if not project_id:
            return None

        try:
            document = await self.project_collection.find_one({ProjectFields.MONGO_ID: project_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error finding project by ID: {str(e)}", operation="find_project", cause=e)

        if document is None:
            return None
        return self._document_to_project(document)

    async def list(self, limit: int, after_id: Optional[str] = None) -> List[Project]:
        query: Dict[str, Any] = {}
        if after_id:
            query[ProjectFields.MONGO_ID] = {"$gt": after_id}

        try:
            cursor = (
                self.project_collection.find(query)
                .sort(ProjectFields.MONGO_ID, ASCENDING)
                .limit(max(1, int(limit)))
            )
            projects = []
            async for document in cursor:
                projects.append(self._document_to_project(document))
            return projects
        except PyMongoError as e:
            raise DatabaseError(f"Error listing projects: {str(e)}", operation="list_projects", cause=e)

    async def save(self, project: Project) -> Project:
        """Save project (create new or replace existing)"""
        if not project:
            raise ValueError("Project cannot be None")

        try:
            await self.project_collection.replace_one(
                {ProjectFields.MONGO_ID: project.id},
                self._project_to_dict(project),
                upsert=True,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving project: {str(e)}", operation="save_project", cause=e)
        return project

    async def delete(self, project_id: str) -> bool:
        try:
            result = await self.project_collection.delete_one({ProjectFields.MONGO_ID: project_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting project: {str(e)}", operation="delete_project", cause=e)
        return result.deleted_count > 0

    def _document_to_project(self, document: Dict[str, Any]) -> Project:
        """Convert MongoDB document to Project domain model"""
        return Project(
            id=document[ProjectFields.MONGO_ID],
            name=document.get(ProjectFields.NAME, ""),
            description=document.get(ProjectFields.DESCRIPTION),
            created_at=ensure_utc(document.get(ProjectFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(ProjectFields.UPDATED_AT)),
        )

    def _project_to_dict(self, project: Project) -> Dict[str, Any]:
        """Convert Project domain model to MongoDB document"""
        return {
            ProjectFields.MONGO_ID: project.id,
            ProjectFields.NAME: project.name,
            ProjectFields.DESCRIPTION: project.description,
            ProjectFields.CREATED_AT: project.created_at,
            ProjectFields.UPDATED_AT: project.updated_at,
        }
