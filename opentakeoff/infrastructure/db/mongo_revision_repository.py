# Standard library imports
from typing import Optional, List, Dict, Any, AsyncIterator

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import DatabaseError, InvalidInputError
from ...domain.repositories.revision_repository import RevisionRepository
from ...domain.models.revision import EntityType, HistoryAction, HistoryCursor, Revision
from ...domain.constants import HistoryCursorFields, RevisionFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_history_cursor_collection, get_revision_collection


class MongoRevisionRepository(RevisionRepository):
    """
    MongoDB implementation of RevisionRepository.

    Revisions are append-only documents. Each tracked entity has one cursor
    document keyed by the entity id; it holds the sequence of the revision that
    reflects the current entity state plus the highest sequence ever allocated.
    """

    def __init__(
        self,
        revision_collection: Optional[AsyncIOMotorCollection] = None,
        cursor_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.revision_collection = (
            revision_collection if revision_collection is not None else get_revision_collection()
        )
        self.cursor_collection = (
            cursor_collection if cursor_collection is not None else get_history_cursor_collection()
        )

    # ------------------------------------------------------------------
    # Revisions
    # ------------------------------------------------------------------

    async def next_sequence(self, entity_id: str) -> int:
        try:
            document = await self.cursor_collection.find_one_and_update(
                {HistoryCursorFields.MONGO_ID: entity_id},
                {
                    "$inc": {HistoryCursorFields.LAST_SEQUENCE: 1},
                    "$setOnInsert": {HistoryCursorFields.SEQUENCE: 0},
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error allocating revision sequence: {str(e)}", operation="next_sequence", cause=e)
        return document[HistoryCursorFields.LAST_SEQUENCE]

    async def append(self, revision: Revision) -> Revision:
        try:
            await self.revision_collection.insert_one(self._revision_to_dict(revision))
        except PyMongoError as e:
            raise DatabaseError(f"Error appending revision: {str(e)}", operation="append_revision", cause=e)
        return revision

    async def find_by_sequence(self, entity_id: str, sequence: int) -> Optional[Revision]:
        try:
            document = await self.revision_collection.find_one(
                {RevisionFields.ENTITY_ID: entity_id, RevisionFields.SEQUENCE: sequence}
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error finding revision: {str(e)}", operation="find_revision", cause=e)
        return self._document_to_revision(document) if document else None

    async def find_latest_child(self, entity_id: str, parent_sequence: int) -> Optional[Revision]:
        try:
            cursor = (
                self.revision_collection.find(
                    {RevisionFields.ENTITY_ID: entity_id, RevisionFields.PARENT_SEQUENCE: parent_sequence}
                )
                .sort(RevisionFields.SEQUENCE, DESCENDING)
                .limit(1)
            )
            async for document in cursor:
                return self._document_to_revision(document)
            return None
        except PyMongoError as e:
            raise DatabaseError(f"Error finding redo revision: {str(e)}", operation="find_revision", cause=e)

    async def iter_revisions(
        self,
        entity_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> AsyncIterator[Revision]:
        query = self._scope_query(entity_id, plan_id, project_id)
        try:
            cursor = self.revision_collection.find(query).sort(
                [
                    (RevisionFields.CREATED_AT, ASCENDING),
                    (RevisionFields.ENTITY_ID, ASCENDING),
                    (RevisionFields.SEQUENCE, ASCENDING),
                ]
            )
            async for document in cursor:
                yield self._document_to_revision(document)
        except PyMongoError as e:
            raise DatabaseError(f"Error reading revisions: {str(e)}", operation="iter_revisions", cause=e)

    async def list_recent(self, project_id: str, limit: int) -> List[Revision]:
        try:
            cursor = (
                self.revision_collection.find({RevisionFields.PROJECT_ID: project_id})
                .sort([(RevisionFields.CREATED_AT, DESCENDING), (RevisionFields.SEQUENCE, DESCENDING)])
                .limit(max(1, int(limit)))
            )
            return [self._document_to_revision(document) async for document in cursor]
        except PyMongoError as e:
            raise DatabaseError(f"Error listing history: {str(e)}", operation="list_history", cause=e)

    async def list_by_entity(self, entity_id: str) -> List[Revision]:
        try:
            cursor = self.revision_collection.find({RevisionFields.ENTITY_ID: entity_id}).sort(
                RevisionFields.SEQUENCE, ASCENDING
            )
            return [self._document_to_revision(document) async for document in cursor]
        except PyMongoError as e:
            raise DatabaseError(f"Error listing revisions: {str(e)}", operation="list_revisions", cause=e)

    async def count_by_project(self, project_id: str) -> int:
        try:
            return await self.revision_collection.count_documents({RevisionFields.PROJECT_ID: project_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error counting revisions: {str(e)}", operation="count_revisions", cause=e)

    async def list_oldest_ids(self, project_id: str, limit: int) -> List[str]:
        if limit <= 0:
            return []
        try:
            cursor = (
                self.revision_collection.find(
                    {RevisionFields.PROJECT_ID: project_id}, {RevisionFields.MONGO_ID: 1}
                )
                .sort([(RevisionFields.CREATED_AT, ASCENDING), (RevisionFields.SEQUENCE, ASCENDING)])
                .limit(int(limit))
            )
            return [document[RevisionFields.MONGO_ID] async for document in cursor]
        except PyMongoError as e:
            raise DatabaseError(f"Error listing oldest revisions: {str(e)}", operation="prune_history", cause=e)

    async def delete_by_ids(self, revision_ids: List[str]) -> int:
        if not revision_ids:
            return 0
        try:
            result = await self.revision_collection.delete_many(
                {RevisionFields.MONGO_ID: {"$in": list(revision_ids)}}
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting revisions: {str(e)}", operation="delete_revisions", cause=e)
        return result.deleted_count

    async def delete_by_entities(self, entity_ids: List[str]) -> int:
        if not entity_ids:
            return 0
        try:
            result = await self.revision_collection.delete_many(
                {RevisionFields.ENTITY_ID: {"$in": list(entity_ids)}}
            )
            await self.cursor_collection.delete_many(
                {HistoryCursorFields.MONGO_ID: {"$in": list(entity_ids)}}
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting revisions: {str(e)}", operation="delete_revisions", cause=e)
        return result.deleted_count

    async def delete_by_device(self, device_id: str) -> int:
        try:
            entity_ids = await self.revision_collection.distinct(
                RevisionFields.ENTITY_ID,
                {
                    RevisionFields.ENTITY_TYPE: EntityType.STAMP,
                    RevisionFields.SNAPSHOT_DEVICE_ID: device_id,
                },
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error finding device history: {str(e)}", operation="delete_revisions", cause=e)
        return await self.delete_by_entities(entity_ids)

    async def delete_by_plan(self, plan_id: str) -> int:
        try:
            result = await self.revision_collection.delete_many({RevisionFields.PLAN_ID: plan_id})
            await self.cursor_collection.delete_many({HistoryCursorFields.PLAN_ID: plan_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting plan history: {str(e)}", operation="delete_revisions", cause=e)
        return result.deleted_count

    async def delete_by_project(self, project_id: str) -> int:
        try:
            result = await self.revision_collection.delete_many({RevisionFields.PROJECT_ID: project_id})
            await self.cursor_collection.delete_many({HistoryCursorFields.PROJECT_ID: project_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error deleting project history: {str(e)}", operation="delete_revisions", cause=e)
        return result.deleted_count

    # ------------------------------------------------------------------
    # Cursors
    # ------------------------------------------------------------------

    async def get_cursor(self, entity_id: str) -> Optional[HistoryCursor]:
        try:
            document = await self.cursor_collection.find_one({HistoryCursorFields.MONGO_ID: entity_id})
        except PyMongoError as e:
            raise DatabaseError(f"Error reading history cursor: {str(e)}", operation="get_cursor", cause=e)
        # A cursor document that only holds an allocated counter has no owner yet
        if document is None or not document.get(HistoryCursorFields.ENTITY_TYPE):
            return None
        return self._document_to_cursor(document)

    async def save_cursor(self, cursor: HistoryCursor) -> None:
        try:
            await self.cursor_collection.update_one(
                {HistoryCursorFields.MONGO_ID: cursor.entity_id},
                {
                    "$set": {
                        HistoryCursorFields.ENTITY_TYPE: cursor.entity_type,
                        HistoryCursorFields.PROJECT_ID: cursor.project_id,
                        HistoryCursorFields.PLAN_ID: cursor.plan_id,
                        HistoryCursorFields.SEQUENCE: cursor.sequence,
                        HistoryCursorFields.LAST_ACTION: cursor.last_action,
                        HistoryCursorFields.REVISION_CREATED_AT: cursor.revision_created_at,
                        HistoryCursorFields.UPDATED_AT: cursor.updated_at,
                    },
                    "$max": {HistoryCursorFields.LAST_SEQUENCE: cursor.last_sequence},
                },
                upsert=True,
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error saving history cursor: {str(e)}", operation="save_cursor", cause=e)

    async def find_undo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        return await self._find_cursor(
            {HistoryCursorFields.PROJECT_ID: project_id, HistoryCursorFields.SEQUENCE: {"$gt": 0}},
            [
                (HistoryCursorFields.REVISION_CREATED_AT, DESCENDING),
                (HistoryCursorFields.UPDATED_AT, DESCENDING),
            ],
        )

    async def find_redo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        return await self._find_cursor(
            {HistoryCursorFields.PROJECT_ID: project_id, HistoryCursorFields.LAST_ACTION: HistoryAction.UNDO},
            [(HistoryCursorFields.UPDATED_AT, DESCENDING)],
        )

    async def abandon_redo(self, project_id: str) -> int:
        try:
            result = await self.cursor_collection.update_many(
                {HistoryCursorFields.PROJECT_ID: project_id, HistoryCursorFields.LAST_ACTION: HistoryAction.UNDO},
                {"$set": {HistoryCursorFields.LAST_ACTION: HistoryAction.RECORD}},
            )
        except PyMongoError as e:
            raise DatabaseError(f"Error clearing redo markers: {str(e)}", operation="abandon_redo", cause=e)
        return result.modified_count

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _find_cursor(self, query: Dict[str, Any], sort: List) -> Optional[HistoryCursor]:
        try:
            cursor = self.cursor_collection.find(query).sort(sort).limit(1)
            async for document in cursor:
                return self._document_to_cursor(document)
            return None
        except PyMongoError as e:
            raise DatabaseError(f"Error finding history cursor: {str(e)}", operation="find_cursor", cause=e)

    @staticmethod
    def _scope_query(
        entity_id: Optional[str], plan_id: Optional[str], project_id: Optional[str]
    ) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        if entity_id:
            query[RevisionFields.ENTITY_ID] = entity_id
        if plan_id:
            query[RevisionFields.PLAN_ID] = plan_id
        if project_id:
            query[RevisionFields.PROJECT_ID] = project_id
        if not query:
            raise InvalidInputError("A history scope (entity, plan or project) is required")
        return query

    def _document_to_revision(self, document: Dict[str, Any]) -> Revision:
        return Revision(
            id=document[RevisionFields.MONGO_ID],
            entity_type=document[RevisionFields.ENTITY_TYPE],
            entity_id=document[RevisionFields.ENTITY_ID],
            project_id=document.get(RevisionFields.PROJECT_ID, ""),
            plan_id=document.get(RevisionFields.PLAN_ID, ""),
            sequence=document[RevisionFields.SEQUENCE],
            parent_sequence=document.get(RevisionFields.PARENT_SEQUENCE, 0),
            change_type=document[RevisionFields.CHANGE_TYPE],
            snapshot=document.get(RevisionFields.SNAPSHOT),
            created_at=ensure_utc(document.get(RevisionFields.CREATED_AT)),
        )

    def _revision_to_dict(self, revision: Revision) -> Dict[str, Any]:
        return {
            RevisionFields.MONGO_ID: revision.id,
            RevisionFields.ENTITY_TYPE: revision.entity_type,
            RevisionFields.ENTITY_ID: revision.entity_id,
            RevisionFields.PROJECT_ID: revision.project_id,
            RevisionFields.PLAN_ID: revision.plan_id,
            RevisionFields.SEQUENCE: revision.sequence,
            RevisionFields.PARENT_SEQUENCE: revision.parent_sequence,
            RevisionFields.CHANGE_TYPE: revision.change_type,
            RevisionFields.SNAPSHOT: revision.snapshot,
            RevisionFields.CREATED_AT: revision.created_at,
        }

    def _document_to_cursor(self, document: Dict[str, Any]) -> HistoryCursor:
        return HistoryCursor(
            entity_id=document[HistoryCursorFields.MONGO_ID],
            entity_type=document.get(HistoryCursorFields.ENTITY_TYPE, ""),
            project_id=document.get(HistoryCursorFields.PROJECT_ID, ""),
            plan_id=document.get(HistoryCursorFields.PLAN_ID, ""),
            sequence=document.get(HistoryCursorFields.SEQUENCE, 0),
            last_sequence=document.get(HistoryCursorFields.LAST_SEQUENCE, 0),
            last_action=document.get(HistoryCursorFields.LAST_ACTION, HistoryAction.RECORD),
            revision_created_at=ensure_utc(document.get(HistoryCursorFields.REVISION_CREATED_AT)),
            updated_at=ensure_utc(document.get(HistoryCursorFields.UPDATED_AT)),
        )
