"""
Revision history with undo/redo for stamps and locations.

Every change appends an immutable revision carrying the entity state after the
change. A per-entity cursor holds the sequence of the revision matching the
current state; undo moves it to the revision's parent and redo to the most
recent child, so a change recorded after an undo leaves the undone branch
unreachable.
"""
import logging
from typing import Any, AsyncIterator, Dict, List, Optional
from uuid import uuid4

from ...core.config import get_settings
from ...core.exceptions import InvalidInputError
from ...domain.models.location import Location
from ...domain.models.revision import (
    EntityType,
    HistoryAction,
    HistoryActionResult,
    HistoryCursor,
    Revision,
)
from ...domain.models.stamp import Stamp
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.revision_repository import RevisionRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...utils.datetime_utils import utc_now
from .count_notifier import CountNotifier
from .stamp_placement_service import StampPlacementService

logger = logging.getLogger(__name__)


class HistoryStream:
    """
    Lazy history listing. Each `async for` runs a fresh query, so the stream can
    be iterated any number of times and reflects the store at iteration time.
    """

    def __init__(
        self,
        revision_repository: RevisionRepository,
        entity_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> None:
        self._revision_repository = revision_repository
        self.entity_id = entity_id
        self.plan_id = plan_id
        self.project_id = project_id

    def __aiter__(self) -> AsyncIterator[Revision]:
        return self._revision_repository.iter_revisions(
            entity_id=self.entity_id,
            plan_id=self.plan_id,
            project_id=self.project_id,
        ).__aiter__()

    async def to_list(self) -> List[Revision]:
        return [revision async for revision in self]


class HistoryService:
    """Records revisions and moves history cursors."""

    def __init__(
        self,
        revision_repository: RevisionRepository,
        stamp_repository: StampRepository,
        location_repository: LocationRepository,
        device_repository: DeviceRepository,
        notifier: CountNotifier,
        placement_service: StampPlacementService,
        max_entries: Optional[int] = None,
    ) -> None:
        self.revision_repository = revision_repository
        self.stamp_repository = stamp_repository
        self.location_repository = location_repository
        self.device_repository = device_repository
        self.notifier = notifier
        self.placement_service = placement_service
        self.max_entries = max_entries if max_entries is not None else get_settings().history_max_entries

    # ------------------------------------------------------------------
    # Recording and listing
    # ------------------------------------------------------------------

    async def record_revision(
        self,
        entity_type: str,
        entity_id: str,
        change_type: str,
        snapshot: Optional[Dict[str, Any]],
        project_id: str,
        plan_id: str,
    ) -> Revision:
        """
        Append a revision and move the entity cursor onto it.

        Raises:
            DatabaseError: If the store rejects the write
        """
        sequence = await self.revision_repository.next_sequence(entity_id)
        cursor = await self.revision_repository.get_cursor(entity_id)
        parent_sequence = cursor.sequence if cursor is not None else 0

        now = utc_now()
        revision = Revision(
            id=str(uuid4()),
            entity_type=entity_type,
            entity_id=entity_id,
            project_id=project_id,
            plan_id=plan_id,
            sequence=sequence,
            parent_sequence=parent_sequence,
            change_type=change_type,
            snapshot=snapshot,
            created_at=now,
        )
        await self.revision_repository.append(revision)

        # A new change invalidates pending project-level redo
        await self.revision_repository.abandon_redo(project_id)
        await self.revision_repository.save_cursor(
            HistoryCursor(
                entity_id=entity_id,
                entity_type=entity_type,
                project_id=project_id,
                plan_id=plan_id,
                sequence=sequence,
                last_sequence=sequence,
                last_action=HistoryAction.RECORD,
                updated_at=now,
                revision_created_at=now,
            )
        )

        logger.debug(f"Recorded {change_type} revision {sequence} for {entity_type} {entity_id}")
        return revision

    def list_history(
        self,
        entity_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> HistoryStream:
        """History entries of a scope, oldest first."""
        if not (entity_id or plan_id or project_id):
            raise InvalidInputError("A history scope (entity, plan or project) is required")
        return HistoryStream(
            self.revision_repository,
            entity_id=entity_id,
            plan_id=plan_id,
            project_id=project_id,
        )

    async def get_history(self, project_id: str, limit: Optional[int] = None) -> List[Revision]:
        """Most recent entries of a project, newest first."""
        if limit is None or limit > self.max_entries:
            limit = self.max_entries
        return await self.revision_repository.list_recent(project_id, max(1, limit))

    async def prune_history(self, project_id: str) -> int:
        """Delete the oldest revisions of a project beyond the history window."""
        total = await self.revision_repository.count_by_project(project_id)
        excess = total - self.max_entries
        if excess <= 0:
            return 0

        revision_ids = await self.revision_repository.list_oldest_ids(project_id, excess)
        deleted = await self.revision_repository.delete_by_ids(revision_ids)
        logger.info(f"Pruned {deleted} revisions from project {project_id}")
        return deleted

    # ------------------------------------------------------------------
    # Undo / redo
    # ------------------------------------------------------------------

    async def undo(self, entity_id: str, entity_type: Optional[str] = None) -> HistoryActionResult:
        cursor = await self.revision_repository.get_cursor(entity_id)
        if cursor is None or cursor.sequence == 0 or not self._type_matches(cursor, entity_type):
            return self._nothing_to_do(HistoryAction.UNDO, entity_id, entity_type, cursor)

        current = await self.revision_repository.find_by_sequence(entity_id, cursor.sequence)
        if current is None:
            logger.info(f"Cannot undo {entity_id}: revision {cursor.sequence} was pruned")
            return self._nothing_to_do(HistoryAction.UNDO, entity_id, entity_type, cursor)

        parent: Optional[Revision] = None
        if current.parent_sequence > 0:
            parent = await self.revision_repository.find_by_sequence(entity_id, current.parent_sequence)
            if parent is None:
                logger.info(f"Cannot undo {entity_id}: revision {current.parent_sequence} was pruned")
                return self._nothing_to_do(HistoryAction.UNDO, entity_id, entity_type, cursor)

        state = parent.snapshot if parent is not None else None
        if not await self._restorable(cursor, state):
            logger.info(f"Cannot undo {entity_id}: revision {current.parent_sequence} references a deleted device")
            return self._nothing_to_do(HistoryAction.UNDO, entity_id, entity_type, cursor)

        restored = await self._apply_state(cursor, state)

        cursor.sequence = current.parent_sequence
        cursor.last_action = HistoryAction.UNDO
        cursor.updated_at = utc_now()
        cursor.revision_created_at = parent.created_at if parent is not None else None
        await self.revision_repository.save_cursor(cursor)

        logger.info(f"Undo {cursor.entity_type} {entity_id}: revision {current.sequence} -> {cursor.sequence}")
        return HistoryActionResult(
            success=True,
            action=HistoryAction.UNDO,
            entity_type=cursor.entity_type,
            entity_id=entity_id,
            restored_state=restored,
        )

    async def redo(self, entity_id: str, entity_type: Optional[str] = None) -> HistoryActionResult:
        cursor = await self.revision_repository.get_cursor(entity_id)
        if cursor is None or not self._type_matches(cursor, entity_type):
            return self._nothing_to_do(HistoryAction.REDO, entity_id, entity_type, cursor)

        child = await self.revision_repository.find_latest_child(entity_id, cursor.sequence)
        if child is None:
            return self._nothing_to_do(HistoryAction.REDO, entity_id, entity_type, cursor)

        if not await self._restorable(cursor, child.snapshot):
            logger.info(f"Cannot redo {entity_id}: revision {child.sequence} references a deleted device")
            return self._nothing_to_do(HistoryAction.REDO, entity_id, entity_type, cursor)

        restored = await self._apply_state(cursor, child.snapshot)

        # Stay marked as undone while further redo steps remain
        has_more = await self.revision_repository.find_latest_child(entity_id, child.sequence) is not None
        cursor.sequence = child.sequence
        cursor.last_action = HistoryAction.UNDO if has_more else HistoryAction.REDO
        cursor.updated_at = utc_now()
        cursor.revision_created_at = child.created_at
        await self.revision_repository.save_cursor(cursor)

        logger.info(f"Redo {cursor.entity_type} {entity_id}: now at revision {child.sequence}")
        return HistoryActionResult(
            success=True,
            action=HistoryAction.REDO,
            entity_type=cursor.entity_type,
            entity_id=entity_id,
            restored_state=restored,
        )

    async def undo_project(self, project_id: str) -> HistoryActionResult:
        """Undo the most recent change in the project."""
        cursor = await self.revision_repository.find_undo_candidate(project_id)
        if cursor is None:
            return HistoryActionResult(success=False, action=HistoryAction.UNDO)
        return await self.undo(cursor.entity_id)

    async def redo_project(self, project_id: str) -> HistoryActionResult:
        """Redo the most recently undone change in the project."""
        cursor = await self.revision_repository.find_redo_candidate(project_id)
        if cursor is None:
            return HistoryActionResult(success=False, action=HistoryAction.REDO)
        return await self.redo(cursor.entity_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _type_matches(cursor: HistoryCursor, entity_type: Optional[str]) -> bool:
        return entity_type is None or cursor.entity_type == entity_type

    @staticmethod
    def _nothing_to_do(
        action: str,
        entity_id: str,
        entity_type: Optional[str],
        cursor: Optional[HistoryCursor],
    ) -> HistoryActionResult:
        return HistoryActionResult(
            success=False,
            action=action,
            entity_type=entity_type or (cursor.entity_type if cursor is not None else None),
            entity_id=entity_id,
        )

    async def _restorable(self, cursor: HistoryCursor, state: Optional[Dict[str, Any]]) -> bool:
        """A stamp state can only be restored while its device still exists."""
        if state is None or cursor.entity_type != EntityType.STAMP:
            return True
        return await self.device_repository.find_by_id(state["device_id"]) is not None

    async def _apply_state(
        self, cursor: HistoryCursor, state: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """Make the entity match `state` (None removes it) without recording a revision."""
        if cursor.entity_type == EntityType.STAMP:
            return await self._apply_stamp_state(cursor.entity_id, state)
        if cursor.entity_type == EntityType.LOCATION:
            return await self._apply_location_state(cursor.entity_id, cursor.plan_id, state)
        raise InvalidInputError(f"Unsupported entity type: {cursor.entity_type}")

    async def _apply_stamp_state(
        self, stamp_id: str, state: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        previous = await self.stamp_repository.find_by_id(stamp_id)
        keys = [previous.count_key] if previous is not None else []

        if state is None:
            if previous is not None:
                await self.stamp_repository.delete(stamp_id)
            await self.notifier.notify_many(keys)
            return None

        stamp = Stamp.from_snapshot(state)
        if stamp.location_id and await self.location_repository.find_by_id(stamp.location_id) is None:
            stamp.location_id = None
        await self.stamp_repository.save(stamp)

        keys.append(stamp.count_key)
        await self.notifier.notify_many(keys)
        return stamp.to_snapshot()

    async def _apply_location_state(
        self, location_id: str, plan_id: str, state: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        if state is None:
            await self.location_repository.delete(location_id)
            await self.placement_service.detach_location(plan_id, location_id)
            return None

        location = Location.from_snapshot(state)
        await self.location_repository.save(location)
        await self.placement_service.reassign_for_location(location)
        return location.to_snapshot()
