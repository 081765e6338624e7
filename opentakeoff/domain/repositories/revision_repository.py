from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional
from ..models.revision import HistoryCursor, Revision


class RevisionRepository(ABC):
    """
    Repository interface - defines contract for the append-only revision log
    and the per-entity history cursors that point into it.
    """

    @abstractmethod
    async def next_sequence(self, entity_id: str) -> int:
        """Atomically allocate the next revision sequence number for an entity"""
        pass

    @abstractmethod
    async def append(self, revision: Revision) -> Revision:
        """Append a revision record"""
        pass

    @abstractmethod
    async def find_by_sequence(self, entity_id: str, sequence: int) -> Optional[Revision]:
        """Find the revision of an entity with the given sequence"""
        pass

    @abstractmethod
    async def find_latest_child(self, entity_id: str, parent_sequence: int) -> Optional[Revision]:
        """Most recent revision of an entity recorded on top of `parent_sequence`"""
        pass

    @abstractmethod
    def iter_revisions(
        self,
        entity_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> AsyncIterator[Revision]:
        """Stream revisions of a scope ordered by creation time ascending"""
        pass

    @abstractmethod
    async def list_recent(self, project_id: str, limit: int) -> List[Revision]:
        """Most recent revisions of a project, newest first"""
        pass

    @abstractmethod
    async def list_by_entity(self, entity_id: str) -> List[Revision]:
        """All revisions of an entity ordered by sequence"""
        pass

    @abstractmethod
    async def count_by_project(self, project_id: str) -> int:
        """Number of revisions recorded for a project"""
        pass

    @abstractmethod
    async def list_oldest_ids(self, project_id: str, limit: int) -> List[str]:
        """IDs of the oldest revisions of a project"""
        pass

    @abstractmethod
    async def delete_by_ids(self, revision_ids: List[str]) -> int:
        """Delete revisions by ID; returns the number deleted"""
        pass

    @abstractmethod
    async def delete_by_entities(self, entity_ids: List[str]) -> int:
        """Delete revisions and cursors of entities; returns the number of revisions deleted"""
        pass

    @abstractmethod
    async def delete_by_device(self, device_id: str) -> int:
        """Delete revisions and cursors of every stamp ever placed with a device; returns the number deleted"""
        pass

    @abstractmethod
    async def delete_by_plan(self, plan_id: str) -> int:
        """Delete revisions and cursors of a plan; returns the number of revisions deleted"""
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: str) -> int:
        """Delete revisions and cursors of a project; returns the number of revisions deleted"""
        pass

    @abstractmethod
    async def get_cursor(self, entity_id: str) -> Optional[HistoryCursor]:
        """Get the history cursor of an entity"""
        pass

    @abstractmethod
    async def save_cursor(self, cursor: HistoryCursor) -> None:
        """Create or update a history cursor (the allocated sequence counter is left untouched)"""
        pass

    @abstractmethod
    async def find_undo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        """Cursor whose current revision is the most recent change in the project"""
        pass

    @abstractmethod
    async def find_redo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        """Cursor most recently moved by an undo in the project"""
        pass

    @abstractmethod
    async def abandon_redo(self, project_id: str) -> int:
        """Mark pending undone cursors of a project as no longer redoable"""
        pass
