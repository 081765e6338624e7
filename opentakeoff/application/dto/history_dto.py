from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...domain.models.revision import HistoryActionResult, Revision


class HistoryEntryResponse(BaseModel):
    """One revision record (stamp or location)"""
    id: str
    entity_type: str
    entity_id: str
    project_id: str
    plan_id: str
    sequence: int
    parent_sequence: int
    change_type: str
    snapshot: Optional[Dict[str, Any]] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, revision: Revision) -> "HistoryEntryResponse":
        return cls(
            id=revision.id,
            entity_type=revision.entity_type,
            entity_id=revision.entity_id,
            project_id=revision.project_id,
            plan_id=revision.plan_id,
            sequence=revision.sequence,
            parent_sequence=revision.parent_sequence,
            change_type=revision.change_type,
            snapshot=revision.snapshot,
            created_at=revision.created_at,
        )


class HistoryListResponse(BaseModel):
    items: List[HistoryEntryResponse] = Field(default_factory=list)
    count: int = 0


class HistoryActionResponse(BaseModel):
    """Outcome of undo/redo; success=False means there was nothing to do"""
    success: bool
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    restored_state: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, result: HistoryActionResult) -> "HistoryActionResponse":
        return cls(
            success=result.success,
            action=result.action,
            entity_type=result.entity_type,
            entity_id=result.entity_id,
            restored_state=result.restored_state,
        )


class PruneHistoryResponse(BaseModel):
    project_id: str
    deleted: int
