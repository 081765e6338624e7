# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


class EntityType:
    """Entity kinds tracked by the history log"""
    STAMP = "stamp"
    LOCATION = "location"

    ALL = (STAMP, LOCATION)


class ChangeType:
    """Revision change kinds"""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    ALL = (CREATE, UPDATE, DELETE)


class HistoryAction:
    """Last action that moved a history cursor"""
    RECORD = "record"
    UNDO = "undo"
    REDO = "redo"


@dataclass
class Revision:
    """
    Immutable record of a state change to a stamp or location.

    `snapshot` is the entity state after the change (None for deletes).
    `sequence` increases monotonically per entity; `parent_sequence` is the
    sequence the entity's cursor pointed to when the change was recorded
    (0 means the entity did not exist yet).
    """
    id: str
    entity_type: str
    entity_id: str
    project_id: str
    plan_id: str
    sequence: int
    parent_sequence: int
    change_type: str
    snapshot: Optional[Dict[str, Any]]
    created_at: datetime

    def __post_init__(self) -> None:
        """Business validations"""
        if self.entity_type not in EntityType.ALL:
            raise ValueError(f"Unsupported entity type: {self.entity_type}")
        if self.change_type not in ChangeType.ALL:
            raise ValueError(f"Unsupported change type: {self.change_type}")
        if self.change_type == ChangeType.DELETE and self.snapshot is not None:
            raise ValueError("Delete revisions carry no snapshot")
        if self.change_type != ChangeType.DELETE and self.snapshot is None:
            raise ValueError(f"{self.change_type} revisions require a snapshot")
        if self.sequence <= self.parent_sequence:
            raise ValueError("Revision sequence must follow its parent")


@dataclass
class HistoryCursor:
    """Pointer into an entity's revision sequence (0 = before the first revision)"""
    entity_id: str
    entity_type: str
    project_id: str
    plan_id: str
    sequence: int
    last_sequence: int
    last_action: str
    updated_at: datetime
    revision_created_at: Optional[datetime] = None


@dataclass
class HistoryActionResult:
    """Outcome of an undo/redo request; success=False means nothing to do"""
    success: bool
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    restored_state: Optional[Dict[str, Any]] = None
