"""
In-memory repository doubles implementing the domain interfaces.

Entities are deep-copied on the way in and out, so tests observe store
semantics: mutating a returned object does not change stored state.
"""
import copy
import dataclasses
from collections import OrderedDict
from typing import AsyncIterator, Dict, List, Optional

from opentakeoff.core.exceptions import InvalidInputError
from opentakeoff.domain.models.device import Device
from opentakeoff.domain.models.location import Location
from opentakeoff.domain.models.plan import Plan
from opentakeoff.domain.models.project import Project
from opentakeoff.domain.models.revision import EntityType, HistoryAction, HistoryCursor, Revision
from opentakeoff.domain.models.stamp import Stamp
from opentakeoff.domain.repositories import (
    DeviceRepository,
    LocationRepository,
    PlanRepository,
    ProjectRepository,
    RevisionRepository,
    StampCountRow,
    StampRepository,
)


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Project] = OrderedDict()

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        return copy.deepcopy(self.items.get(project_id))

    async def list(self, limit: int, after_id: Optional[str] = None) -> List[Project]:
        ordered = sorted(self.items.values(), key=lambda project: project.id)
        if after_id:
            ordered = [project for project in ordered if project.id > after_id]
        return copy.deepcopy(ordered[:limit])

    async def save(self, project: Project) -> Project:
        self.items[project.id] = copy.deepcopy(project)
        return project

    async def delete(self, project_id: str) -> bool:
        return self.items.pop(project_id, None) is not None


class InMemoryPlanRepository(PlanRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Plan] = OrderedDict()

    async def find_by_id(self, plan_id: str) -> Optional[Plan]:
        return copy.deepcopy(self.items.get(plan_id))

    async def find_by_project(self, project_id: str) -> List[Plan]:
        plans = [plan for plan in self.items.values() if plan.project_id == project_id]
        return copy.deepcopy(sorted(plans, key=lambda plan: plan.page_number))

    async def find_by_project_page(self, project_id: str, page_number: int) -> Optional[Plan]:
        for plan in self.items.values():
            if plan.project_id == project_id and plan.page_number == page_number:
                return copy.deepcopy(plan)
        return None

    async def save(self, plan: Plan) -> Plan:
        self.items[plan.id] = copy.deepcopy(plan)
        return plan

    async def delete(self, plan_id: str) -> bool:
        return self.items.pop(plan_id, None) is not None


class InMemoryDeviceRepository(DeviceRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Device] = OrderedDict()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        return copy.deepcopy(self.items.get(device_id))

    async def find_by_project(self, project_id: str) -> List[Device]:
        devices = [device for device in self.items.values() if device.project_id == project_id]
        return copy.deepcopy(sorted(devices, key=lambda device: device.name))

    async def find_by_project_name(self, project_id: str, name: str) -> Optional[Device]:
        for device in self.items.values():
            if device.project_id == project_id and device.name == name:
                return copy.deepcopy(device)
        return None

    async def save(self, device: Device) -> Device:
        self.items[device.id] = copy.deepcopy(device)
        return device

    async def delete(self, device_id: str) -> bool:
        return self.items.pop(device_id, None) is not None

    async def delete_by_project(self, project_id: str) -> int:
        doomed = [key for key, device in self.items.items() if device.project_id == project_id]
        for key in doomed:
            del self.items[key]
        return len(doomed)


class InMemoryLocationRepository(LocationRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Location] = OrderedDict()

    async def find_by_id(self, location_id: str) -> Optional[Location]:
        return copy.deepcopy(self.items.get(location_id))

    async def find_by_plan(self, plan_id: str) -> List[Location]:
        return copy.deepcopy([location for location in self.items.values() if location.plan_id == plan_id])

    async def save(self, location: Location) -> Location:
        self.items[location.id] = copy.deepcopy(location)
        return location

    async def delete(self, location_id: str) -> bool:
        return self.items.pop(location_id, None) is not None

    async def delete_by_plan(self, plan_id: str) -> int:
        doomed = [key for key, location in self.items.items() if location.plan_id == plan_id]
        for key in doomed:
            del self.items[key]
        return len(doomed)


class InMemoryStampRepository(StampRepository):
    def __init__(self) -> None:
        self.items: Dict[str, Stamp] = OrderedDict()

    async def find_by_id(self, stamp_id: str) -> Optional[Stamp]:
        return copy.deepcopy(self.items.get(stamp_id))

    async def list_by_plan(self, plan_id: str, limit: int, after_id: Optional[str] = None) -> List[Stamp]:
        stamps = sorted(
            (stamp for stamp in self.items.values() if stamp.plan_id == plan_id),
            key=lambda stamp: stamp.id,
        )
        if after_id:
            stamps = [stamp for stamp in stamps if stamp.id > after_id]
        return copy.deepcopy(stamps[:limit])

    async def find_by_plan(self, plan_id: str) -> List[Stamp]:
        return copy.deepcopy([stamp for stamp in self.items.values() if stamp.plan_id == plan_id])

    async def find_by_device(self, device_id: str) -> List[Stamp]:
        return copy.deepcopy([stamp for stamp in self.items.values() if stamp.device_id == device_id])

    async def save(self, stamp: Stamp) -> Stamp:
        self.items[stamp.id] = copy.deepcopy(stamp)
        return stamp

    async def delete(self, stamp_id: str) -> bool:
        return self.items.pop(stamp_id, None) is not None

    async def delete_by_plan(self, plan_id: str) -> int:
        doomed = [key for key, stamp in self.items.items() if stamp.plan_id == plan_id]
        for key in doomed:
            del self.items[key]
        return len(doomed)

    async def delete_by_device(self, device_id: str) -> int:
        doomed = [key for key, stamp in self.items.items() if stamp.device_id == device_id]
        for key in doomed:
            del self.items[key]
        return len(doomed)

    async def set_location(self, stamp_ids: List[str], location_id: Optional[str], updated_at) -> int:
        updated = 0
        for stamp_id in stamp_ids:
            stamp = self.items.get(stamp_id)
            if stamp is not None:
                stamp.location_id = location_id
                stamp.updated_at = updated_at
                updated += 1
        return updated

    async def count(self, plan_id: str, device_id: str, location_id: Optional[str]) -> int:
        return sum(
            1
            for stamp in self.items.values()
            if stamp.plan_id == plan_id and stamp.device_id == device_id and stamp.location_id == location_id
        )

    async def aggregate_counts(self, plan_id: str) -> List[StampCountRow]:
        rows: Dict[tuple, StampCountRow] = OrderedDict()
        for stamp in self.items.values():
            if stamp.plan_id != plan_id:
                continue
            key = (stamp.device_id, stamp.location_id)
            row = rows.get(key)
            if row is None:
                rows[key] = StampCountRow(
                    device_id=stamp.device_id,
                    location_id=stamp.location_id,
                    total=1,
                    updated_at=stamp.updated_at,
                )
            else:
                row.total += 1
                row.updated_at = max(row.updated_at, stamp.updated_at)
        return list(rows.values())


class InMemoryRevisionRepository(RevisionRepository):
    def __init__(self) -> None:
        self.revisions: List[Revision] = []
        self.cursors: Dict[str, HistoryCursor] = {}
        self.counters: Dict[str, int] = {}
        self.save_order: Dict[str, int] = {}
        self._saves = 0

    async def next_sequence(self, entity_id: str) -> int:
        self.counters[entity_id] = self.counters.get(entity_id, 0) + 1
        return self.counters[entity_id]

    async def append(self, revision: Revision) -> Revision:
        self.revisions.append(copy.deepcopy(revision))
        return revision

    async def find_by_sequence(self, entity_id: str, sequence: int) -> Optional[Revision]:
        for revision in self.revisions:
            if revision.entity_id == entity_id and revision.sequence == sequence:
                return copy.deepcopy(revision)
        return None

    async def find_latest_child(self, entity_id: str, parent_sequence: int) -> Optional[Revision]:
        children = [
            revision
            for revision in self.revisions
            if revision.entity_id == entity_id and revision.parent_sequence == parent_sequence
        ]
        if not children:
            return None
        return copy.deepcopy(max(children, key=lambda revision: revision.sequence))

    async def iter_revisions(
        self,
        entity_id: Optional[str] = None,
        plan_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> AsyncIterator[Revision]:
        if not (entity_id or plan_id or project_id):
            raise InvalidInputError("A history scope (entity, plan or project) is required")
        matching = [
            revision
            for revision in self.revisions
            if (not entity_id or revision.entity_id == entity_id)
            and (not plan_id or revision.plan_id == plan_id)
            and (not project_id or revision.project_id == project_id)
        ]
        matching.sort(key=lambda revision: (revision.created_at, revision.entity_id, revision.sequence))
        for revision in matching:
            yield copy.deepcopy(revision)

    async def list_recent(self, project_id: str, limit: int) -> List[Revision]:
        matching = [revision for revision in self.revisions if revision.project_id == project_id]
        # Append order stands in for (created_at, sequence) when timestamps tie
        return copy.deepcopy(list(reversed(matching))[:limit])

    async def list_by_entity(self, entity_id: str) -> List[Revision]:
        matching = [revision for revision in self.revisions if revision.entity_id == entity_id]
        return copy.deepcopy(sorted(matching, key=lambda revision: revision.sequence))

    async def count_by_project(self, project_id: str) -> int:
        return sum(1 for revision in self.revisions if revision.project_id == project_id)

    async def list_oldest_ids(self, project_id: str, limit: int) -> List[str]:
        if limit <= 0:
            return []
        return [revision.id for revision in self.revisions if revision.project_id == project_id][:limit]

    async def delete_by_ids(self, revision_ids: List[str]) -> int:
        doomed = set(revision_ids)
        before = len(self.revisions)
        self.revisions = [revision for revision in self.revisions if revision.id not in doomed]
        return before - len(self.revisions)

    async def delete_by_entities(self, entity_ids: List[str]) -> int:
        doomed = set(entity_ids)
        before = len(self.revisions)
        self.revisions = [revision for revision in self.revisions if revision.entity_id not in doomed]
        for entity_id in doomed:
            self.cursors.pop(entity_id, None)
        return before - len(self.revisions)

    async def delete_by_device(self, device_id: str) -> int:
        entity_ids = {
            revision.entity_id
            for revision in self.revisions
            if revision.entity_type == EntityType.STAMP
            and (revision.snapshot or {}).get("device_id") == device_id
        }
        return await self.delete_by_entities(list(entity_ids))

    async def delete_by_plan(self, plan_id: str) -> int:
        before = len(self.revisions)
        self.revisions = [revision for revision in self.revisions if revision.plan_id != plan_id]
        self.cursors = {key: cursor for key, cursor in self.cursors.items() if cursor.plan_id != plan_id}
        return before - len(self.revisions)

    async def delete_by_project(self, project_id: str) -> int:
        before = len(self.revisions)
        self.revisions = [revision for revision in self.revisions if revision.project_id != project_id]
        self.cursors = {key: cursor for key, cursor in self.cursors.items() if cursor.project_id != project_id}
        return before - len(self.revisions)

    async def get_cursor(self, entity_id: str) -> Optional[HistoryCursor]:
        return copy.deepcopy(self.cursors.get(entity_id))

    async def save_cursor(self, cursor: HistoryCursor) -> None:
        stored = copy.deepcopy(cursor)
        stored.last_sequence = max(stored.last_sequence, self.counters.get(cursor.entity_id, 0))
        self.cursors[cursor.entity_id] = stored
        self._saves += 1
        self.save_order[cursor.entity_id] = self._saves

    async def find_undo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        candidates = [
            cursor
            for cursor in self.cursors.values()
            if cursor.project_id == project_id and cursor.sequence > 0
        ]
        if not candidates:
            return None
        # Timestamps can tie within a millisecond; the later save wins
        best = max(
            candidates,
            key=lambda c: (c.revision_created_at, c.updated_at, self.save_order.get(c.entity_id, 0)),
        )
        return copy.deepcopy(best)

    async def find_redo_candidate(self, project_id: str) -> Optional[HistoryCursor]:
        candidates = [
            cursor
            for cursor in self.cursors.values()
            if cursor.project_id == project_id and cursor.last_action == HistoryAction.UNDO
        ]
        if not candidates:
            return None
        best = max(candidates, key=lambda c: (c.updated_at, self.save_order.get(c.entity_id, 0)))
        return copy.deepcopy(best)

    async def abandon_redo(self, project_id: str) -> int:
        changed = 0
        for entity_id, cursor in self.cursors.items():
            if cursor.project_id == project_id and cursor.last_action == HistoryAction.UNDO:
                self.cursors[entity_id] = dataclasses.replace(cursor, last_action=HistoryAction.RECORD)
                changed += 1
        return changed
