"""
Unit tests for project, plan and device use cases.
"""
from datetime import datetime, timezone

import pytest

from opentakeoff.application.dto.device_dto import DeviceCreateRequest
from opentakeoff.application.dto.plan_dto import PlanCreateRequest
from opentakeoff.application.dto.project_dto import ProjectCreateRequest
from opentakeoff.application.use_cases.device import CreateDeviceUseCase, DeleteDeviceUseCase
from opentakeoff.application.use_cases.plan import CreatePlanUseCase, DeletePlanUseCase
from opentakeoff.application.use_cases.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
)
from opentakeoff.application.use_cases.stamp import DeleteStampUseCase
from opentakeoff.core.exceptions import (
    AlreadyExistsError,
    ForeignKeyViolationError,
    InvalidInputError,
    NotFoundError,
)
from opentakeoff.domain.models.revision import ChangeType, EntityType
from opentakeoff.domain.models.stamp import Stamp, StampPosition

T0 = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def _plan_request(**overrides) -> PlanCreateRequest:
    fields = {
        "name": "Level 2",
        "page_number": 2,
        "page_count": 2,
        "file_path": "/uploads/level1.pdf",
        "file_size": 2048,
        "file_hash": "abc123",
    }
    fields.update(overrides)
    return PlanCreateRequest(**fields)


async def _stamp_with_history(world, stamp_id: str, device_id: str) -> None:
    stamp = Stamp(
        id=stamp_id,
        plan_id="plan-1",
        device_id=device_id,
        location_id=None,
        position=StampPosition(x=1, y=1),
        created_at=T0,
        updated_at=T0,
    )
    await world.stamps.save(stamp)
    await world.history.record_revision(
        entity_type=EntityType.STAMP,
        entity_id=stamp_id,
        change_type=ChangeType.CREATE,
        snapshot=stamp.to_snapshot(),
        project_id="project-1",
        plan_id="plan-1",
    )


class TestProjects:
    @pytest.mark.asyncio
    async def test_create_strips_name(self, world):
        result = await CreateProjectUseCase(world.projects).execute(ProjectCreateRequest(name="  Tower  "))
        assert result.name == "Tower"
        assert result.id in world.projects.items

    @pytest.mark.asyncio
    async def test_get_missing(self, world):
        with pytest.raises(NotFoundError):
            await GetProjectUseCase(world.projects).execute("nope")

    @pytest.mark.asyncio
    async def test_delete_cascades(self, world):
        await _stamp_with_history(world, "s1", "device-smoke")

        use_case = DeleteProjectUseCase(
            world.projects, world.plans, world.devices, world.locations, world.stamps, world.revisions
        )
        await use_case.execute("project-1")

        assert world.projects.items == {}
        assert world.plans.items == {}
        assert world.devices.items == {}
        assert world.stamps.items == {}
        assert world.revisions.revisions == []


class TestPlans:
    @pytest.mark.asyncio
    async def test_create(self, world):
        result = await CreatePlanUseCase(world.plans, world.projects).execute("project-1", _plan_request())
        assert result.page_number == 2
        assert result.project_id == "project-1"

    @pytest.mark.asyncio
    async def test_page_already_taken(self, world):
        with pytest.raises(AlreadyExistsError):
            await CreatePlanUseCase(world.plans, world.projects).execute(
                "project-1", _plan_request(page_number=1)
            )

    @pytest.mark.asyncio
    async def test_page_beyond_page_count(self, world):
        with pytest.raises(InvalidInputError):
            await CreatePlanUseCase(world.plans, world.projects).execute(
                "project-1", _plan_request(page_number=3)
            )

    @pytest.mark.asyncio
    async def test_missing_project(self, world):
        with pytest.raises(ForeignKeyViolationError):
            await CreatePlanUseCase(world.plans, world.projects).execute("project-x", _plan_request())

    @pytest.mark.asyncio
    async def test_delete_removes_stamps_and_history(self, world):
        await _stamp_with_history(world, "s1", "device-smoke")

        await DeletePlanUseCase(world.plans, world.locations, world.stamps, world.revisions).execute("plan-1")

        assert "plan-1" not in world.plans.items
        assert world.stamps.items == {}
        assert world.revisions.revisions == []


class TestDevices:
    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, world):
        with pytest.raises(AlreadyExistsError):
            await CreateDeviceUseCase(world.devices, world.projects).execute(
                "project-1", DeviceCreateRequest(name="Outlet")
            )

    @pytest.mark.asyncio
    async def test_missing_project(self, world):
        with pytest.raises(ForeignKeyViolationError):
            await CreateDeviceUseCase(world.devices, world.projects).execute(
                "project-x", DeviceCreateRequest(name="Switch")
            )

    @pytest.mark.asyncio
    async def test_delete_removes_stamps_and_publishes_zero(self, world):
        await _stamp_with_history(world, "s1", "device-smoke")
        await _stamp_with_history(world, "s2", "device-outlet")
        world.events.clear()

        use_case = DeleteDeviceUseCase(world.devices, world.stamps, world.revisions, world.notifier)
        await use_case.execute("device-smoke")

        assert list(world.stamps.items) == ["s2"]
        assert [revision.entity_id for revision in world.revisions.revisions] == ["s2"]
        assert [(event.device_id, event.total) for event in world.events] == [("device-smoke", 0)]

    @pytest.mark.asyncio
    async def test_delete_purges_history_of_previously_deleted_stamps(self, world):
        await _stamp_with_history(world, "s1", "device-smoke")
        await DeleteStampUseCase(world.stamps, world.plans, world.history, world.notifier).execute("s1")
        assert "s1" not in world.stamps.items

        await DeleteDeviceUseCase(world.devices, world.stamps, world.revisions, world.notifier).execute(
            "device-smoke"
        )

        assert world.revisions.revisions == []
        assert await world.revisions.get_cursor("s1") is None
        result = await world.history.undo_project("project-1")
        assert result.success is False
        assert "s1" not in world.stamps.items

    @pytest.mark.asyncio
    async def test_delete_missing(self, world):
        with pytest.raises(NotFoundError):
            await DeleteDeviceUseCase(world.devices, world.stamps, world.revisions, world.notifier).execute("x")
