"""
Unit tests for plan counts, recompute and project export.
"""
import csv
import io
import json
from datetime import datetime, timedelta, timezone

import pytest

from opentakeoff.application.use_cases.count import (
    ExportProjectUseCase,
    GetPlanCountsUseCase,
    RecomputePlanCountsUseCase,
)
from opentakeoff.core.exceptions import InvalidInputError, NotFoundError
from opentakeoff.domain.models.location import Location, LocationType, RectangleBounds
from opentakeoff.domain.models.plan import Plan
from opentakeoff.domain.models.stamp import Stamp, StampPosition

T0 = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def _room(world, location_id, name, x, y, plan_id="plan-1"):
    world.locations.items[location_id] = Location(
        id=location_id,
        plan_id=plan_id,
        name=name,
        type=LocationType.RECTANGLE,
        bounds=RectangleBounds(x=x, y=y, width=100, height=100),
        created_at=T0,
        updated_at=T0,
    )


def _stamp(world, stamp_id, device_id, location_id=None, x=0.0, y=0.0, plan_id="plan-1", updated_at=T0):
    world.stamps.items[stamp_id] = Stamp(
        id=stamp_id,
        plan_id=plan_id,
        device_id=device_id,
        location_id=location_id,
        position=StampPosition(x=x, y=y),
        created_at=T0,
        updated_at=updated_at,
    )


def _counts_use_case(world) -> GetPlanCountsUseCase:
    return GetPlanCountsUseCase(world.plans, world.devices, world.locations, world.stamps)


def _export_use_case(world) -> ExportProjectUseCase:
    return ExportProjectUseCase(world.projects, world.plans, _counts_use_case(world))


@pytest.fixture
def furnished(world):
    """Two rooms on plan-1 with stamps spread across them."""
    _room(world, "room-k", "Kitchen", 0, 0)
    _room(world, "room-b", "Bedroom", 200, 0)
    _stamp(world, "s1", "device-outlet", "room-k", 10, 10)
    _stamp(world, "s2", "device-outlet", "room-k", 20, 20)
    _stamp(world, "s3", "device-outlet", "room-b", 210, 10, updated_at=T0 + timedelta(minutes=5))
    _stamp(world, "s4", "device-outlet", None, 900, 700)
    _stamp(world, "s5", "device-smoke", "room-k", 30, 30)
    return world


class TestGetPlanCounts:
    @pytest.mark.asyncio
    async def test_counts_sorted_by_device_then_location(self, furnished):
        result = await _counts_use_case(furnished).execute("plan-1")

        order = [(item.device_name, item.location_name, item.total) for item in result.counts]
        assert order == [
            ("Outlet", None, 1),
            ("Outlet", "Bedroom", 1),
            ("Outlet", "Kitchen", 2),
            ("Smoke Detector", "Kitchen", 1),
        ]

    @pytest.mark.asyncio
    async def test_totals_and_latest_update(self, furnished):
        result = await _counts_use_case(furnished).execute("plan-1")

        assert [(total.device_name, total.total) for total in result.totals] == [
            ("Outlet", 4),
            ("Smoke Detector", 1),
        ]
        assert result.updated_at == T0 + timedelta(minutes=5)

    @pytest.mark.asyncio
    async def test_unknown_device_name(self, world):
        _stamp(world, "orphan", "device-gone")
        result = await _counts_use_case(world).execute("plan-1")
        assert result.counts[0].device_name == "Unknown Device"

    @pytest.mark.asyncio
    async def test_empty_plan(self, world):
        result = await _counts_use_case(world).execute("plan-1")
        assert result.counts == []
        assert result.updated_at is None

    @pytest.mark.asyncio
    async def test_missing_plan(self, world):
        with pytest.raises(NotFoundError):
            await _counts_use_case(world).execute("plan-x")


class TestRecomputePlanCounts:
    @pytest.mark.asyncio
    async def test_reclassifies_stale_assignments(self, world):
        _room(world, "room-k", "Kitchen", 0, 0)
        _stamp(world, "stale", "device-smoke", None, 50, 50)
        _stamp(world, "wrong", "device-smoke", "room-k", 500, 500)
        _stamp(world, "fine", "device-smoke", "room-k", 10, 10)

        use_case = RecomputePlanCountsUseCase(world.plans, world.locations, world.stamps, world.notifier)
        result = await use_case.execute("plan-1")

        assert result.updated_stamps == 2
        assert world.stamps.items["stale"].location_id == "room-k"
        assert world.stamps.items["wrong"].location_id is None
        pairs = {(event.location_id, event.total) for event in world.events}
        assert pairs == {(None, 1), ("room-k", 2)}

    @pytest.mark.asyncio
    async def test_nothing_to_change(self, world):
        use_case = RecomputePlanCountsUseCase(world.plans, world.locations, world.stamps, world.notifier)
        result = await use_case.execute("plan-1")
        assert result.updated_stamps == 0
        assert world.events == []


class TestExportProject:
    @pytest.mark.asyncio
    async def test_rows_with_locations(self, furnished):
        data = await _export_use_case(furnished).collect("project-1")

        assert [(row.device, row.location, row.quantity) for row in data.rows] == [
            ("Outlet", None, 1),
            ("Outlet", "Bedroom", 1),
            ("Outlet", "Kitchen", 2),
            ("Smoke Detector", "Kitchen", 1),
        ]

    @pytest.mark.asyncio
    async def test_device_totals_merged_across_plans(self, furnished):
        furnished.plans.items["plan-2"] = Plan(
            id="plan-2",
            project_id="project-1",
            name="Level 2",
            page_number=2,
            page_count=2,
            file_path="/uploads/level1.pdf",
            file_size=2048,
            file_hash="abc123",
            created_at=T0,
            updated_at=T0,
        )
        _stamp(furnished, "s6", "device-smoke", None, plan_id="plan-2")

        data = await _export_use_case(furnished).collect("project-1", include_locations=False)

        assert [(row.device, row.location, row.total) for row in data.rows] == [
            ("Outlet", None, 4),
            ("Smoke Detector", None, 2),
        ]

    @pytest.mark.asyncio
    async def test_csv_export(self, furnished):
        result = await _export_use_case(furnished).execute("project-1", "csv")

        assert result.media_type == "text/csv"
        assert result.content.startswith("\ufeff")
        assert result.content_disposition.startswith('attachment; filename="office_fit-out_export_')
        assert result.content_disposition.endswith('.csv"')

        rows = list(csv.reader(io.StringIO(result.content.lstrip("\ufeff"))))
        assert rows[0] == ["Device", "Total", "Location", "Quantity"]
        assert rows[1] == ["Outlet", "1", "(No Location)", "1"]

    @pytest.mark.asyncio
    async def test_json_export(self, furnished):
        result = await _export_use_case(furnished).execute("project-1", "json")

        document = json.loads(result.content)
        assert result.media_type == "application/json"
        assert document["metadata"]["projectName"] == "Office Fit-Out"
        assert document["metadata"]["rowCount"] == 4
        assert document["data"][0]["location"] is None

    @pytest.mark.asyncio
    async def test_unsupported_format(self, furnished):
        with pytest.raises(InvalidInputError):
            await _export_use_case(furnished).execute("project-1", "pdf")

    @pytest.mark.asyncio
    async def test_missing_project(self, world):
        with pytest.raises(NotFoundError):
            await _export_use_case(world).execute("project-x", "csv")
