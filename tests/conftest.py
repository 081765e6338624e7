"""
Shared pytest fixtures for opentakeoff tests.
"""
import os
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from opentakeoff.application.services.count_notifier import CountNotifier
from opentakeoff.application.services.history_service import HistoryService
from opentakeoff.application.services.stamp_placement_service import StampPlacementService
from opentakeoff.domain.models.device import Device
from opentakeoff.domain.models.plan import Plan
from opentakeoff.domain.models.project import Project
from opentakeoff.infrastructure.events.count_event_service import CountEventService

from .fakes import (
    InMemoryDeviceRepository,
    InMemoryLocationRepository,
    InMemoryPlanRepository,
    InMemoryProjectRepository,
    InMemoryRevisionRepository,
    InMemoryStampRepository,
)

CREATED_AT = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_opentakeoff",
        "LOCAL_TIMEZONE": "UTC",
        "HISTORY_MAX_ENTRIES": "100",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_ensure_indexes = False
    mock.history_max_entries = 100
    mock.pagination_default_limit = 50
    mock.pagination_max_limit = 100
    mock.cors_origins = ["http://localhost:5173"]
    mock.local_timezone = "UTC"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("opentakeoff.core.config.get_settings", return_value=mock), patch(
        "opentakeoff.utils.datetime_utils.get_settings", return_value=mock
    ), patch("opentakeoff.utils.pagination.get_settings", return_value=mock), patch(
        "opentakeoff.application.services.history_service.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def world():
    """
    In-memory repositories wired to real services, seeded with one project,
    one plan and two devices.
    """
    projects = InMemoryProjectRepository()
    plans = InMemoryPlanRepository()
    devices = InMemoryDeviceRepository()
    locations = InMemoryLocationRepository()
    stamps = InMemoryStampRepository()
    revisions = InMemoryRevisionRepository()

    event_service = CountEventService()
    notifier = CountNotifier(stamp_repository=stamps, event_service=event_service)
    placement = StampPlacementService(
        location_repository=locations,
        stamp_repository=stamps,
        notifier=notifier,
    )
    history = HistoryService(
        revision_repository=revisions,
        stamp_repository=stamps,
        location_repository=locations,
        device_repository=devices,
        notifier=notifier,
        placement_service=placement,
        max_entries=100,
    )

    project = Project(
        id="project-1",
        name="Office Fit-Out",
        description=None,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
    plan = Plan(
        id="plan-1",
        project_id=project.id,
        name="Level 1",
        page_number=1,
        page_count=2,
        file_path="/uploads/level1.pdf",
        file_size=2048,
        file_hash="abc123",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
        width=1000,
        height=800,
    )
    smoke = Device(
        id="device-smoke",
        project_id=project.id,
        name="Smoke Detector",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
    outlet = Device(
        id="device-outlet",
        project_id=project.id,
        name="Outlet",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
    projects.items[project.id] = project
    plans.items[plan.id] = plan
    devices.items[smoke.id] = smoke
    devices.items[outlet.id] = outlet

    events = []
    event_service.subscribe_to_all(events.append)

    return SimpleNamespace(
        projects=projects,
        plans=plans,
        devices=devices,
        locations=locations,
        stamps=stamps,
        revisions=revisions,
        event_service=event_service,
        notifier=notifier,
        placement=placement,
        history=history,
        project=project,
        plan=plan,
        smoke=smoke,
        outlet=outlet,
        events=events,
    )
