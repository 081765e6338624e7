"""
Fixtures for API tests: the real application with every controller resolving
dependencies from a mocked container (no MongoDB).
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from opentakeoff.infrastructure.events.count_event_service import CountEventService

CONTROLLER_MODULES = (
    "count_controller",
    "count_events_controller",
    "device_controller",
    "health_controller",
    "history_controller",
    "location_controller",
    "plan_controller",
    "project_controller",
    "stamp_controller",
)


@pytest.fixture
def event_service():
    return CountEventService()


@pytest.fixture
def use_cases():
    """Use case class -> AsyncMock, filled lazily on first resolution."""
    return {}


@pytest.fixture
def mock_container(event_service, use_cases):
    def resolve(cls):
        if cls is CountEventService:
            return event_service
        if cls not in use_cases:
            use_cases[cls] = AsyncMock(spec=cls)
        return use_cases[cls]

    container = MagicMock()
    container.get.side_effect = resolve
    return container


@pytest.fixture
def use_case(mock_container):
    """Return the mock registered for a use case class."""
    return mock_container.get


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from opentakeoff.main import app

    with ExitStack() as stack:
        for module in CONTROLLER_MODULES:
            stack.enter_context(
                patch(f"opentakeoff.api.v1.{module}.get_container", return_value=mock_container)
            )
        stack.enter_context(patch("opentakeoff.main.ensure_indexes", new=AsyncMock()))
        with TestClient(app) as c:
            yield c
