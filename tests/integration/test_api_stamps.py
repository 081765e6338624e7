"""
Integration tests for stamp endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from datetime import datetime, timezone

import pytest

pytestmark = pytest.mark.integration

from opentakeoff.application.dto.common_dto import PaginationInfo
from opentakeoff.application.dto.stamp_dto import PositionSchema, StampListResponse, StampResponse
from opentakeoff.application.use_cases.stamp import (
    CreateStampUseCase,
    DeleteStampUseCase,
    GetStampUseCase,
    ListStampsUseCase,
    UpdateStampUseCase,
)
from opentakeoff.core.exceptions import ForeignKeyViolationError, NotFoundError, OptimisticLockError

T0 = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def _stamp(stamp_id: str = "stamp-1", location_id=None) -> StampResponse:
    return StampResponse(
        id=stamp_id,
        plan_id="plan-1",
        device_id="device-1",
        location_id=location_id,
        position=PositionSchema(x=10, y=20),
        created_at=T0,
        updated_at=T0,
    )


class TestStampAPI:
    """Tests for /api/v1 stamp endpoints"""

    def test_create_returns_201(self, client, use_case):
        create = use_case(CreateStampUseCase)
        create.execute.return_value = _stamp(location_id="room-1")

        response = client.post(
            "/api/v1/plans/plan-1/stamps",
            json={"device_id": "device-1", "position": {"x": 10, "y": 20}},
        )

        assert response.status_code == 201
        assert response.json()["location_id"] == "room-1"
        plan_id, request = create.execute.call_args.args
        assert plan_id == "plan-1"
        assert request.position.x == 10

    def test_create_without_position_is_rejected(self, client, use_case):
        response = client.post("/api/v1/plans/plan-1/stamps", json={"device_id": "device-1"})
        assert response.status_code == 422
        use_case(CreateStampUseCase).execute.assert_not_called()

    def test_create_with_foreign_device_returns_400(self, client, use_case):
        use_case(CreateStampUseCase).execute.side_effect = ForeignKeyViolationError(
            "Device device-9 not found in project", details={"device_id": "device-9"}
        )
        response = client.post(
            "/api/v1/plans/plan-1/stamps",
            json={"device_id": "device-9", "position": {"x": 1, "y": 1}},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "FOREIGN_KEY_VIOLATION"

    def test_list_sets_link_header(self, client, use_case):
        use_case(ListStampsUseCase).execute.return_value = StampListResponse(
            items=[_stamp("a"), _stamp("b")],
            pagination=PaginationInfo(count=2, next_cursor="b", has_more=True),
        )

        response = client.get("/api/v1/plans/plan-1/stamps", params={"limit": 2})

        assert response.status_code == 200
        assert response.json()["pagination"]["has_more"] is True
        assert response.headers["link"] == '</api/v1/plans/plan-1/stamps?limit=2&cursor=b>; rel="next"'

    def test_last_page_has_no_link(self, client, use_case):
        use_case(ListStampsUseCase).execute.return_value = StampListResponse(
            items=[_stamp()],
            pagination=PaginationInfo(count=1),
        )
        response = client.get("/api/v1/plans/plan-1/stamps")
        assert "link" not in response.headers

    def test_stale_update_returns_409(self, client, use_case):
        use_case(UpdateStampUseCase).execute.side_effect = OptimisticLockError(
            details={"stamp_id": "stamp-1"}
        )
        response = client.patch(
            "/api/v1/stamps/stamp-1",
            json={"position": {"x": 1, "y": 1}, "updated_at": "2025-01-15T11:00:00Z"},
        )
        assert response.status_code == 409
        assert response.json()["detail"]["details"] == {"stamp_id": "stamp-1"}

    def test_get_missing_returns_404(self, client, use_case):
        use_case(GetStampUseCase).execute.side_effect = NotFoundError("Stamp nope not found")
        response = client.get("/api/v1/stamps/nope")
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "Stamp nope not found"

    def test_delete(self, client, use_case):
        response = client.delete("/api/v1/stamps/stamp-1")
        assert response.status_code == 200
        assert response.json() == {"id": "stamp-1", "deleted": True}
        use_case(DeleteStampUseCase).execute.assert_awaited_once_with("stamp-1")
