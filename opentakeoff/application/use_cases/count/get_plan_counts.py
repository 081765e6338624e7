# Standard library imports
from typing import Dict, List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.models.plan import Plan
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.repositories.stamp_repository import StampRepository
from ...dto.count_dto import CountItem, DeviceTotal, PlanCountsResponse

UNKNOWN_DEVICE = "Unknown Device"


class GetPlanCountsUseCase:
    """Use case for per-plan device counts, broken down by location"""

    def __init__(
        self,
        plan_repository: PlanRepository,
        device_repository: DeviceRepository,
        location_repository: LocationRepository,
        stamp_repository: StampRepository,
    ) -> None:
        self.plan_repository = plan_repository
        self.device_repository = device_repository
        self.location_repository = location_repository
        self.stamp_repository = stamp_repository

    async def execute(self, plan_id: str) -> PlanCountsResponse:
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")
        return await self.counts_for_plan(plan)

    async def counts_for_plan(self, plan: Plan) -> PlanCountsResponse:
        """
        Counts ordered by device name, then location name (unassigned first).
        `totals` sums every location per device in the same device order.
        """
        rows = await self.stamp_repository.aggregate_counts(plan.id)
        device_names: Dict[str, str] = {
            device.id: device.name for device in await self.device_repository.find_by_project(plan.project_id)
        }
        location_names: Dict[str, str] = {
            location.id: location.name for location in await self.location_repository.find_by_plan(plan.id)
        }

        counts: List[CountItem] = [
            CountItem(
                device_id=row.device_id,
                device_name=device_names.get(row.device_id, UNKNOWN_DEVICE),
                location_id=row.location_id,
                location_name=location_names.get(row.location_id) if row.location_id else None,
                total=row.total,
            )
            for row in rows
        ]
        counts.sort(
            key=lambda item: (
                item.device_name,
                item.location_name is not None,
                item.location_name or "",
            )
        )

        totals: Dict[str, DeviceTotal] = {}
        for item in counts:
            if item.device_id in totals:
                totals[item.device_id].total += item.total
            else:
                totals[item.device_id] = DeviceTotal(
                    device_id=item.device_id,
                    device_name=item.device_name,
                    total=item.total,
                )

        timestamps = [row.updated_at for row in rows if row.updated_at is not None]
        return PlanCountsResponse(
            plan_id=plan.id,
            counts=counts,
            totals=list(totals.values()),
            updated_at=max(timestamps) if timestamps else None,
        )
