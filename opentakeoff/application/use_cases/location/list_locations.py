# Standard library imports
from typing import List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ...dto.location_dto import LocationResponse


class ListLocationsUseCase:
    """Use case for listing the locations of a plan"""

    def __init__(self, location_repository: LocationRepository, plan_repository: PlanRepository) -> None:
        self.location_repository = location_repository
        self.plan_repository = plan_repository

    async def execute(self, plan_id: str) -> List[LocationResponse]:
        if await self.plan_repository.find_by_id(plan_id) is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        locations = await self.location_repository.find_by_plan(plan_id)
        return [LocationResponse.from_domain(location) for location in locations]
