# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ...dto.plan_dto import PlanResponse


class GetPlanUseCase:
    """Use case for getting a plan by ID"""

    def __init__(self, plan_repository: PlanRepository) -> None:
        self.plan_repository = plan_repository

    async def execute(self, plan_id: str) -> PlanResponse:
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")
        return PlanResponse.from_domain(plan)
