# Local application imports
from ....core.exceptions import AlreadyExistsError, InvalidInputError, NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....utils.datetime_utils import utc_now
from ...dto.plan_dto import PlanResponse, PlanUpdateRequest


class UpdatePlanUseCase:
    """Use case for renaming a plan or moving it to another page number"""

    def __init__(self, plan_repository: PlanRepository) -> None:
        self.plan_repository = plan_repository

    async def execute(self, plan_id: str, request: PlanUpdateRequest) -> PlanResponse:
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        if request.name is not None:
            plan.name = request.name.strip()

        if request.page_number is not None and request.page_number != plan.page_number:
            if request.page_number > plan.page_count:
                raise InvalidInputError("Page number cannot exceed page count")
            existing = await self.plan_repository.find_by_project_page(plan.project_id, request.page_number)
            if existing is not None and existing.id != plan.id:
                raise AlreadyExistsError(f"Page {request.page_number} already exists in project")
            plan.page_number = request.page_number

        plan.updated_at = utc_now()
        saved_plan = await self.plan_repository.save(plan)
        return PlanResponse.from_domain(saved_plan)
