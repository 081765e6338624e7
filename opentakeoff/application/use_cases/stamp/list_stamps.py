# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.stamp_repository import StampRepository
from ....utils.pagination import build_page, clamp_limit
from ...dto.common_dto import PaginationInfo
from ...dto.stamp_dto import StampListResponse, StampResponse


class ListStampsUseCase:
    """Use case for listing the stamps of a plan, paginated by ID"""

    def __init__(self, stamp_repository: StampRepository, plan_repository: PlanRepository) -> None:
        self.stamp_repository = stamp_repository
        self.plan_repository = plan_repository

    async def execute(
        self,
        plan_id: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> StampListResponse:
        if await self.plan_repository.find_by_id(plan_id) is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        page_size = clamp_limit(limit)
        fetched = await self.stamp_repository.list_by_plan(plan_id, limit=page_size + 1, after_id=cursor)
        page = build_page(fetched, page_size, key=lambda stamp: stamp.id)
        return StampListResponse(
            items=[StampResponse.from_domain(stamp) for stamp in page.items],
            pagination=PaginationInfo(count=page.count, next_cursor=page.next_cursor, has_more=page.has_more),
        )
