# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.stamp_repository import StampRepository
from ...dto.stamp_dto import StampResponse


class GetStampUseCase:
    """Use case for getting a stamp by ID"""

    def __init__(self, stamp_repository: StampRepository) -> None:
        self.stamp_repository = stamp_repository

    async def execute(self, stamp_id: str) -> StampResponse:
        stamp = await self.stamp_repository.find_by_id(stamp_id)
        if stamp is None:
            raise NotFoundError(f"Stamp {stamp_id} not found")
        return StampResponse.from_domain(stamp)
