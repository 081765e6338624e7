# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.location_repository import LocationRepository
from ...dto.location_dto import LocationResponse


class GetLocationUseCase:
    """Use case for getting a location by ID"""

    def __init__(self, location_repository: LocationRepository) -> None:
        self.location_repository = location_repository

    async def execute(self, location_id: str) -> LocationResponse:
        location = await self.location_repository.find_by_id(location_id)
        if location is None:
            raise NotFoundError(f"Location {location_id} not found")
        return LocationResponse.from_domain(location)
