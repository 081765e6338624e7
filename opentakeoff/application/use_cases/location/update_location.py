# Standard library imports
import logging

# Local application imports
from ....core.exceptions import InvalidInputError, NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.models.location import LocationType
from ....domain.models.revision import ChangeType, EntityType
from ....utils.datetime_utils import utc_now
from ...dto.location_dto import LocationResponse, LocationUpdateRequest
from ...services.history_service import HistoryService
from ...services.stamp_placement_service import StampPlacementService
from .create_location import validated_bounds, validated_vertices

logger = logging.getLogger(__name__)


class UpdateLocationUseCase:
    """Use case for renaming, recoloring or reshaping a location"""

    def __init__(
        self,
        location_repository: LocationRepository,
        plan_repository: PlanRepository,
        history_service: HistoryService,
        placement_service: StampPlacementService,
    ) -> None:
        self.location_repository = location_repository
        self.plan_repository = plan_repository
        self.history_service = history_service
        self.placement_service = placement_service

    async def execute(self, location_id: str, request: LocationUpdateRequest) -> LocationResponse:
        """
        Update a location and bump its revision counter. A shape change
        re-classifies the stamps of the plan.
        """
        location = await self.location_repository.find_by_id(location_id)
        if location is None:
            raise NotFoundError(f"Location {location_id} not found")

        geometry_changed = False
        if request.bounds is not None:
            if location.type != LocationType.RECTANGLE:
                raise InvalidInputError("Only rectangle locations have bounds")
            location.bounds = validated_bounds(request.bounds.to_domain())
            geometry_changed = True
        if request.vertices is not None:
            if location.type != LocationType.POLYGON:
                raise InvalidInputError("Only polygon locations have vertices")
            location.vertices = validated_vertices([v.to_domain() for v in request.vertices])
            geometry_changed = True

        if request.name is not None:
            location.name = request.name.strip()
        if "color" in request.model_fields_set:
            location.color = request.color

        location.revision += 1
        location.updated_at = utc_now()
        await self.location_repository.save(location)

        plan = await self.plan_repository.find_by_id(location.plan_id)
        await self.history_service.record_revision(
            entity_type=EntityType.LOCATION,
            entity_id=location.id,
            change_type=ChangeType.UPDATE,
            snapshot=location.to_snapshot(),
            project_id=plan.project_id if plan else "",
            plan_id=location.plan_id,
        )

        if geometry_changed:
            await self.placement_service.reassign_for_location(location)

        logger.info(f"Updated location {location.id} to revision {location.revision}")
        return LocationResponse.from_domain(location)
