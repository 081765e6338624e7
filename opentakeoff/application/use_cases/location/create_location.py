# Standard library imports
import logging
from typing import List, Optional
from uuid import uuid4

# Local application imports
from ....core.exceptions import InvalidInputError, NotFoundError
from ....domain.repositories.plan_repository import PlanRepository
from ....domain.repositories.location_repository import LocationRepository
from ....domain.models.location import Location, LocationType, RectangleBounds, Vertex
from ....domain.models.revision import ChangeType, EntityType
from ....utils.datetime_utils import utc_now
from ....utils.geometry import auto_close_polygon, validate_polygon_vertices, validate_rectangle_bounds
from ...dto.location_dto import LocationCreateRequest, LocationResponse
from ...services.history_service import HistoryService
from ...services.stamp_placement_service import StampPlacementService

logger = logging.getLogger(__name__)


def validated_bounds(bounds: Optional[RectangleBounds]) -> RectangleBounds:
    if bounds is None:
        raise InvalidInputError("Rectangle locations require bounds")
    error = validate_rectangle_bounds(bounds)
    if error:
        raise InvalidInputError(error)
    return bounds


def validated_vertices(vertices: Optional[List[Vertex]]) -> List[Vertex]:
    if not vertices or len(vertices) < 3:
        raise InvalidInputError("Polygon must have at least 3 vertices")
    closed = auto_close_polygon(vertices)
    error = validate_polygon_vertices(closed)
    if error:
        raise InvalidInputError(error)
    return closed


class CreateLocationUseCase:
    """Use case for drawing a rectangle or polygon location on a plan"""

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

    async def execute(self, plan_id: str, request: LocationCreateRequest) -> LocationResponse:
        """
        Create a location, record its first revision and assign the stamps it contains.

        Raises:
            NotFoundError: If the plan does not exist
            InvalidInputError: If the shape is degenerate
        """
        plan = await self.plan_repository.find_by_id(plan_id)
        if plan is None:
            raise NotFoundError(f"Plan {plan_id} not found")

        bounds = None
        vertices: List[Vertex] = []
        if request.type == LocationType.RECTANGLE:
            bounds = validated_bounds(request.bounds.to_domain() if request.bounds else None)
        else:
            vertices = validated_vertices([v.to_domain() for v in request.vertices or []])

        now = utc_now()
        location = Location(
            id=str(uuid4()),
            plan_id=plan_id,
            name=request.name.strip(),
            type=request.type,
            bounds=bounds,
            vertices=vertices,
            color=request.color,
            revision=1,
            created_at=now,
            updated_at=now,
        )
        await self.location_repository.save(location)
        await self.history_service.record_revision(
            entity_type=EntityType.LOCATION,
            entity_id=location.id,
            change_type=ChangeType.CREATE,
            snapshot=location.to_snapshot(),
            project_id=plan.project_id,
            plan_id=plan_id,
        )
        await self.placement_service.reassign_for_location(location)

        logger.info(f"Created {location.type} location {location.id} on plan {plan_id}")
        return LocationResponse.from_domain(location)
