from typing import TYPE_CHECKING
from ...domain.repositories.project_repository import ProjectRepository
from ...domain.repositories.plan_repository import PlanRepository
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.location_repository import LocationRepository
from ...domain.repositories.stamp_repository import StampRepository
from ...domain.repositories.revision_repository import RevisionRepository
from ...infrastructure.db.mongo_project_repository import MongoProjectRepository
from ...infrastructure.db.mongo_plan_repository import MongoPlanRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.db.mongo_location_repository import MongoLocationRepository
from ...infrastructure.db.mongo_stamp_repository import MongoStampRepository
from ...infrastructure.db.mongo_revision_repository import MongoRevisionRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            ProjectRepository,
            MongoProjectRepository(project_collection=container.get("project_collection")),
        )

        container.register_singleton(
            PlanRepository,
            MongoPlanRepository(plan_collection=container.get("plan_collection")),
        )

        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=container.get("device_collection")),
        )

        container.register_singleton(
            LocationRepository,
            MongoLocationRepository(location_collection=container.get("location_collection")),
        )

        container.register_singleton(
            StampRepository,
            MongoStampRepository(stamp_collection=container.get("stamp_collection")),
        )

        container.register_singleton(
            RevisionRepository,
            MongoRevisionRepository(
                revision_collection=container.get("revision_collection"),
                cursor_collection=container.get("history_cursor_collection"),
            ),
        )
