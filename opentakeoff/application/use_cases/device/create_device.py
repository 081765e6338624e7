# Standard library imports
import logging
from uuid import uuid4

# Local application imports
from ....core.exceptions import AlreadyExistsError, ForeignKeyViolationError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device
from ....utils.datetime_utils import utc_now
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for defining a countable device in a project"""

    def __init__(self, device_repository: DeviceRepository, project_repository: ProjectRepository) -> None:
        self.device_repository = device_repository
        self.project_repository = project_repository

    async def execute(self, project_id: str, request: DeviceCreateRequest) -> DeviceResponse:
        """
        Create a device

        Raises:
            ForeignKeyViolationError: If the project does not exist
            AlreadyExistsError: If the project already has a device with this name
        """
        if await self.project_repository.find_by_id(project_id) is None:
            raise ForeignKeyViolationError(f"Project {project_id} not found")

        name = request.name.strip()
        if await self.device_repository.find_by_project_name(project_id, name):
            raise AlreadyExistsError(f"Device '{name}' already exists in project")

        now = utc_now()
        device = Device(
            id=str(uuid4()),
            project_id=project_id,
            name=name,
            description=request.description,
            color=request.color,
            icon_key=request.icon_key,
            created_at=now,
            updated_at=now,
        )
        saved_device = await self.device_repository.save(device)
        logger.info(f"Created device {saved_device.id} ({saved_device.name}) in project {project_id}")
        return DeviceResponse.from_domain(saved_device)
