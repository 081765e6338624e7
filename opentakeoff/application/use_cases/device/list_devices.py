# Standard library imports
from typing import List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.project_repository import ProjectRepository
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


class ListDevicesUseCase:
    """Use case for listing the devices of a project"""

    def __init__(self, device_repository: DeviceRepository, project_repository: ProjectRepository) -> None:
        self.device_repository = device_repository
        self.project_repository = project_repository

    async def execute(self, project_id: str) -> List[DeviceResponse]:
        if await self.project_repository.find_by_id(project_id) is None:
            raise NotFoundError(f"Project {project_id} not found")

        devices = await self.device_repository.find_by_project(project_id)
        return [DeviceResponse.from_domain(device) for device in devices]
