# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


class GetDeviceUseCase:
    """Use case for getting a device by ID"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceResponse:
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise NotFoundError(f"Device {device_id} not found")
        return DeviceResponse.from_domain(device)
