# Local application imports
from ....core.exceptions import AlreadyExistsError, NotFoundError
from ....domain.repositories.device_repository import DeviceRepository
from ....utils.datetime_utils import utc_now
from ...dto.device_dto import DeviceResponse, DeviceUpdateRequest


class UpdateDeviceUseCase:
    """Use case for updating a device"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise NotFoundError(f"Device {device_id} not found")

        if request.name is not None:
            name = request.name.strip()
            existing = await self.device_repository.find_by_project_name(device.project_id, name)
            if existing is not None and existing.id != device.id:
                raise AlreadyExistsError(f"Device '{name}' already exists in project")
            device.name = name

        fields = request.model_fields_set
        if "description" in fields:
            device.description = request.description
        if "color" in fields:
            device.color = request.color
        if "icon_key" in fields:
            device.icon_key = request.icon_key

        device.updated_at = utc_now()
        saved_device = await self.device_repository.save(device)
        return DeviceResponse.from_domain(saved_device)
