# Local application imports
from ....core.exceptions import InvalidInputError
from ....domain.models.revision import EntityType
from ...dto.history_dto import HistoryActionResponse
from ...services.history_service import HistoryService


class RedoEntityUseCase:
    """Use case for re-applying the last undone change of a stamp or location"""

    def __init__(self, history_service: HistoryService) -> None:
        self.history_service = history_service

    async def execute(self, entity_type: str, entity_id: str) -> HistoryActionResponse:
        if entity_type not in EntityType.ALL:
            raise InvalidInputError(f"Unsupported entity type: {entity_type}")
        result = await self.history_service.redo(entity_id, entity_type=entity_type)
        return HistoryActionResponse.from_domain(result)
