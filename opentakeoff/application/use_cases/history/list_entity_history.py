# Local application imports
from ....core.exceptions import InvalidInputError
from ....domain.models.revision import EntityType
from ...dto.history_dto import HistoryEntryResponse, HistoryListResponse
from ...services.history_service import HistoryService


class ListEntityHistoryUseCase:
    """Use case for listing the full history of one stamp or location (oldest first)"""

    def __init__(self, history_service: HistoryService) -> None:
        self.history_service = history_service

    async def execute(self, entity_type: str, entity_id: str) -> HistoryListResponse:
        if entity_type not in EntityType.ALL:
            raise InvalidInputError(f"Unsupported entity type: {entity_type}")

        items = [
            HistoryEntryResponse.from_domain(revision)
            async for revision in self.history_service.list_history(entity_id=entity_id)
            if revision.entity_type == entity_type
        ]
        return HistoryListResponse(items=items, count=len(items))
