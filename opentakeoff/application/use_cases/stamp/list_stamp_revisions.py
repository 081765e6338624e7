# Standard library imports
from typing import List

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.revision_repository import RevisionRepository
from ....domain.repositories.stamp_repository import StampRepository
from ...dto.history_dto import HistoryEntryResponse


class ListStampRevisionsUseCase:
    """Use case for listing the revisions of a stamp (also after it was deleted)"""

    def __init__(self, revision_repository: RevisionRepository, stamp_repository: StampRepository) -> None:
        self.revision_repository = revision_repository
        self.stamp_repository = stamp_repository

    async def execute(self, stamp_id: str) -> List[HistoryEntryResponse]:
        revisions = await self.revision_repository.list_by_entity(stamp_id)
        if not revisions and await self.stamp_repository.find_by_id(stamp_id) is None:
            raise NotFoundError(f"Stamp {stamp_id} not found")
        return [HistoryEntryResponse.from_domain(revision) for revision in revisions]
