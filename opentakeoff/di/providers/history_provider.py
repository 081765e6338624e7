from typing import TYPE_CHECKING
from ...domain.repositories.project_repository import ProjectRepository
from ...application.services.history_service import HistoryService
from ...application.use_cases.history import (
    GetProjectHistoryUseCase,
    ListEntityHistoryUseCase,
    UndoEntityUseCase,
    RedoEntityUseCase,
    UndoProjectUseCase,
    RedoProjectUseCase,
    PruneHistoryUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class HistoryProvider:
    """History use case provider - listing, undo/redo and pruning"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetProjectHistoryUseCase,
            lambda: GetProjectHistoryUseCase(
                history_service=container.get(HistoryService),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            ListEntityHistoryUseCase,
            lambda: ListEntityHistoryUseCase(history_service=container.get(HistoryService)),
        )
        container.register_factory(
            UndoEntityUseCase,
            lambda: UndoEntityUseCase(history_service=container.get(HistoryService)),
        )
        container.register_factory(
            RedoEntityUseCase,
            lambda: RedoEntityUseCase(history_service=container.get(HistoryService)),
        )
        container.register_factory(
            UndoProjectUseCase,
            lambda: UndoProjectUseCase(
                history_service=container.get(HistoryService),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            RedoProjectUseCase,
            lambda: RedoProjectUseCase(
                history_service=container.get(HistoryService),
                project_repository=container.get(ProjectRepository),
            ),
        )
        container.register_factory(
            PruneHistoryUseCase,
            lambda: PruneHistoryUseCase(
                history_service=container.get(HistoryService),
                project_repository=container.get(ProjectRepository),
            ),
        )
