from .get_project_history import GetProjectHistoryUseCase
from .list_entity_history import ListEntityHistoryUseCase
from .undo_entity import UndoEntityUseCase
from .redo_entity import RedoEntityUseCase
from .undo_project import UndoProjectUseCase
from .redo_project import RedoProjectUseCase
from .prune_history import PruneHistoryUseCase

__all__ = [
    "GetProjectHistoryUseCase",
    "ListEntityHistoryUseCase",
    "UndoEntityUseCase",
    "RedoEntityUseCase",
    "UndoProjectUseCase",
    "RedoProjectUseCase",
    "PruneHistoryUseCase",
]
