from .create_stamp import CreateStampUseCase
from .get_stamp import GetStampUseCase
from .list_stamps import ListStampsUseCase
from .update_stamp import UpdateStampUseCase
from .delete_stamp import DeleteStampUseCase
from .list_stamp_revisions import ListStampRevisionsUseCase

__all__ = [
    "CreateStampUseCase",
    "GetStampUseCase",
    "ListStampsUseCase",
    "UpdateStampUseCase",
    "DeleteStampUseCase",
    "ListStampRevisionsUseCase",
]
