from .create_plan import CreatePlanUseCase
from .get_plan import GetPlanUseCase
from .list_plans import ListPlansUseCase
from .update_plan import UpdatePlanUseCase
from .delete_plan import DeletePlanUseCase

__all__ = [
    "CreatePlanUseCase",
    "GetPlanUseCase",
    "ListPlansUseCase",
    "UpdatePlanUseCase",
    "DeletePlanUseCase",
]
