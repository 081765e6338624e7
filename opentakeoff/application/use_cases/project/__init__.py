from .create_project import CreateProjectUseCase
from .get_project import GetProjectUseCase
from .list_projects import ListProjectsUseCase
from .update_project import UpdateProjectUseCase
from .delete_project import DeleteProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
]
