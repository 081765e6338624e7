from .create_location import CreateLocationUseCase
from .get_location import GetLocationUseCase
from .list_locations import ListLocationsUseCase
from .update_location import UpdateLocationUseCase
from .delete_location import DeleteLocationUseCase

__all__ = [
    "CreateLocationUseCase",
    "GetLocationUseCase",
    "ListLocationsUseCase",
    "UpdateLocationUseCase",
    "DeleteLocationUseCase",
]
