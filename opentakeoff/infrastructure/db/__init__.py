from .mongo_connection import (
    get_database,
    close_database,
    ensure_indexes,
    get_project_collection,
    get_plan_collection,
    get_device_collection,
    get_location_collection,
    get_stamp_collection,
    get_revision_collection,
    get_history_cursor_collection,
)
from .mongo_project_repository import MongoProjectRepository
from .mongo_plan_repository import MongoPlanRepository
from .mongo_device_repository import MongoDeviceRepository
from .mongo_location_repository import MongoLocationRepository
from .mongo_stamp_repository import MongoStampRepository
from .mongo_revision_repository import MongoRevisionRepository

__all__ = [
    "get_database",
    "close_database",
    "ensure_indexes",
    "get_project_collection",
    "get_plan_collection",
    "get_device_collection",
    "get_location_collection",
    "get_stamp_collection",
    "get_revision_collection",
    "get_history_cursor_collection",
    "MongoProjectRepository",
    "MongoPlanRepository",
    "MongoDeviceRepository",
    "MongoLocationRepository",
    "MongoStampRepository",
    "MongoRevisionRepository",
]
