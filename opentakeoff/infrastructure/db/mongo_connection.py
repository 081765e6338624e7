# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import (
    DeviceFields,
    HistoryCursorFields,
    LocationFields,
    PlanFields,
    RevisionFields,
    StampFields,
)

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client if one was opened"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_project_collection() -> AsyncIOMotorCollection:
    """
    Get projects collection from MongoDB

    Returns:
        MongoDB collection for projects
    """
    return get_database()["projects"]


def get_plan_collection() -> AsyncIOMotorCollection:
    """
    Get plans collection from MongoDB

    Returns:
        MongoDB collection for plans
    """
    return get_database()["plans"]


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB

    Returns:
        MongoDB collection for devices
    """
    return get_database()["devices"]


def get_location_collection() -> AsyncIOMotorCollection:
    """
    Get locations collection from MongoDB

    Returns:
        MongoDB collection for locations
    """
    return get_database()["locations"]


def get_stamp_collection() -> AsyncIOMotorCollection:
    """
    Get stamps collection from MongoDB

    Returns:
        MongoDB collection for stamps
    """
    return get_database()["stamps"]


def get_revision_collection() -> AsyncIOMotorCollection:
    """
    Get revisions collection from MongoDB

    Returns:
        MongoDB collection for revision records
    """
    return get_database()["revisions"]


def get_history_cursor_collection() -> AsyncIOMotorCollection:
    """
    Get history cursors collection from MongoDB

    Returns:
        MongoDB collection for per-entity history cursors
    """
    return get_database()["history_cursors"]


async def ensure_indexes() -> None:
    """Create the indexes backing lookups and uniqueness constraints"""
    await get_plan_collection().create_index(
        [(PlanFields.PROJECT_ID, ASCENDING), (PlanFields.PAGE_NUMBER, ASCENDING)],
        unique=True,
        name="plan_project_page_unique",
    )
    await get_device_collection().create_index(
        [(DeviceFields.PROJECT_ID, ASCENDING), (DeviceFields.NAME, ASCENDING)],
        unique=True,
        name="device_project_name_unique",
    )
    await get_location_collection().create_index(
        [(LocationFields.PLAN_ID, ASCENDING), (LocationFields.CREATED_AT, ASCENDING)],
        name="location_plan",
    )

    stamps = get_stamp_collection()
    await stamps.create_index(
        [
            (StampFields.PLAN_ID, ASCENDING),
            (StampFields.DEVICE_ID, ASCENDING),
            (StampFields.LOCATION_ID, ASCENDING),
        ],
        name="stamp_count_key",
    )
    await stamps.create_index([(StampFields.DEVICE_ID, ASCENDING)], name="stamp_device")
    await stamps.create_index([(StampFields.LOCATION_ID, ASCENDING)], name="stamp_location")

    revisions = get_revision_collection()
    await revisions.create_index(
        [(RevisionFields.ENTITY_ID, ASCENDING), (RevisionFields.SEQUENCE, ASCENDING)],
        unique=True,
        name="revision_entity_sequence_unique",
    )
    await revisions.create_index(
        [(RevisionFields.PROJECT_ID, ASCENDING), (RevisionFields.CREATED_AT, DESCENDING)],
        name="revision_project_created",
    )
    await revisions.create_index(
        [(RevisionFields.PLAN_ID, ASCENDING), (RevisionFields.CREATED_AT, ASCENDING)],
        name="revision_plan_created",
    )
    await revisions.create_index(
        [(RevisionFields.SNAPSHOT_DEVICE_ID, ASCENDING)],
        name="revision_snapshot_device",
        sparse=True,
    )
    await get_history_cursor_collection().create_index(
        [(HistoryCursorFields.PROJECT_ID, ASCENDING), (HistoryCursorFields.LAST_ACTION, ASCENDING)],
        name="cursor_project_action",
    )
    logger.info("MongoDB indexes ensured")
