from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_project_collection,
    get_plan_collection,
    get_device_collection,
    get_location_collection,
    get_stamp_collection,
    get_revision_collection,
    get_history_cursor_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database collections in the container.
        Repositories only ever receive collections from here.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("project_collection", get_project_collection())
        container.register_singleton("plan_collection", get_plan_collection())
        container.register_singleton("device_collection", get_device_collection())
        container.register_singleton("location_collection", get_location_collection())
        container.register_singleton("stamp_collection", get_stamp_collection())
        container.register_singleton("revision_collection", get_revision_collection())
        container.register_singleton("history_cursor_collection", get_history_cursor_collection())
