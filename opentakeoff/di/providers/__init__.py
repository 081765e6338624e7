from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .events_provider import EventsProvider
from .project_provider import ProjectProvider
from .location_provider import LocationProvider
from .stamp_provider import StampProvider
from .history_provider import HistoryProvider
from .count_provider import CountProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "EventsProvider",
    "ProjectProvider",
    "LocationProvider",
    "StampProvider",
    "HistoryProvider",
    "CountProvider",
]
