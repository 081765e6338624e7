# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    CountProvider,
    DatabaseProvider,
    EventsProvider,
    HistoryProvider,
    LocationProvider,
    ProjectProvider,
    RepositoryProvider,
    StampProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depend on collections
    3. Event bus and shared services (EventsProvider) - depend on repositories
    4. Use cases - depend on repositories and services
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        EventsProvider.register(self)

        ProjectProvider.register(self)
        LocationProvider.register(self)
        StampProvider.register(self)
        HistoryProvider.register(self)
        CountProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next `get_container` builds a fresh one"""
    global _container
    _container = None
