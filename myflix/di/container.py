# Standard library imports
from typing import Optional

# Local application imports
from myflix.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    SecurityProvider,
    UserProvider,
    MovieProvider,
    AuthProvider,
    BeerProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Security (SecurityProvider) - password hasher, token service
    4. Services (User, Movie, Auth, Beer providers) - depend on repositories and security
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → security → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        SecurityProvider.register(self)

        UserProvider.register(self)
        MovieProvider.register(self)
        AuthProvider.register(self)
        BeerProvider.register(self)


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
    """Drop the global container; the next get_container() builds a fresh one."""
    global _container
    _container = None
