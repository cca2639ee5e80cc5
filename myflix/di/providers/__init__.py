"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .user_provider import UserProvider
from .movie_provider import MovieProvider
from .auth_provider import AuthProvider
from .beer_provider import BeerProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "UserProvider",
    "MovieProvider",
    "AuthProvider",
    "BeerProvider",
]
