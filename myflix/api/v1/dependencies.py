"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
Provides singleton services and the bearer-token gate.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from myflix.application.services.auth_service import AuthService
from myflix.application.services.beer_service import BeerService
from myflix.application.services.movie_service import MovieService
from myflix.application.services.user_service import UserService
from myflix.di.container import get_container
from myflix.domain.models.user import User

# auto_error=False so a missing header surfaces as 401 rather than the framework's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_service() -> UserService:
    """
    Get user service instance (singleton).

    Returns:
        UserService instance
    """
    return get_container().get(UserService)


def get_movie_service() -> MovieService:
    """
    Get movie service instance (singleton).

    Returns:
        MovieService instance
    """
    return get_container().get(MovieService)


def get_auth_service() -> AuthService:
    """Get auth service instance (singleton)."""
    return get_container().get(AuthService)


def get_beer_service() -> BeerService:
    """Get beer service instance (singleton)."""
    return get_container().get(BeerService)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the bearer token on the request to its user.

    Runs before any handler logic of a protected route; an absent or invalid
    token raises AuthenticationError, which the app turns into a 401.
    """
    token = credentials.credentials if credentials else None
    return auth_service.authenticate(token)
