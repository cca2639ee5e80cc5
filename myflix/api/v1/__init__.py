"""
API v1 Package
===============

Version 1 API controllers.
"""
from .auth_controller import router as auth_router
from .movie_controller import router as movie_router
from .user_controller import router as user_router
from .beer_controller import router as beer_router
from .brewery_controller import router as brewery_router

__all__ = ["auth_router", "movie_router", "user_router", "beer_router", "brewery_router"]
