from typing import TYPE_CHECKING
from ...domain.repositories.movie_repository import MovieRepository
from ...application.services.movie_service import MovieService

if TYPE_CHECKING:
    from ..container import DIContainer


class MovieProvider:
    """Movie service provider - registers movie-related services"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        container.register_singleton(
            MovieService,
            MovieService(movie_repository=container.get(MovieRepository))
        )
