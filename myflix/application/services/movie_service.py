"""
Movie Service
=============

Read access to the movie catalog.
"""
from typing import List, Optional

from myflix.domain.exceptions import NotFoundError
from myflix.domain.models.movie import Movie, Director
from myflix.domain.repositories.movie_repository import MovieRepository


class MovieService:
    """Application service for movie lookups."""

    def __init__(self, movie_repository: MovieRepository):
        self._repository = movie_repository

    def list_movies(self) -> List[Movie]:
        return self._repository.find_all()

    def get_movie_by_title(self, title: str) -> Movie:
        movie = self._repository.find_by_title(title)
        if not movie:
            raise NotFoundError("Movie", title)
        return movie

    def get_genre_description(self, genre_name: str) -> Optional[str]:
        """Return the description of the named genre, taken from the first movie carrying it."""
        movie = self._repository.find_by_genre_name(genre_name)
        if not movie or not movie.genre:
            raise NotFoundError("Genre", genre_name)
        return movie.genre.description

    def get_director(self, director_name: str) -> Director:
        movie = self._repository.find_by_director_name(director_name)
        if not movie or not movie.director:
            raise NotFoundError("Director", director_name)
        return movie.director

    def list_movies_by_actor(self, actor: str) -> List[Movie]:
        """Movies featuring the actor; empty when there are none."""
        return self._repository.find_by_actor(actor)
