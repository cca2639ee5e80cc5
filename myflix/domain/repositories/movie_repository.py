"""
Movie Repository Interface
==========================

Abstract interface for movie data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from myflix.domain.models.movie import Movie


class MovieRepository(ABC):
    """Abstract repository for movie persistence operations."""

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Insert a new movie and return it."""
        pass

    @abstractmethod
    def find_all(self) -> List[Movie]:
        """Find every movie."""
        pass

    @abstractmethod
    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        """Find a movie by id."""
        pass

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[Movie]:
        """Find the first movie with an exactly matching title."""
        pass

    @abstractmethod
    def find_by_genre_name(self, genre_name: str) -> Optional[Movie]:
        """Find the first movie whose genre has the given name."""
        pass

    @abstractmethod
    def find_by_director_name(self, director_name: str) -> Optional[Movie]:
        """Find the first movie directed by the named director."""
        pass

    @abstractmethod
    def find_by_actor(self, actor: str) -> List[Movie]:
        """Find every movie listing the actor."""
        pass

    @abstractmethod
    def exists(self, movie_id: str) -> bool:
        """Check if a movie exists."""
        pass

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """
        Remove a movie.

        References held in user lists are not cleaned up.

        Returns:
            True if the movie was found and removed, False otherwise
        """
        pass
