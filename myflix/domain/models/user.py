"""
User Model
==========

Domain model representing a registered user.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import date
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field


class MovieList(str, Enum):
    """Per-user movie lists that hold movie ids with set semantics."""
    FAVORITES = "favorite_movies"
    TO_WATCH = "to_watch"


@dataclass
class User:
    """
    User domain model.

    `password` always holds the bcrypt hash, never the submitted plaintext.
    Movie lists hold movie ids and never contain duplicates.
    """
    id: str
    username: str
    password: str
    email: str
    birthday: Optional[date] = None
    favorite_movies: List[str] = field(default_factory=list)
    to_watch: List[str] = field(default_factory=list)

    def movies_in(self, movie_list: MovieList) -> List[str]:
        """Return the ids held in the given list."""
        return getattr(self, movie_list.value)

    def has_movie(self, movie_list: MovieList, movie_id: str) -> bool:
        return movie_id in self.movies_in(movie_list)
