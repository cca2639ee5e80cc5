"""
In-Memory Movie Repository
==========================

MovieRepository kept in a process-local dict, used by tests and by
STORAGE_BACKEND=memory.
"""
import copy
import threading
from typing import Dict, List, Optional

from myflix.domain.models.movie import Movie
from myflix.domain.repositories.movie_repository import MovieRepository


class InMemoryMovieRepository(MovieRepository):
    """In-memory implementation of MovieRepository, in insertion order."""

    def __init__(self):
        self._movies: Dict[str, Movie] = {}
        self._lock = threading.Lock()

    def _first(self, predicate) -> Optional[Movie]:
        with self._lock:
            for movie in self._movies.values():
                if predicate(movie):
                    return copy.deepcopy(movie)
        return None

    def create(self, movie: Movie) -> Movie:
        with self._lock:
            self._movies[movie.id] = copy.deepcopy(movie)
        return movie

    def find_all(self) -> List[Movie]:
        with self._lock:
            return [copy.deepcopy(m) for m in self._movies.values()]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            movie = self._movies.get(movie_id)
            return copy.deepcopy(movie) if movie else None

    def find_by_title(self, title: str) -> Optional[Movie]:
        return self._first(lambda m: m.title == title)

    def find_by_genre_name(self, genre_name: str) -> Optional[Movie]:
        return self._first(lambda m: m.genre is not None and m.genre.name == genre_name)

    def find_by_director_name(self, director_name: str) -> Optional[Movie]:
        return self._first(lambda m: m.director is not None and m.director.name == director_name)

    def find_by_actor(self, actor: str) -> List[Movie]:
        with self._lock:
            return [copy.deepcopy(m) for m in self._movies.values() if actor in m.actors]

    def exists(self, movie_id: str) -> bool:
        with self._lock:
            return movie_id in self._movies

    def delete(self, movie_id: str) -> bool:
        with self._lock:
            return self._movies.pop(movie_id, None) is not None
