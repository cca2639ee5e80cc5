"""
Update Movie List Use Case
==========================

Adds or removes one movie id in a user's favorites or to-watch list.

The change is a single set-membership update on the user document, so
concurrent changes to the same user for different movies never overwrite
each other and callers never resend the whole list.
"""
import logging

from myflix.domain.exceptions import NotFoundError
from myflix.domain.models.user import User, MovieList
from myflix.domain.repositories.movie_repository import MovieRepository
from myflix.domain.repositories.user_repository import UserRepository
from myflix.utils.ids import require_valid_id

logger = logging.getLogger(__name__)


class UpdateMovieListUseCase:
    """Use case for set-membership changes on a user's movie lists."""

    def __init__(self, user_repository: UserRepository, movie_repository: MovieRepository):
        """
        Initialize use case with repositories.

        Args:
            user_repository: Repository holding the lists
            movie_repository: Repository used to check that an added movie exists
        """
        self._users = user_repository
        self._movies = movie_repository

    def add(self, username: str, movie_list: MovieList, movie_id: str) -> User:
        """
        Add `movie_id` to the list if absent. Adding a present id changes nothing.

        Raises:
            InvalidIdentifierError: If `movie_id` is malformed
            NotFoundError: If the movie or the user does not exist
        """
        movie_id = require_valid_id(movie_id, "movie")
        if not self._movies.exists(movie_id):
            raise NotFoundError("Movie", movie_id)

        user = self._users.add_to_list(username, movie_list, movie_id)
        if user is None:
            raise NotFoundError("User", username)

        logger.info(f"Movie {movie_id} in {movie_list.value} of {username}")
        return user

    def remove(self, username: str, movie_list: MovieList, movie_id: str) -> User:
        """
        Remove `movie_id` from the list. Removing an absent id returns the user unchanged.

        The movie collection is not consulted, so references to deleted movies
        can still be removed.

        Raises:
            InvalidIdentifierError: If `movie_id` is malformed
            NotFoundError: If the user does not exist
        """
        movie_id = require_valid_id(movie_id, "movie")

        user = self._users.remove_from_list(username, movie_list, movie_id)
        if user is None:
            raise NotFoundError("User", username)

        logger.info(f"Movie {movie_id} removed from {movie_list.value} of {username}")
        return user
