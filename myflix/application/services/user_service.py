"""
User Service
============

Application service that coordinates user-related operations.
This service orchestrates multiple use cases.
"""
from typing import Any, List

from myflix.application.use_cases.membership.update_movie_list import UpdateMovieListUseCase
from myflix.application.use_cases.user.delete_user import DeleteUserUseCase
from myflix.application.use_cases.user.register_user import RegisterUserUseCase
from myflix.application.use_cases.user.update_user import UpdateUserUseCase
from myflix.application.validators.user_validator import UserValidator
from myflix.domain.exceptions import NotFoundError
from myflix.domain.models.user import User, MovieList
from myflix.domain.repositories.movie_repository import MovieRepository
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.password_hasher import PasswordHasher


class UserService:
    """
    Application service for user operations.

    This service coordinates multiple use cases and provides
    a high-level interface for user management.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        movie_repository: MovieRepository,
        password_hasher: PasswordHasher,
        validator: UserValidator,
        unique_email: bool = False,
    ):
        """
        Initialize service with repositories and collaborators.

        Args:
            user_repository: Repository for user persistence
            movie_repository: Repository used to check movie references
            password_hasher: One-way hasher for stored passwords
            validator: Field rules for registration and update
            unique_email: Reject emails already used by another user
        """
        self._repository = user_repository
        self._register_use_case = RegisterUserUseCase(
            user_repository, password_hasher, validator, unique_email
        )
        self._update_use_case = UpdateUserUseCase(
            user_repository, password_hasher, validator, unique_email
        )
        self._delete_use_case = DeleteUserUseCase(user_repository)
        self._movie_list_use_case = UpdateMovieListUseCase(user_repository, movie_repository)

    def register_user(
        self,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> User:
        """
        Register a new user.

        Returns:
            Created user entity
        """
        return self._register_use_case.execute(
            username=username,
            password=password,
            email=email,
            birthday=birthday,
        )

    def update_user(
        self,
        current_username: str,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> User:
        """
        Replace a user's profile fields.

        Returns:
            Updated user entity
        """
        return self._update_use_case.execute(
            current_username=current_username,
            username=username,
            password=password,
            email=email,
            birthday=birthday,
        )

    def delete_user(self, username: str) -> None:
        """Deregister a user."""
        self._delete_use_case.execute(username)

    def list_users(self) -> List[User]:
        """List every user."""
        return self._repository.find_all()

    def get_user(self, username: str) -> User:
        """
        Get a user by username.

        Raises:
            NotFoundError: If no such user exists
        """
        user = self._repository.find_by_username(username)
        if not user:
            raise NotFoundError("User", username)
        return user

    def add_movie(self, username: str, movie_list: MovieList, movie_id: str) -> User:
        """Add a movie to the user's favorites or to-watch list."""
        return self._movie_list_use_case.add(username, movie_list, movie_id)

    def remove_movie(self, username: str, movie_list: MovieList, movie_id: str) -> User:
        """Remove a movie from the user's favorites or to-watch list."""
        return self._movie_list_use_case.remove(username, movie_list, movie_id)
