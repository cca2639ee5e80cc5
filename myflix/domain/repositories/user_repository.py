"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from myflix.domain.models.user import User, MovieList


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    This interface defines the contract for user data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: User entity to insert (id already assigned)

        Returns:
            Created user entity

        Raises:
            ConflictError: If the username is already taken
        """
        pass

    @abstractmethod
    def update(self, username: str, user: User) -> Optional[User]:
        """
        Replace the profile fields of the user currently named `username`.

        Movie lists are left untouched.

        Args:
            username: Current username of the user to update
            user: Entity carrying the new username, password hash, email, birthday

        Returns:
            Updated user entity, or None if no user has that username

        Raises:
            ConflictError: If the new username belongs to another user
        """
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """
        Find every user.

        Returns:
            List of user entities
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by id.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by username.

        Args:
            username: Unique username

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        pass

    @abstractmethod
    def delete(self, username: str) -> bool:
        """
        Remove a user.

        Args:
            username: Username of the user to remove

        Returns:
            True if the user was found and removed, False otherwise
        """
        pass

    @abstractmethod
    def add_to_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        """
        Atomically add a movie id to one of the user's lists if absent.

        Args:
            username: Username of the user to update
            movie_list: Which list to update
            movie_id: Movie identifier to add

        Returns:
            Updated user entity, or None if no user has that username
        """
        pass

    @abstractmethod
    def remove_from_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        """
        Atomically remove a movie id from one of the user's lists.

        Removing an id that is not in the list leaves the user unchanged.

        Args:
            username: Username of the user to update
            movie_list: Which list to update
            movie_id: Movie identifier to remove

        Returns:
            Updated user entity, or None if no user has that username
        """
        pass
