"""
Delete User Use Case
====================
"""
import logging

from myflix.domain.exceptions import NotFoundError
from myflix.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deregistering a user."""

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository

    def execute(self, username: str) -> None:
        """
        Remove the user named `username`.

        Raises:
            NotFoundError: If no such user exists
        """
        if not self._repository.delete(username):
            raise NotFoundError("User", username)
        logger.info(f"User {username} deleted")
