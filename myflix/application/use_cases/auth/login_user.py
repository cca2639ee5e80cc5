"""
Login User Use Case
===================

Exchanges a username and password for a signed bearer token.
"""
import logging
from typing import Optional, Tuple

from myflix.domain.exceptions import AuthenticationError
from myflix.domain.models.user import User
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.password_hasher import PasswordHasher
from myflix.infrastructure.security.token_service import TokenService

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for verifying credentials and issuing an access token."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._repository = user_repository
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, username: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Verify credentials and issue a token.

        Returns:
            (user, token) pair

        Raises:
            AuthenticationError: If the username is unknown or the password is wrong
        """
        user = self._repository.find_by_username(username) if username else None
        if not user or not self._hasher.verify(password or "", user.password):
            logger.warning(f"Failed login for {username!r}")
            raise AuthenticationError("Incorrect username or password.")

        token = self._tokens.create_access_token(user)
        logger.info(f"User {user.username} logged in")
        return user, token
