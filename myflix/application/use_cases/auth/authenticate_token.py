"""
Authenticate Token Use Case
===========================

Resolves a presented bearer token to the user it was issued for.
"""
from typing import Optional

from myflix.domain.exceptions import AuthenticationError
from myflix.domain.models.user import User
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.token_service import TokenService
from myflix.utils.ids import is_valid_id


class AuthenticateTokenUseCase:
    """Use case for the bearer-token gate in front of protected routes."""

    def __init__(self, user_repository: UserRepository, token_service: TokenService):
        self._repository = user_repository
        self._tokens = token_service

    def execute(self, token: Optional[str]) -> User:
        """
        Verify the token and load its subject.

        Raises:
            AuthenticationError: If the token is missing, invalid, expired,
                or its user no longer exists
        """
        if not token:
            raise AuthenticationError("Missing bearer token")

        claims = self._tokens.decode(token)
        user_id = claims["sub"]
        if not is_valid_id(user_id):
            raise AuthenticationError("Invalid token")

        user = self._repository.find_by_id(user_id)
        if not user:
            raise AuthenticationError("User not found")
        return user
