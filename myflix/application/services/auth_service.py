"""
Auth Service
============

Login and bearer-token verification.
"""
from typing import Optional, Tuple

from myflix.application.use_cases.auth.authenticate_token import AuthenticateTokenUseCase
from myflix.application.use_cases.auth.login_user import LoginUserUseCase
from myflix.domain.models.user import User
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.password_hasher import PasswordHasher
from myflix.infrastructure.security.token_service import TokenService


class AuthService:
    """Application service for authentication."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._login_use_case = LoginUserUseCase(user_repository, password_hasher, token_service)
        self._authenticate_use_case = AuthenticateTokenUseCase(user_repository, token_service)

    def login(self, username: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """
        Verify credentials.

        Returns:
            (user, token) pair
        """
        return self._login_use_case.execute(username, password)

    def authenticate(self, token: Optional[str]) -> User:
        """Resolve a bearer token to its user."""
        return self._authenticate_use_case.execute(token)
