from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.auth_service import AuthService
from ...infrastructure.security.password_hasher import PasswordHasher
from ...infrastructure.security.token_service import TokenService

if TYPE_CHECKING:
    from ..container import DIContainer


class AuthProvider:
    """Auth service provider - registers login and token verification"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        container.register_singleton(
            AuthService,
            AuthService(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                token_service=container.get(TokenService),
            )
        )
