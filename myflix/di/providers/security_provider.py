from typing import TYPE_CHECKING
from ...application.validators.user_validator import UserValidator
from ...infrastructure.security.password_hasher import PasswordHasher
from ...infrastructure.security.token_service import TokenService

if TYPE_CHECKING:
    from ..container import DIContainer


class SecurityProvider:
    """Registers the password hasher, token service and user input validator"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        settings = container.settings
        container.register_singleton(PasswordHasher, PasswordHasher(rounds=settings.bcrypt_rounds))
        container.register_singleton(
            TokenService,
            TokenService(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.jwt_expire_minutes,
            ),
        )
        container.register_singleton(
            UserValidator,
            UserValidator(username_min_length=settings.username_min_length),
        )
