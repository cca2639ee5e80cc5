from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.movie_repository import MovieRepository
from ...application.services.user_service import UserService
from ...application.validators.user_validator import UserValidator
from ...infrastructure.security.password_hasher import PasswordHasher

if TYPE_CHECKING:
    from ..container import DIContainer


class UserProvider:
    """User service provider - registers user-related services"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register user service.
        Service is created with repositories and security helpers from container.
        """
        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository),
                movie_repository=container.get(MovieRepository),
                password_hasher=container.get(PasswordHasher),
                validator=container.get(UserValidator),
                unique_email=container.settings.unique_email,
            )
        )
