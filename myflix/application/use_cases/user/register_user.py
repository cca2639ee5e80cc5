"""
Register User Use Case
======================

Business use case for creating a new user account.
"""
import logging
from typing import Any

from myflix.application.validators.user_validator import UserValidator, to_birthday
from myflix.domain.constants.user_fields import UserFields
from myflix.domain.exceptions import ConflictError
from myflix.domain.models.user import User
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.password_hasher import PasswordHasher
from myflix.utils.ids import new_id

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for registering a user.

    Validates every field, rejects taken usernames (and emails, when
    configured), hashes the password and inserts the user.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        validator: UserValidator,
        unique_email: bool = False,
    ):
        """
        Initialize use case with its collaborators.

        Args:
            user_repository: Repository for user persistence
            password_hasher: One-way hasher applied before storage
            validator: Field rules for user input
            unique_email: Reject an email already used by another user
        """
        self._repository = user_repository
        self._hasher = password_hasher
        self._validator = validator
        self._unique_email = unique_email

    def execute(
        self,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> User:
        """
        Execute the register user use case.

        Returns:
            Created user entity (password holds the hash)

        Raises:
            ValidationFailedError: If any field rule is broken
            ConflictError: If the username (or email) is already taken
        """
        self._validator.validate(username, password, email, birthday)

        if self._repository.find_by_username(username):
            raise ConflictError(f"{username} already exists", field=UserFields.USERNAME)
        if self._unique_email and self._repository.find_by_email(email):
            raise ConflictError(f"{email} is already registered", field=UserFields.EMAIL)

        user = User(
            id=new_id(),
            username=username,
            password=self._hasher.hash(password),
            email=email,
            birthday=to_birthday(birthday),
        )
        # The repository still guards the unique username against a concurrent insert
        created = self._repository.create(user)
        logger.info(f"User {created.username} registered")
        return created
