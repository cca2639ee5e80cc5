"""
Update User Use Case
====================

Business use case for replacing a user's profile fields.
"""
import logging
from typing import Any

from myflix.application.validators.user_validator import UserValidator, to_birthday
from myflix.domain.constants.user_fields import UserFields
from myflix.domain.exceptions import ConflictError, NotFoundError
from myflix.domain.models.user import User
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating username, password, email and birthday of a user."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        validator: UserValidator,
        unique_email: bool = False,
    ):
        self._repository = user_repository
        self._hasher = password_hasher
        self._validator = validator
        self._unique_email = unique_email

    def execute(
        self,
        current_username: str,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> User:
        """
        Execute the update user use case.

        Args:
            current_username: Username the user is known by before the update
            username: New username (may equal the current one)
            password: New plaintext password, hashed before storage
            email: New email
            birthday: New birthday, a date or YYYY-MM-DD string

        Returns:
            Updated user entity

        Raises:
            ValidationFailedError: If any field rule is broken
            NotFoundError: If no user is named `current_username`
            ConflictError: If the new username (or email) belongs to another user
        """
        self._validator.validate(username, password, email, birthday)

        existing = self._repository.find_by_username(current_username)
        if not existing:
            raise NotFoundError("User", current_username)

        if username != current_username and self._repository.find_by_username(username):
            raise ConflictError(f"{username} already exists", field=UserFields.USERNAME)
        if self._unique_email:
            owner = self._repository.find_by_email(email)
            if owner and owner.id != existing.id:
                raise ConflictError(f"{email} is already registered", field=UserFields.EMAIL)

        changes = User(
            id=existing.id,
            username=username,
            password=self._hasher.hash(password),
            email=email,
            birthday=to_birthday(birthday),
        )
        updated = self._repository.update(current_username, changes)
        if not updated:
            # removed between the lookup and the write
            raise NotFoundError("User", current_username)

        logger.info(f"User {current_username} updated")
        return updated
