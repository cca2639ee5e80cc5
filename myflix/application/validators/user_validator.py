"""
User Input Validator
====================

Checks registration and profile-update input. Every rule runs, and every
violation is collected, so the client sees all problems in one response.

Values arrive exactly as the client sent them in JSON, so a rule treats a
value of the wrong type as a violation of that rule.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from myflix.domain.constants.user_fields import UserFields
from myflix.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


def to_birthday(value: Any) -> Optional[date]:
    """
    Convert a submitted birthday to a date.

    Accepts None, a date, or a YYYY-MM-DD string.

    Raises:
        ValueError: If the value is anything else
    """
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError(f"not a date: {value!r}")


class UserValidator:
    """
    Field rules for user input.

    Rules:
        username: a string of at least `username_min_length` characters, letters and digits only
        password: a non-empty string
        email: a well-formed address (syntax only, no DNS lookup)
        birthday: absent, or a YYYY-MM-DD date
    """

    def __init__(self, username_min_length: int = 5):
        self._username_min_length = username_min_length

    def collect_errors(
        self,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> List[Dict[str, Any]]:
        """Return every violation found, in field order. Empty list means valid."""
        errors: List[Dict[str, Any]] = []

        def fail(field: str, message: str, value: Any) -> None:
            errors.append({"field": field, "message": message, "value": value})

        username_is_text = isinstance(username, str)
        if not username_is_text or len(username) < self._username_min_length:
            fail(
                UserFields.USERNAME,
                f"Username is required and must be at least {self._username_min_length} characters.",
                username,
            )
        if not username_is_text or not (username.isascii() and username.isalnum()):
            fail(UserFields.USERNAME, "Username contains non alphanumeric characters - not allowed.", username)

        if not isinstance(password, str) or not password:
            # never echo the password back
            fail(UserFields.PASSWORD, "Password is required.", None)

        if not isinstance(email, str) or not email:
            fail(UserFields.EMAIL, "Email does not appear to be valid.", email)
        else:
            try:
                validate_email(email, check_deliverability=False)
            except EmailNotValidError:
                fail(UserFields.EMAIL, "Email does not appear to be valid.", email)

        try:
            to_birthday(birthday)
        except ValueError:
            fail(UserFields.BIRTHDAY, "Birthday must be a date in YYYY-MM-DD format.", birthday)

        return errors

    def validate(
        self,
        username: Any,
        password: Any,
        email: Any,
        birthday: Any = None,
    ) -> None:
        """
        Raise if any rule is broken.

        Raises:
            ValidationFailedError: Carrying every violation found
        """
        errors = self.collect_errors(username, password, email, birthday)
        if errors:
            logger.warning(f"Rejected user input: {[e['field'] + ': ' + e['message'] for e in errors]}")
            raise ValidationFailedError(errors)
