"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from datetime import date
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class UserWriteRequest(BaseModel):
    """
    DTO for registering or updating a user.

    Fields are untyped at the schema level: values reach UserValidator as
    sent, so a missing field, a wrong type and a broken rule are all reported
    in the same error list.
    """
    username: Any = Field(None, description="Letters and digits, at least 5 characters")
    password: Any = Field(None, description="Plaintext password, hashed before storage")
    email: Any = Field(None, description="Email address")
    birthday: Any = Field(None, description="Birthday (YYYY-MM-DD)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "cinephile01",
                "password": "s3cret-pass",
                "email": "cinephile01@example.com",
                "birthday": "1990-04-12",
            }
        }
    )


class UserResponse(BaseModel):
    """DTO for user data. The password hash is never included."""
    id: str
    username: str
    email: str
    birthday: Optional[date] = None
    favorite_movies: List[str] = Field(default_factory=list)
    to_watch: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "64b7f0c2e13a4b6d8f9a1c23",
                "username": "cinephile01",
                "email": "cinephile01@example.com",
                "birthday": "1990-04-12",
                "favorite_movies": ["64b7f0c2e13a4b6d8f9a1c99"],
                "to_watch": [],
            }
        }
    )
