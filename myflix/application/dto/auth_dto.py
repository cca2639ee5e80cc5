"""
Auth DTO
========

Pydantic models for login.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict

from myflix.application.dto.user_dto import UserResponse


class LoginRequest(BaseModel):
    """DTO for exchanging credentials for a token."""
    username: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "cinephile01", "password": "s3cret-pass"}}
    )


class LoginResponse(BaseModel):
    """DTO for a successful login."""
    user: UserResponse
    token: str
