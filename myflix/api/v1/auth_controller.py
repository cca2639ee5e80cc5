"""
Auth Controller
===============

FastAPI controller for login.
"""
from fastapi import APIRouter, Depends

from myflix.api.v1.dependencies import get_auth_service
from myflix.api.v1.user_controller import to_user_response
from myflix.application.dto.auth_dto import LoginRequest, LoginResponse
from myflix.application.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    description="Exchange a username and password for a bearer token used on every protected route.",
)
def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Verify credentials and issue a token."""
    user, token = service.login(request.username, request.password)
    return LoginResponse(user=to_user_response(user), token=token)
