"""
User Controller
===============

FastAPI controller for user accounts and their movie lists.

Registration is open; every other route requires a bearer token.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from myflix.api.v1.dependencies import get_current_user, get_user_service
from myflix.application.dto.user_dto import UserResponse, UserWriteRequest
from myflix.application.services.user_service import UserService
from myflix.domain.models.user import User, MovieList

router = APIRouter(tags=["users"])


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        birthday=user.birthday,
        favorite_movies=user.favorite_movies,
        to_watch=user.to_watch,
    )


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    dependencies=[Depends(get_current_user)],
)
def list_users(service: UserService = Depends(get_user_service)) -> List[UserResponse]:
    """List all users."""
    return [to_user_response(user) for user in service.list_users()]


@router.get(
    "/{username}",
    response_model=UserResponse,
    summary="Get user by username",
    dependencies=[Depends(get_current_user)],
)
def get_user(username: str, service: UserService = Depends(get_user_service)) -> UserResponse:
    """Get a specific user."""
    return to_user_response(service.get_user(username))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="""
    Register a new user.

    All field violations are reported together with status 422.
    A taken username is rejected with status 409. The password is stored as a bcrypt hash.
    """,
)
def register_user(
    request: UserWriteRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a user."""
    user = service.register_user(
        username=request.username,
        password=request.password,
        email=request.email,
        birthday=request.birthday,
    )
    return to_user_response(user)


@router.put(
    "/{username}",
    response_model=UserResponse,
    summary="Update a user",
    description="Replace username, password, email and birthday. Same rules as registration.",
    dependencies=[Depends(get_current_user)],
)
def update_user(
    username: str,
    request: UserWriteRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update a user's profile."""
    user = service.update_user(
        current_username=username,
        username=request.username,
        password=request.password,
        email=request.email,
        birthday=request.birthday,
    )
    return to_user_response(user)


@router.delete(
    "/{username}",
    response_class=PlainTextResponse,
    summary="Deregister a user",
    dependencies=[Depends(get_current_user)],
)
def delete_user(username: str, service: UserService = Depends(get_user_service)) -> PlainTextResponse:
    """Remove a user."""
    service.delete_user(username)
    return PlainTextResponse(f"{username} was deleted.")


@router.post(
    "/{username}/favorites/{movie_id}",
    response_model=UserResponse,
    summary="Add a favorite movie",
    description="Add a movie id to the user's favorites. Adding it twice keeps a single entry.",
    dependencies=[Depends(get_current_user)],
)
def add_favorite(
    username: str,
    movie_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return to_user_response(service.add_movie(username, MovieList.FAVORITES, movie_id))


@router.delete(
    "/{username}/favorites/{movie_id}",
    response_model=UserResponse,
    summary="Remove a favorite movie",
    dependencies=[Depends(get_current_user)],
)
def remove_favorite(
    username: str,
    movie_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return to_user_response(service.remove_movie(username, MovieList.FAVORITES, movie_id))


@router.post(
    "/{username}/ToWatch/{movie_id}",
    response_model=UserResponse,
    summary="Add a movie to watch",
    dependencies=[Depends(get_current_user)],
)
def add_to_watch(
    username: str,
    movie_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return to_user_response(service.add_movie(username, MovieList.TO_WATCH, movie_id))


@router.delete(
    "/{username}/ToWatch/{movie_id}",
    response_model=UserResponse,
    summary="Remove a movie to watch",
    dependencies=[Depends(get_current_user)],
)
def remove_to_watch(
    username: str,
    movie_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return to_user_response(service.remove_movie(username, MovieList.TO_WATCH, movie_id))
