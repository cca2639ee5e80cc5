"""
Movie Controller
================

FastAPI controller for the movie catalog. Every route requires a bearer token.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from myflix.api.v1.dependencies import get_current_user, get_movie_service
from myflix.application.dto.movie_dto import DirectorResponse, GenreResponse, MovieResponse
from myflix.application.services.movie_service import MovieService
from myflix.domain.models.movie import Movie

router = APIRouter(tags=["movies"], dependencies=[Depends(get_current_user)])


def to_movie_response(movie: Movie) -> MovieResponse:
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        description=movie.description,
        genre=GenreResponse(
            name=movie.genre.name,
            description=movie.genre.description,
        ) if movie.genre else None,
        director=DirectorResponse(
            name=movie.director.name,
            bio=movie.director.bio,
        ) if movie.director else None,
        image_url=movie.image_url,
        release=movie.release,
        featured=movie.featured,
        actors=movie.actors,
    )


@router.get(
    "",
    response_model=List[MovieResponse],
    summary="List movies",
    description="Get every movie in the catalog.",
)
def list_movies(service: MovieService = Depends(get_movie_service)) -> List[MovieResponse]:
    """List all movies."""
    return [to_movie_response(movie) for movie in service.list_movies()]


@router.get(
    "/genres/{genre}",
    response_model=Optional[str],
    summary="Get genre description",
)
def get_genre(genre: str, service: MovieService = Depends(get_movie_service)) -> Optional[str]:
    """Describe a genre by name."""
    return service.get_genre_description(genre)


@router.get(
    "/directors/{director}",
    response_model=DirectorResponse,
    summary="Get director",
)
def get_director(director: str, service: MovieService = Depends(get_movie_service)) -> DirectorResponse:
    """Get a director's details by name."""
    found = service.get_director(director)
    return DirectorResponse(name=found.name, bio=found.bio)


@router.get(
    "/actors/{actor}",
    response_model=List[MovieResponse],
    summary="List movies by actor",
)
def list_movies_by_actor(actor: str, service: MovieService = Depends(get_movie_service)) -> List[MovieResponse]:
    """List the movies an actor appears in."""
    return [to_movie_response(movie) for movie in service.list_movies_by_actor(actor)]


@router.get(
    "/{title}",
    response_model=MovieResponse,
    summary="Get movie by title",
)
def get_movie(title: str, service: MovieService = Depends(get_movie_service)) -> MovieResponse:
    """Get a single movie by its exact title."""
    return to_movie_response(service.get_movie_by_title(title))
