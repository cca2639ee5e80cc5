from .user_repository import UserRepository
from .movie_repository import MovieRepository
from .beer_repository import BeerRepository, BreweryRepository

__all__ = ["UserRepository", "MovieRepository", "BeerRepository", "BreweryRepository"]
