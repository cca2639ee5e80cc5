from .user_fields import UserFields
from .movie_fields import MovieFields
from .beer_fields import BeerFields, BreweryFields

__all__ = ["UserFields", "MovieFields", "BeerFields", "BreweryFields"]
