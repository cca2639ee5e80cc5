from .user import User, MovieList
from .movie import Movie, Genre, Director
from .beer import Beer, Brewery, BreweryList

__all__ = ["User", "MovieList", "Movie", "Genre", "Director", "Beer", "Brewery", "BreweryList"]
