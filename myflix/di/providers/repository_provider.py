from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.movie_repository import MovieRepository
from ...domain.repositories.beer_repository import BeerRepository, BreweryRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_movie_repository import MongoMovieRepository
from ...infrastructure.db.mongo_beer_repository import MongoBeerRepository, MongoBreweryRepository
from ...infrastructure.memory.memory_user_repository import InMemoryUserRepository
from ...infrastructure.memory.memory_movie_repository import InMemoryMovieRepository
from ...infrastructure.memory.memory_beer_repository import InMemoryBeerRepository, InMemoryBreweryRepository

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations for the configured STORAGE_BACKEND.
        """
        backend = container.settings.storage_backend

        if backend == "memory":
            container.register_singleton(UserRepository, InMemoryUserRepository())
            container.register_singleton(MovieRepository, InMemoryMovieRepository())
            container.register_singleton(BeerRepository, InMemoryBeerRepository())
            container.register_singleton(BreweryRepository, InMemoryBreweryRepository())
            return

        if backend != "mongo":
            raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'mongo' or 'memory')")

        # Domain interfaces -> Infrastructure implementations
        mongo_client = container.get("mongo_client")
        settings = container.settings
        container.register_singleton(
            UserRepository, MongoUserRepository(mongo_client, settings.users_collection)
        )
        container.register_singleton(
            MovieRepository, MongoMovieRepository(mongo_client, settings.movies_collection)
        )
        container.register_singleton(
            BeerRepository, MongoBeerRepository(mongo_client, settings.beers_collection)
        )
        container.register_singleton(
            BreweryRepository, MongoBreweryRepository(mongo_client, settings.breweries_collection)
        )
