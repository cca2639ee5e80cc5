from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.beer_repository import BeerRepository, BreweryRepository
from ...application.services.beer_service import BeerService

if TYPE_CHECKING:
    from ..container import DIContainer


class BeerProvider:
    """Beer service provider - registers BeerBible services"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        container.register_singleton(
            BeerService,
            BeerService(
                beer_repository=container.get(BeerRepository),
                brewery_repository=container.get(BreweryRepository),
                user_repository=container.get(UserRepository),
            )
        )
