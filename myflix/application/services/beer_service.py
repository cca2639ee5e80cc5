"""
Beer Service
============

Application service for the BeerBible catalog: beers and breweries.
"""
import logging
from typing import List, Optional

from myflix.application.use_cases.membership.update_brewery_list import UpdateBreweryListUseCase
from myflix.domain.exceptions import NotFoundError, ValidationFailedError
from myflix.domain.models.beer import Beer, Brewery, BreweryList
from myflix.domain.repositories.beer_repository import BeerRepository, BreweryRepository
from myflix.domain.repositories.user_repository import UserRepository
from myflix.utils.ids import new_id, require_valid_id

logger = logging.getLogger(__name__)


def _require_name(field: str, value: Optional[str]) -> None:
    if not value or not value.strip():
        raise ValidationFailedError([{"field": field, "message": f"{field} is required.", "value": value}])


class BeerService:
    """Coordinates beer CRUD and brewery membership lists."""

    def __init__(
        self,
        beer_repository: BeerRepository,
        brewery_repository: BreweryRepository,
        user_repository: UserRepository,
    ):
        self._beers = beer_repository
        self._breweries = brewery_repository
        self._brewery_list_use_case = UpdateBreweryListUseCase(
            brewery_repository, beer_repository, user_repository
        )

    # Beers

    def create_beer(self, beer: Beer) -> Beer:
        _require_name("name", beer.name)
        beer.id = new_id()
        created = self._beers.create(beer)
        logger.info(f"Beer {created.name} created")
        return created

    def update_beer(self, beer: Beer) -> Beer:
        beer.id = require_valid_id(beer.id, "beer")
        _require_name("name", beer.name)
        updated = self._beers.update(beer)
        if not updated:
            raise NotFoundError("Beer", beer.id)
        return updated

    def list_beers(self) -> List[Beer]:
        return self._beers.find_all()

    def get_beer(self, beer_id: str) -> Beer:
        beer_id = require_valid_id(beer_id, "beer")
        beer = self._beers.find_by_id(beer_id)
        if not beer:
            raise NotFoundError("Beer", beer_id)
        return beer

    def delete_beer(self, beer_id: str) -> None:
        beer_id = require_valid_id(beer_id, "beer")
        if not self._beers.delete(beer_id):
            raise NotFoundError("Beer", beer_id)
        logger.info(f"Beer {beer_id} deleted")

    # Breweries

    def create_brewery(self, brewery: Brewery) -> Brewery:
        _require_name("company_name", brewery.company_name)
        brewery.id = new_id()
        created = self._breweries.create(brewery)
        logger.info(f"Brewery {created.company_name} created")
        return created

    def update_brewery(self, brewery: Brewery) -> Brewery:
        brewery.id = require_valid_id(brewery.id, "brewery")
        _require_name("company_name", brewery.company_name)
        updated = self._breweries.update(brewery)
        if not updated:
            raise NotFoundError("Brewery", brewery.id)
        return updated

    def list_breweries(self) -> List[Brewery]:
        return self._breweries.find_all()

    def get_brewery(self, brewery_id: str) -> Brewery:
        brewery_id = require_valid_id(brewery_id, "brewery")
        brewery = self._breweries.find_by_id(brewery_id)
        if not brewery:
            raise NotFoundError("Brewery", brewery_id)
        return brewery

    def delete_brewery(self, brewery_id: str) -> None:
        brewery_id = require_valid_id(brewery_id, "brewery")
        if not self._breweries.delete(brewery_id):
            raise NotFoundError("Brewery", brewery_id)
        logger.info(f"Brewery {brewery_id} deleted")

    def add_brewery_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Brewery:
        return self._brewery_list_use_case.add(brewery_id, brewery_list, member_id)

    def remove_brewery_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Brewery:
        return self._brewery_list_use_case.remove(brewery_id, brewery_list, member_id)
