"""
Update Brewery List Use Case
============================

Adds or removes one referenced id in a brewery's beers, staff or admins list
with the same set-membership semantics as user movie lists.
"""
import logging

from myflix.domain.exceptions import NotFoundError
from myflix.domain.models.beer import Brewery, BreweryList
from myflix.domain.repositories.beer_repository import BeerRepository, BreweryRepository
from myflix.domain.repositories.user_repository import UserRepository
from myflix.utils.ids import require_valid_id

logger = logging.getLogger(__name__)


class UpdateBreweryListUseCase:

    def __init__(
        self,
        brewery_repository: BreweryRepository,
        beer_repository: BeerRepository,
        user_repository: UserRepository,
    ):
        self._breweries = brewery_repository
        self._beers = beer_repository
        self._users = user_repository

    def _check_member_exists(self, brewery_list: BreweryList, member_id: str) -> None:
        if brewery_list is BreweryList.BEERS:
            if not self._beers.exists(member_id):
                raise NotFoundError("Beer", member_id)
        elif self._users.find_by_id(member_id) is None:
            raise NotFoundError("User", member_id)

    def add(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Brewery:
        brewery_id = require_valid_id(brewery_id, "brewery")
        member_id = require_valid_id(member_id, "member")
        self._check_member_exists(brewery_list, member_id)

        brewery = self._breweries.add_member(brewery_id, brewery_list, member_id)
        if brewery is None:
            raise NotFoundError("Brewery", brewery_id)
        logger.info(f"{member_id} in {brewery_list.value} of brewery {brewery_id}")
        return brewery

    def remove(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Brewery:
        brewery_id = require_valid_id(brewery_id, "brewery")
        member_id = require_valid_id(member_id, "member")

        brewery = self._breweries.remove_member(brewery_id, brewery_list, member_id)
        if brewery is None:
            raise NotFoundError("Brewery", brewery_id)
        logger.info(f"{member_id} removed from {brewery_list.value} of brewery {brewery_id}")
        return brewery
