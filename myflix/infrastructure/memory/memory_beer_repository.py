"""
In-Memory Beer and Brewery Repositories
=======================================
"""
import copy
import threading
from typing import Dict, List, Optional

from myflix.domain.models.beer import Beer, Brewery, BreweryList
from myflix.domain.repositories.beer_repository import BeerRepository, BreweryRepository


class InMemoryBeerRepository(BeerRepository):

    def __init__(self):
        self._beers: Dict[str, Beer] = {}
        self._lock = threading.Lock()

    def create(self, beer: Beer) -> Beer:
        with self._lock:
            self._beers[beer.id] = copy.deepcopy(beer)
        return beer

    def update(self, beer: Beer) -> Optional[Beer]:
        with self._lock:
            if beer.id not in self._beers:
                return None
            self._beers[beer.id] = copy.deepcopy(beer)
            return copy.deepcopy(beer)

    def find_all(self) -> List[Beer]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._beers.values()]

    def find_by_id(self, beer_id: str) -> Optional[Beer]:
        with self._lock:
            beer = self._beers.get(beer_id)
            return copy.deepcopy(beer) if beer else None

    def exists(self, beer_id: str) -> bool:
        with self._lock:
            return beer_id in self._beers

    def delete(self, beer_id: str) -> bool:
        with self._lock:
            return self._beers.pop(beer_id, None) is not None


class InMemoryBreweryRepository(BreweryRepository):

    def __init__(self):
        self._breweries: Dict[str, Brewery] = {}
        self._lock = threading.Lock()

    def create(self, brewery: Brewery) -> Brewery:
        with self._lock:
            self._breweries[brewery.id] = copy.deepcopy(brewery)
        return brewery

    def update(self, brewery: Brewery) -> Optional[Brewery]:
        with self._lock:
            stored = self._breweries.get(brewery.id)
            if stored is None:
                return None
            stored.company_name = brewery.company_name
            stored.owner = brewery.owner
            stored.categories = list(brewery.categories)
            return copy.deepcopy(stored)

    def find_all(self) -> List[Brewery]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._breweries.values()]

    def find_by_id(self, brewery_id: str) -> Optional[Brewery]:
        with self._lock:
            brewery = self._breweries.get(brewery_id)
            return copy.deepcopy(brewery) if brewery else None

    def delete(self, brewery_id: str) -> bool:
        with self._lock:
            return self._breweries.pop(brewery_id, None) is not None

    def add_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        with self._lock:
            brewery = self._breweries.get(brewery_id)
            if brewery is None:
                return None
            members = getattr(brewery, brewery_list.value)
            if member_id not in members:
                members.append(member_id)
            return copy.deepcopy(brewery)

    def remove_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        with self._lock:
            brewery = self._breweries.get(brewery_id)
            if brewery is None:
                return None
            members = getattr(brewery, brewery_list.value)
            members[:] = [m for m in members if m != member_id]
            return copy.deepcopy(brewery)
