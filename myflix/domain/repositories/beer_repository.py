"""
Beer and Brewery Repository Interfaces
======================================

Abstract interfaces for BeerBible data access.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from myflix.domain.models.beer import Beer, Brewery, BreweryList


class BeerRepository(ABC):
    """Abstract repository for beer persistence operations."""

    @abstractmethod
    def create(self, beer: Beer) -> Beer:
        pass

    @abstractmethod
    def update(self, beer: Beer) -> Optional[Beer]:
        """Replace every field of the beer with `beer.id`; None if it does not exist."""
        pass

    @abstractmethod
    def find_all(self) -> List[Beer]:
        pass

    @abstractmethod
    def find_by_id(self, beer_id: str) -> Optional[Beer]:
        pass

    @abstractmethod
    def exists(self, beer_id: str) -> bool:
        pass

    @abstractmethod
    def delete(self, beer_id: str) -> bool:
        pass


class BreweryRepository(ABC):
    """Abstract repository for brewery persistence operations."""

    @abstractmethod
    def create(self, brewery: Brewery) -> Brewery:
        pass

    @abstractmethod
    def update(self, brewery: Brewery) -> Optional[Brewery]:
        """
        Replace the scalar fields and categories of the brewery with `brewery.id`.

        Reference lists (admins, staff, beers) are only changed through
        add_member/remove_member.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Brewery]:
        pass

    @abstractmethod
    def find_by_id(self, brewery_id: str) -> Optional[Brewery]:
        pass

    @abstractmethod
    def delete(self, brewery_id: str) -> bool:
        pass

    @abstractmethod
    def add_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        """Atomically add an id to a reference list if absent; None if the brewery does not exist."""
        pass

    @abstractmethod
    def remove_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        """Atomically remove an id from a reference list; None if the brewery does not exist."""
        pass
