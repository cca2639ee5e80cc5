"""
Beer and Brewery Models
=======================

Domain models for the BeerBible catalog.
"""
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field


class BreweryList(str, Enum):
    """Brewery reference lists updated with set semantics."""
    BEERS = "beers"
    STAFF = "staff"
    ADMINS = "admins"


@dataclass
class Beer:
    id: str
    name: str
    style: Optional[str] = None
    abv: Optional[float] = None  # alcohol by volume, percent
    categories: List[str] = field(default_factory=list)
    malts: List[str] = field(default_factory=list)
    hops: List[str] = field(default_factory=list)
    flavor_notes: List[str] = field(default_factory=list)


@dataclass
class Brewery:
    """
    Brewery domain model.

    `admins` and `staff` hold user ids, `beers` holds beer ids.
    """
    id: str
    company_name: str
    owner: Optional[str] = None
    admins: List[str] = field(default_factory=list)
    staff: List[str] = field(default_factory=list)
    beers: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
