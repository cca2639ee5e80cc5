"""
Movie Model
===========

Domain model representing a catalog movie with its nested genre and director.
"""
from typing import List, Optional
from dataclasses import dataclass, field


@dataclass
class Genre:
    name: str
    description: Optional[str] = None


@dataclass
class Director:
    name: str
    bio: Optional[str] = None


@dataclass
class Movie:
    """
    Movie domain model.

    Movies are read by the API and written by the seeding script.
    """
    id: str
    title: str
    description: Optional[str] = None
    genre: Optional[Genre] = None
    director: Optional[Director] = None
    image_url: Optional[str] = None
    release: Optional[str] = None
    featured: bool = False
    actors: List[str] = field(default_factory=list)
