"""
Movie DTO
=========

Pydantic models for movie API responses.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class GenreResponse(BaseModel):
    name: str
    description: Optional[str] = None


class DirectorResponse(BaseModel):
    name: str
    bio: Optional[str] = None


class MovieResponse(BaseModel):
    """DTO for movie data."""
    id: str
    title: str
    description: Optional[str] = None
    genre: Optional[GenreResponse] = None
    director: Optional[DirectorResponse] = None
    image_url: Optional[str] = None
    release: Optional[str] = None
    featured: bool = False
    actors: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "64b7f0c2e13a4b6d8f9a1c99",
                "title": "Silence of the Lambs",
                "description": "A young FBI cadet must receive the help of an incarcerated cannibal killer.",
                "genre": {"name": "Thriller", "description": "Thriller is a genre of suspense."},
                "director": {"name": "Jonathan Demme", "bio": "Robert Jonathan Demme was an American director."},
                "image_url": "silenceofthelambs.png",
                "release": "1991",
                "featured": True,
                "actors": ["Jodie Foster", "Anthony Hopkins"],
            }
        }
    )
