"""
Beer DTO
========

Pydantic models for beer and brewery API requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BeerWriteRequest(BaseModel):
    """DTO for creating or replacing a beer."""
    name: Optional[str] = None
    style: Optional[str] = None
    abv: Optional[float] = Field(None, ge=0, le=100, description="Alcohol by volume, percent")
    categories: List[str] = Field(default_factory=list)
    malts: List[str] = Field(default_factory=list)
    hops: List[str] = Field(default_factory=list)
    flavor_notes: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Hazy Harbor",
                "style": "New England IPA",
                "abv": 6.8,
                "categories": ["IPA"],
                "malts": ["Pilsner", "Oats"],
                "hops": ["Citra", "Mosaic"],
                "flavor_notes": ["mango", "citrus"],
            }
        }
    )


class BeerResponse(BaseModel):
    id: str
    name: str
    style: Optional[str] = None
    abv: Optional[float] = None
    categories: List[str] = Field(default_factory=list)
    malts: List[str] = Field(default_factory=list)
    hops: List[str] = Field(default_factory=list)
    flavor_notes: List[str] = Field(default_factory=list)


class BreweryWriteRequest(BaseModel):
    """DTO for creating or replacing a brewery. Reference lists have their own routes."""
    company_name: Optional[str] = None
    owner: Optional[str] = None
    categories: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "company_name": "Harbor Brewing Co.",
                "owner": "Dana Whitfield",
                "categories": ["IPA", "Stout"],
            }
        }
    )


class BreweryResponse(BaseModel):
    id: str
    company_name: str
    owner: Optional[str] = None
    admins: List[str] = Field(default_factory=list)
    staff: List[str] = Field(default_factory=list)
    beers: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
