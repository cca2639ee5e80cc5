"""
Brewery Controller
==================

FastAPI controller for BeerBible breweries and their reference lists.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from myflix.api.v1.dependencies import get_beer_service, get_current_user
from myflix.application.dto.beer_dto import BreweryResponse, BreweryWriteRequest
from myflix.application.services.beer_service import BeerService
from myflix.domain.models.beer import Brewery, BreweryList

router = APIRouter(tags=["breweries"], dependencies=[Depends(get_current_user)])


def to_brewery_response(brewery: Brewery) -> BreweryResponse:
    return BreweryResponse(
        id=brewery.id,
        company_name=brewery.company_name,
        owner=brewery.owner,
        admins=brewery.admins,
        staff=brewery.staff,
        beers=brewery.beers,
        categories=brewery.categories,
    )


def to_brewery(brewery_id: str, request: BreweryWriteRequest) -> Brewery:
    return Brewery(
        id=brewery_id,
        company_name=request.company_name,
        owner=request.owner,
        categories=request.categories,
    )


@router.get("", response_model=List[BreweryResponse], summary="List breweries")
def list_breweries(service: BeerService = Depends(get_beer_service)) -> List[BreweryResponse]:
    return [to_brewery_response(b) for b in service.list_breweries()]


@router.get("/{brewery_id}", response_model=BreweryResponse, summary="Get brewery by id")
def get_brewery(brewery_id: str, service: BeerService = Depends(get_beer_service)) -> BreweryResponse:
    return to_brewery_response(service.get_brewery(brewery_id))


@router.post("", response_model=BreweryResponse, status_code=status.HTTP_201_CREATED, summary="Create a brewery")
def create_brewery(
    request: BreweryWriteRequest,
    service: BeerService = Depends(get_beer_service),
) -> BreweryResponse:
    return to_brewery_response(service.create_brewery(to_brewery("", request)))


@router.put("/{brewery_id}", response_model=BreweryResponse, summary="Replace a brewery")
def update_brewery(
    brewery_id: str,
    request: BreweryWriteRequest,
    service: BeerService = Depends(get_beer_service),
) -> BreweryResponse:
    return to_brewery_response(service.update_brewery(to_brewery(brewery_id, request)))


@router.delete("/{brewery_id}", response_class=PlainTextResponse, summary="Delete a brewery")
def delete_brewery(brewery_id: str, service: BeerService = Depends(get_beer_service)) -> PlainTextResponse:
    service.delete_brewery(brewery_id)
    return PlainTextResponse(f"Brewery {brewery_id} was deleted.")


@router.post(
    "/{brewery_id}/{brewery_list}/{member_id}",
    response_model=BreweryResponse,
    summary="Add a beer, staff member or admin",
    description="`brewery_list` is one of beers, staff, admins. Adding an id twice keeps a single entry.",
)
def add_member(
    brewery_id: str,
    brewery_list: BreweryList,
    member_id: str,
    service: BeerService = Depends(get_beer_service),
) -> BreweryResponse:
    return to_brewery_response(service.add_brewery_member(brewery_id, brewery_list, member_id))


@router.delete(
    "/{brewery_id}/{brewery_list}/{member_id}",
    response_model=BreweryResponse,
    summary="Remove a beer, staff member or admin",
)
def remove_member(
    brewery_id: str,
    brewery_list: BreweryList,
    member_id: str,
    service: BeerService = Depends(get_beer_service),
) -> BreweryResponse:
    return to_brewery_response(service.remove_brewery_member(brewery_id, brewery_list, member_id))
