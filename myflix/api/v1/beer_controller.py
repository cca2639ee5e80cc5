"""
Beer Controller
===============

FastAPI controller for BeerBible beers. Every route requires a bearer token.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from myflix.api.v1.dependencies import get_beer_service, get_current_user
from myflix.application.dto.beer_dto import BeerResponse, BeerWriteRequest
from myflix.application.services.beer_service import BeerService
from myflix.domain.models.beer import Beer

router = APIRouter(tags=["beers"], dependencies=[Depends(get_current_user)])


def to_beer_response(beer: Beer) -> BeerResponse:
    return BeerResponse(
        id=beer.id,
        name=beer.name,
        style=beer.style,
        abv=beer.abv,
        categories=beer.categories,
        malts=beer.malts,
        hops=beer.hops,
        flavor_notes=beer.flavor_notes,
    )


def to_beer(beer_id: str, request: BeerWriteRequest) -> Beer:
    return Beer(
        id=beer_id,
        name=request.name,
        style=request.style,
        abv=request.abv,
        categories=request.categories,
        malts=request.malts,
        hops=request.hops,
        flavor_notes=request.flavor_notes,
    )


@router.get("", response_model=List[BeerResponse], summary="List beers")
def list_beers(service: BeerService = Depends(get_beer_service)) -> List[BeerResponse]:
    return [to_beer_response(beer) for beer in service.list_beers()]


@router.get("/{beer_id}", response_model=BeerResponse, summary="Get beer by id")
def get_beer(beer_id: str, service: BeerService = Depends(get_beer_service)) -> BeerResponse:
    return to_beer_response(service.get_beer(beer_id))


@router.post("", response_model=BeerResponse, status_code=status.HTTP_201_CREATED, summary="Create a beer")
def create_beer(request: BeerWriteRequest, service: BeerService = Depends(get_beer_service)) -> BeerResponse:
    return to_beer_response(service.create_beer(to_beer("", request)))


@router.put("/{beer_id}", response_model=BeerResponse, summary="Replace a beer")
def update_beer(
    beer_id: str,
    request: BeerWriteRequest,
    service: BeerService = Depends(get_beer_service),
) -> BeerResponse:
    return to_beer_response(service.update_beer(to_beer(beer_id, request)))


@router.delete("/{beer_id}", response_class=PlainTextResponse, summary="Delete a beer")
def delete_beer(beer_id: str, service: BeerService = Depends(get_beer_service)) -> PlainTextResponse:
    service.delete_beer(beer_id)
    return PlainTextResponse(f"Beer {beer_id} was deleted.")
