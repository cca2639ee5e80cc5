"""
MongoDB Beer and Brewery Repositories
=====================================

Concrete implementations of BeerRepository and BreweryRepository using MongoDB.
"""
from typing import List, Optional
from pymongo import ReturnDocument
from pymongo.collection import Collection

from myflix.core.config import get_settings
from myflix.domain.constants.beer_fields import BeerFields, BreweryFields
from myflix.domain.models.beer import Beer, Brewery, BreweryList
from myflix.domain.repositories.beer_repository import BeerRepository, BreweryRepository
from myflix.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from myflix.utils.ids import to_object_id


class MongoBeerRepository(BeerRepository):
    """MongoDB implementation of BeerRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().beers_collection
        )

    def _to_entity(self, doc: dict) -> Beer:
        return Beer(
            id=str(doc[BeerFields.MONGO_ID]),
            name=doc.get(BeerFields.NAME),
            style=doc.get(BeerFields.STYLE),
            abv=doc.get(BeerFields.ABV),
            categories=list(doc.get(BeerFields.CATEGORIES, [])),
            malts=list(doc.get(BeerFields.MALTS, [])),
            hops=list(doc.get(BeerFields.HOPS, [])),
            flavor_notes=list(doc.get(BeerFields.FLAVOR_NOTES, [])),
        )

    def _fields(self, beer: Beer) -> dict:
        return {
            BeerFields.NAME: beer.name,
            BeerFields.STYLE: beer.style,
            BeerFields.ABV: beer.abv,
            BeerFields.CATEGORIES: list(beer.categories),
            BeerFields.MALTS: list(beer.malts),
            BeerFields.HOPS: list(beer.hops),
            BeerFields.FLAVOR_NOTES: list(beer.flavor_notes),
        }

    def create(self, beer: Beer) -> Beer:
        doc = {BeerFields.MONGO_ID: to_object_id(beer.id), **self._fields(beer)}
        self._collection.insert_one(doc)
        return beer

    def update(self, beer: Beer) -> Optional[Beer]:
        result = self._collection.find_one_and_update(
            {BeerFields.MONGO_ID: to_object_id(beer.id)},
            {"$set": self._fields(beer)},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(result) if result else None

    def find_all(self) -> List[Beer]:
        return [self._to_entity(doc) for doc in self._collection.find()]

    def find_by_id(self, beer_id: str) -> Optional[Beer]:
        doc = self._collection.find_one({BeerFields.MONGO_ID: to_object_id(beer_id)})
        return self._to_entity(doc) if doc else None

    def exists(self, beer_id: str) -> bool:
        return self._collection.count_documents({BeerFields.MONGO_ID: to_object_id(beer_id)}, limit=1) > 0

    def delete(self, beer_id: str) -> bool:
        result = self._collection.delete_one({BeerFields.MONGO_ID: to_object_id(beer_id)})
        return result.deleted_count > 0


class MongoBreweryRepository(BreweryRepository):
    """
    MongoDB implementation of BreweryRepository.

    Reference lists store ObjectIds and change only through $addToSet / $pull.
    """

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().breweries_collection
        )

    def _to_entity(self, doc: dict) -> Brewery:
        return Brewery(
            id=str(doc[BreweryFields.MONGO_ID]),
            company_name=doc.get(BreweryFields.COMPANY_NAME),
            owner=doc.get(BreweryFields.OWNER),
            admins=[str(i) for i in doc.get(BreweryFields.ADMINS, [])],
            staff=[str(i) for i in doc.get(BreweryFields.STAFF, [])],
            beers=[str(i) for i in doc.get(BreweryFields.BEERS, [])],
            categories=list(doc.get(BreweryFields.CATEGORIES, [])),
        )

    def create(self, brewery: Brewery) -> Brewery:
        self._collection.insert_one({
            BreweryFields.MONGO_ID: to_object_id(brewery.id),
            BreweryFields.COMPANY_NAME: brewery.company_name,
            BreweryFields.OWNER: brewery.owner,
            BreweryFields.ADMINS: [to_object_id(i) for i in brewery.admins],
            BreweryFields.STAFF: [to_object_id(i) for i in brewery.staff],
            BreweryFields.BEERS: [to_object_id(i) for i in brewery.beers],
            BreweryFields.CATEGORIES: list(brewery.categories),
        })
        return brewery

    def update(self, brewery: Brewery) -> Optional[Brewery]:
        result = self._collection.find_one_and_update(
            {BreweryFields.MONGO_ID: to_object_id(brewery.id)},
            {
                "$set": {
                    BreweryFields.COMPANY_NAME: brewery.company_name,
                    BreweryFields.OWNER: brewery.owner,
                    BreweryFields.CATEGORIES: list(brewery.categories),
                }
            },
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(result) if result else None

    def find_all(self) -> List[Brewery]:
        return [self._to_entity(doc) for doc in self._collection.find()]

    def find_by_id(self, brewery_id: str) -> Optional[Brewery]:
        doc = self._collection.find_one({BreweryFields.MONGO_ID: to_object_id(brewery_id)})
        return self._to_entity(doc) if doc else None

    def delete(self, brewery_id: str) -> bool:
        result = self._collection.delete_one({BreweryFields.MONGO_ID: to_object_id(brewery_id)})
        return result.deleted_count > 0

    def add_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        return self._apply_list_operator("$addToSet", brewery_id, brewery_list, member_id)

    def remove_member(self, brewery_id: str, brewery_list: BreweryList, member_id: str) -> Optional[Brewery]:
        return self._apply_list_operator("$pull", brewery_id, brewery_list, member_id)

    def _apply_list_operator(
        self, operator: str, brewery_id: str, brewery_list: BreweryList, member_id: str
    ) -> Optional[Brewery]:
        result = self._collection.find_one_and_update(
            {BreweryFields.MONGO_ID: to_object_id(brewery_id)},
            {operator: {brewery_list.value: to_object_id(member_id)}},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(result) if result else None
