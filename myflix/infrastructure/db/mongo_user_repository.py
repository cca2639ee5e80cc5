"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.

Movie list changes use $addToSet / $pull through find_one_and_update, so each
one is a single atomic operation on the user document.
"""
import logging
from typing import List, Optional
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from myflix.core.config import get_settings
from myflix.domain.constants.user_fields import UserFields
from myflix.domain.exceptions import ConflictError
from myflix.domain.models.user import User, MovieList
from myflix.domain.repositories.user_repository import UserRepository
from myflix.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from myflix.utils.datetime_utils import date_to_datetime, datetime_to_date
from myflix.utils.ids import to_object_id

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        """Initialize repository with MongoDB client and ensure the username index."""
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().users_collection
        )
        self._collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=str(doc[UserFields.MONGO_ID]),
            username=doc.get(UserFields.USERNAME),
            password=doc.get(UserFields.PASSWORD),
            email=doc.get(UserFields.EMAIL),
            birthday=datetime_to_date(doc.get(UserFields.BIRTHDAY)),
            favorite_movies=[str(m) for m in doc.get(UserFields.FAVORITE_MOVIES, [])],
            to_watch=[str(m) for m in doc.get(UserFields.TO_WATCH, [])],
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.MONGO_ID: to_object_id(user.id),
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD: user.password,
            UserFields.EMAIL: user.email,
            UserFields.BIRTHDAY: date_to_datetime(user.birthday),
            UserFields.FAVORITE_MOVIES: [to_object_id(m) for m in user.favorite_movies],
            UserFields.TO_WATCH: [to_object_id(m) for m in user.to_watch],
        }

    def create(self, user: User) -> User:
        """Create a new user."""
        try:
            self._collection.insert_one(self._to_document(user))
        except DuplicateKeyError:
            raise ConflictError(f"{user.username} already exists", field=UserFields.USERNAME)
        return user

    def update(self, username: str, user: User) -> Optional[User]:
        """Update profile fields of an existing user."""
        try:
            result = self._collection.find_one_and_update(
                {UserFields.USERNAME: username},
                {
                    "$set": {
                        UserFields.USERNAME: user.username,
                        UserFields.PASSWORD: user.password,
                        UserFields.EMAIL: user.email,
                        UserFields.BIRTHDAY: date_to_datetime(user.birthday),
                    }
                },
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError(f"{user.username} already exists", field=UserFields.USERNAME)
        return self._to_entity(result) if result else None

    def find_all(self) -> List[User]:
        """Find every user."""
        return [self._to_entity(doc) for doc in self._collection.find()]

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        doc = self._collection.find_one({UserFields.MONGO_ID: to_object_id(user_id)})
        return self._to_entity(doc) if doc else None

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        doc = self._collection.find_one({UserFields.USERNAME: username})
        return self._to_entity(doc) if doc else None

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        doc = self._collection.find_one({UserFields.EMAIL: email})
        return self._to_entity(doc) if doc else None

    def delete(self, username: str) -> bool:
        """Remove a user by username."""
        result = self._collection.delete_one({UserFields.USERNAME: username})
        return result.deleted_count > 0

    def add_to_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        """Add a movie id to a list with $addToSet."""
        return self._apply_list_operator("$addToSet", username, movie_list, movie_id)

    def remove_from_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        """Remove a movie id from a list with $pull."""
        return self._apply_list_operator("$pull", username, movie_list, movie_id)

    def _apply_list_operator(
        self, operator: str, username: str, movie_list: MovieList, movie_id: str
    ) -> Optional[User]:
        result = self._collection.find_one_and_update(
            {UserFields.USERNAME: username},
            {operator: {movie_list.value: to_object_id(movie_id)}},
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            return None
        logger.debug(f"{operator} {movie_id} on {movie_list.value} of {username}")
        return self._to_entity(result)
