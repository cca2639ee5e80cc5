"""
MongoDB Movie Repository
========================

Concrete implementation of MovieRepository using MongoDB.
"""
from typing import List, Optional
from pymongo.collection import Collection

from myflix.core.config import get_settings
from myflix.domain.constants.movie_fields import MovieFields
from myflix.domain.models.movie import Movie, Genre, Director
from myflix.domain.repositories.movie_repository import MovieRepository
from myflix.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from myflix.utils.ids import to_object_id


class MongoMovieRepository(MovieRepository):
    """MongoDB implementation of MovieRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().movies_collection
        )

    def _to_entity(self, doc: dict) -> Movie:
        """Convert MongoDB document to Movie entity."""
        genre = doc.get(MovieFields.GENRE)
        director = doc.get(MovieFields.DIRECTOR)
        return Movie(
            id=str(doc[MovieFields.MONGO_ID]),
            title=doc.get(MovieFields.TITLE),
            description=doc.get(MovieFields.DESCRIPTION),
            genre=Genre(
                name=genre.get(MovieFields.NAME),
                description=genre.get(MovieFields.DESCRIPTION),
            ) if genre else None,
            director=Director(
                name=director.get(MovieFields.NAME),
                bio=director.get(MovieFields.BIO),
            ) if director else None,
            image_url=doc.get(MovieFields.IMAGE_URL),
            release=doc.get(MovieFields.RELEASE),
            featured=bool(doc.get(MovieFields.FEATURED, False)),
            actors=list(doc.get(MovieFields.ACTORS, [])),
        )

    def _to_document(self, movie: Movie) -> dict:
        """Convert Movie entity to MongoDB document."""
        return {
            MovieFields.MONGO_ID: to_object_id(movie.id),
            MovieFields.TITLE: movie.title,
            MovieFields.DESCRIPTION: movie.description,
            MovieFields.GENRE: {
                MovieFields.NAME: movie.genre.name,
                MovieFields.DESCRIPTION: movie.genre.description,
            } if movie.genre else None,
            MovieFields.DIRECTOR: {
                MovieFields.NAME: movie.director.name,
                MovieFields.BIO: movie.director.bio,
            } if movie.director else None,
            MovieFields.IMAGE_URL: movie.image_url,
            MovieFields.RELEASE: movie.release,
            MovieFields.FEATURED: movie.featured,
            MovieFields.ACTORS: list(movie.actors),
        }

    def create(self, movie: Movie) -> Movie:
        self._collection.insert_one(self._to_document(movie))
        return movie

    def find_all(self) -> List[Movie]:
        return [self._to_entity(doc) for doc in self._collection.find()]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        doc = self._collection.find_one({MovieFields.MONGO_ID: to_object_id(movie_id)})
        return self._to_entity(doc) if doc else None

    def find_by_title(self, title: str) -> Optional[Movie]:
        doc = self._collection.find_one({MovieFields.TITLE: title})
        return self._to_entity(doc) if doc else None

    def find_by_genre_name(self, genre_name: str) -> Optional[Movie]:
        doc = self._collection.find_one({MovieFields.GENRE_NAME: genre_name})
        return self._to_entity(doc) if doc else None

    def find_by_director_name(self, director_name: str) -> Optional[Movie]:
        doc = self._collection.find_one({MovieFields.DIRECTOR_NAME: director_name})
        return self._to_entity(doc) if doc else None

    def find_by_actor(self, actor: str) -> List[Movie]:
        # Matching a scalar against an array field matches any element
        return [self._to_entity(doc) for doc in self._collection.find({MovieFields.ACTORS: actor})]

    def exists(self, movie_id: str) -> bool:
        count = self._collection.count_documents({MovieFields.MONGO_ID: to_object_id(movie_id)}, limit=1)
        return count > 0

    def delete(self, movie_id: str) -> bool:
        result = self._collection.delete_one({MovieFields.MONGO_ID: to_object_id(movie_id)})
        return result.deleted_count > 0
