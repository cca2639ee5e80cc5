"""
In-Memory User Repository
=========================

UserRepository kept in a process-local dict.

Every operation runs under one lock so list updates are as atomic as the
MongoDB operators they stand in for. Entities are copied on the way in and
out, so callers never share state with the store.
"""
import copy
import threading
from typing import Dict, List, Optional

from myflix.domain.constants.user_fields import UserFields
from myflix.domain.exceptions import ConflictError
from myflix.domain.models.user import User, MovieList
from myflix.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository, keyed by user id."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def _by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create(self, user: User) -> User:
        with self._lock:
            if self._by_username(user.username):
                raise ConflictError(f"{user.username} already exists", field=UserFields.USERNAME)
            self._users[user.id] = copy.deepcopy(user)
        return copy.deepcopy(user)

    def update(self, username: str, user: User) -> Optional[User]:
        with self._lock:
            stored = self._by_username(username)
            if stored is None:
                return None
            clash = self._by_username(user.username)
            if clash is not None and clash.id != stored.id:
                raise ConflictError(f"{user.username} already exists", field=UserFields.USERNAME)
            stored.username = user.username
            stored.password = user.password
            stored.email = user.email
            stored.birthday = user.birthday
            return copy.deepcopy(stored)

    def find_all(self) -> List[User]:
        with self._lock:
            return [copy.deepcopy(u) for u in self._users.values()]

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user else None

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._by_username(username)
            return copy.deepcopy(user) if user else None

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return copy.deepcopy(user)
            return None

    def delete(self, username: str) -> bool:
        with self._lock:
            user = self._by_username(username)
            if user is None:
                return False
            del self._users[user.id]
            return True

    def add_to_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        with self._lock:
            user = self._by_username(username)
            if user is None:
                return None
            ids = user.movies_in(movie_list)
            if movie_id not in ids:
                ids.append(movie_id)
            return copy.deepcopy(user)

    def remove_from_list(self, username: str, movie_list: MovieList, movie_id: str) -> Optional[User]:
        with self._lock:
            user = self._by_username(username)
            if user is None:
                return None
            ids = user.movies_in(movie_list)
            # $pull removes every occurrence
            ids[:] = [m for m in ids if m != movie_id]
            return copy.deepcopy(user)
