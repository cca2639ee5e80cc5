# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

T = TypeVar("T")
Key = Union[Type[Any], str]


class BaseContainer:
    """
    Registry of shared instances.

    Keys are the abstract type an instance satisfies (UserRepository,
    PasswordHasher, ...) or a plain string for infrastructure handles such
    as "mongo_client". Everything registered lives for the life of the
    process; the container never builds anything on lookup.
    """

    def __init__(self) -> None:
        self._instances: Dict[Key, Any] = {}

    def register_singleton(self, key: Union[Type[T], str], instance: T) -> None:
        """Register `instance` under `key`, replacing any earlier registration."""
        self._instances[key] = instance

    def get(self, key: Union[Type[T], str]) -> T:
        """
        Return the instance registered under `key`.

        Raises:
            ValueError: If nothing is registered under `key`
        """
        try:
            return self._instances[key]
        except KeyError:
            name = key if isinstance(key, str) else key.__name__
            raise ValueError(f"No registration found for {name}") from None
