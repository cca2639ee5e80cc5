from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all database connections in the container.
        The in-memory backend needs no connection, so nothing is registered for it.
        """
        if container.settings.storage_backend != "mongo":
            return

        # Register MongoDB client manager as singleton
        container.register_singleton("mongo_client", get_mongo_client())
