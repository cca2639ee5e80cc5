# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Database Configuration
        # CONNECTION_URI is the name used by the hosted deployment; MONGO_URI is accepted too
        self.mongo_uri: Final[str] = (
            os.getenv("CONNECTION_URI")
            or os.getenv("MONGO_URI")
            or "mongodb://localhost:27017"
        )
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "myFlixDB")

        # "mongo" | "memory"
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").lower()

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.movies_collection: Final[str] = os.getenv("MOVIES_COLLECTION", "movies")
        self.beers_collection: Final[str] = os.getenv("BEERS_COLLECTION", "beers")
        self.breweries_collection: Final[str] = os.getenv("BREWERIES_COLLECTION", "breweries")

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8080"))

        # Authentication Configuration
        self.jwt_secret: Final[str] = os.getenv("JWT_SECRET", "your_jwt_secret")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expire_minutes: Final[int] = int(
            os.getenv("JWT_EXPIRE_MINUTES", str(7 * 24 * 60))  # 7 days
        )
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Validation Configuration
        self.username_min_length: Final[int] = int(os.getenv("USERNAME_MIN_LENGTH", "5"))
        self.unique_email: Final[bool] = _env_bool("UNIQUE_EMAIL", "false")

        # CORS Configuration (comma-separated)
        self.allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "ALLOWED_ORIGINS",
                "http://localhost:8080,http://testsite.com",
            ).split(",")
            if origin.strip()
        ]

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
