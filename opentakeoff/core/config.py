# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "opentakeoff")
        self.mongo_ensure_indexes: Final[bool] = (
            os.getenv("MONGO_ENSURE_INDEXES", "true").lower() == "true"
        )

        # History Configuration
        self.history_max_entries: Final[int] = int(os.getenv("HISTORY_MAX_ENTRIES", "100"))

        # Pagination Configuration
        self.pagination_default_limit: Final[int] = int(os.getenv("PAGINATION_DEFAULT_LIMIT", "50"))
        self.pagination_max_limit: Final[int] = int(os.getenv("PAGINATION_MAX_LIMIT", "100"))

        # HTTP Configuration
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
        )
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")
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
