# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_JWT_SECRET = "change_this_secret_in_production"
DEFAULT_CORS_ORIGINS = "https://velora-client-wheat.vercel.app,http://localhost:3000"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with defaults that are
    fine for local development and must be overridden in production.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5000"))
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "production").lower()
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.locale: Final[str] = os.getenv("LOCALE", "en").lower()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "atelie")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # CORS
        self.cors_allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]

    @property
    def expose_error_details(self) -> bool:
        """Error responses carry the underlying error text outside production"""
        return self.environment != "production"

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET


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
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
