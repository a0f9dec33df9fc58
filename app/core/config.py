"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Gym App"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Dev server
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "gymapp"

    # Full SQLAlchemy URL, takes precedence over the parts above
    DATABASE_URL: Optional[str] = None

    # Credentials
    PASSWORD_LENGTH: int = 10
    BCRYPT_ROUNDS: int = 12

    # Seeded by init_db
    DEFAULT_TRAINING_TYPES: List[str] = ["Fitness", "Yoga", "Zumba", "Stretching", "Resistance", "Pilates"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def sqlalchemy_database_uri(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
