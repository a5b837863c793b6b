# config.py

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Settings loaded from ORDER_API_* environment variables or a local .env file
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORDER_API_", env_file=".env", extra="ignore")

    service_name: str = Field(default="order-api", description="Service name")
    db_file: str = Field(default="orders.db", description="SQLite database file")
    log_level: str = Field(default="INFO", description="Log level for the order api logger")
    cors_origins: str = Field(default="*", description="Comma-separated origins allowed to call the API, * for any")

    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """ Return the process-wide settings instance. """
    return Settings()
