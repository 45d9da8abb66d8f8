from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # MongoDB
    mongodb_uri: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URI")
    mongodb_db_name: str = Field(default="pidgeot", alias="MONGODB_DB_NAME")

    # Pagination
    default_page_size: int = Field(default=50, gt=0, alias="PIDGEOT_DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=500, gt=0, alias="PIDGEOT_MAX_PAGE_SIZE")
    default_base_path: str = Field(default="/", alias="PIDGEOT_DEFAULT_BASE_PATH")


@lru_cache
def get_settings() -> Settings:
    return Settings()
