from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./footfall.db"

    # Application
    app_name: str = "Footfall API"
    app_version: str = "1.0.0"
    environment: str = "development"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # Seed the demo stores/entries on startup when the database is empty
    seed_demo_data: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
