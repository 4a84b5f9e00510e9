"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    car_repository: str = "sql"  # sql or in_memory
    database_url: str = "sqlite:///./data/dealership.db"  # Used when car_repository=sql
    images_dir: str = "./data/images"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
