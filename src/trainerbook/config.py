from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRAINERBOOK_",
        case_sensitive=False,
    )

    # App
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    db_url: str = "sqlite+aiosqlite:///./trainerbook.db"

    # Slots
    slot_granularity_minutes: int = Field(default=30, gt=0)
    dedupe_slots: bool = False  # keep overlapping windows' duplicates by default


def get_settings() -> Settings:
    return Settings()
