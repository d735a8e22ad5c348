"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

WorkFactorInt = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven password processor settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_work_factor: WorkFactorInt = Field(
        default=11,
        validation_alias="PASSWORD_WORK_FACTOR",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
