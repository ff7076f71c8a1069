from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from flashcard_relay.core.types import DEFAULT_MODEL_ID


class Settings(BaseSettings):
    openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
    # Alternate OpenAI-compatible endpoint; the SDK default is used when unset
    openai_base_url: str | None = Field(default=None, validation_alias="OPENAI_BASE_URL")
    default_model: str = Field(default=DEFAULT_MODEL_ID, validation_alias="OPENAI_MODEL")

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Frontend directory served at "/" after the API routes
    static_dir: str | None = Field(default=None, validation_alias="STATIC_DIR")
    # Comma-separated, e.g. "https://a.example,https://b.example"
    cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
