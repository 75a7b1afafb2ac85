# signal_writer/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Clinical Signal Writer")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # generation service
    ANTHROPIC_API_KEY: str | None = None
    ANTHROPIC_API_URL: str = Field(default="https://api.anthropic.com/v1/messages")
    ANTHROPIC_VERSION: str = Field(default="2023-06-01")
    USE_ANTHROPIC: bool = Field(default=False)

    # unset -> generate/config.yaml decides
    SIGNAL_MODEL: str | None = None
    SIGNAL_MAX_TOKENS: int | None = None
    REQUEST_TIMEOUT: float | None = None

    # form limits (enforced by the surfaces, not the core)
    MAX_WORDS: int = Field(default=50)
    MAX_CHARS: int = Field(default=350)

    EXPORT_FILENAME: str = Field(default="clinical-signal.txt")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def use_anthropic(self) -> bool:
        return self.USE_ANTHROPIC or bool(self.ANTHROPIC_API_KEY)


settings = Settings()
