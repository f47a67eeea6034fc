from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the assistant.

    Values are loaded from environment variables by default and may be
    overridden via CLI flags by the application entrypoint.
    """

    # Provider selection
    provider: Literal["openai", "azure"] = "openai"

    # OpenAI / API configuration
    # Empty by default so the store commands and tests run without a key.
    # The chat model validates presence when it is built.
    openai_api_key: str = ""
    openai_base_url: str | None = None

    # Azure OpenAI configuration
    azure_openai_api_key: str = ""
    azure_openai_endpoint: str | None = None
    azure_openai_api_version: str = "2024-07-01-preview"
    azure_openai_deployment: str = "gpt-4o"

    # Chat model
    chat_model: str = "gpt-4o"
    temperature: float = Field(default=0.9, ge=0.0, le=2.0)

    # Storage
    palace_path: str = "mind_palace.json"

    # Conversation
    user_name: str = "Pranav"
    history_turns: PositiveInt = 20

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    def public_dump(self) -> str:
        """Settings as indented JSON with credentials left out."""
        return self.model_dump_json(
            indent=2, exclude={"openai_api_key", "azure_openai_api_key"}
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
