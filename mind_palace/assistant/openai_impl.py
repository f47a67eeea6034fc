from __future__ import annotations

import logging
from typing import Any

from ..config import Settings, get_settings
from ..errors import ConfigurationError
from ..metrics import chat_latency_ms
from .base import ChatModel


class OpenAIChatModel(ChatModel):
    """Chat model backed by the OpenAI Chat Completions API."""

    def __init__(
        self,
        *,
        client: Any | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.log = logging.getLogger(__name__)
        self.settings = settings or get_settings()
        self._client = client or self._build_client(self.settings)

    @property
    def model_name(self) -> str:
        if self.settings.provider == "azure":
            return self.settings.azure_openai_deployment
        return self.settings.chat_model

    async def complete(self, messages: list[dict[str, str]]) -> str:
        self.log.info("chat_start", extra={"event_type": "chat_start"})
        with chat_latency_ms.time():
            response = await self._client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=self.settings.temperature,
            )
        text = self._extract_text(response)
        self.log.info(
            "chat_end",
            extra={"event_type": "chat_end", "latency_ms": chat_latency_ms.last_ms},
        )
        return text

    def _build_client(self, settings: Settings) -> Any:
        if settings.provider == "azure":
            from openai import AsyncAzureOpenAI

            if not settings.azure_openai_api_key:
                raise ConfigurationError("AZURE_OPENAI_API_KEY is required for chat")
            if not settings.azure_openai_endpoint:
                raise ConfigurationError("AZURE_OPENAI_ENDPOINT is required for chat")
            return AsyncAzureOpenAI(
                api_key=settings.azure_openai_api_key,
                api_version=settings.azure_openai_api_version,
                azure_endpoint=settings.azure_openai_endpoint,
            )

        from openai import AsyncOpenAI

        if not settings.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY is required for chat")

        client_kwargs: dict[str, Any] = {"api_key": settings.openai_api_key}
        if settings.openai_base_url:
            client_kwargs["base_url"] = settings.openai_base_url
        return AsyncOpenAI(**client_kwargs)

    def _extract_text(self, response: Any) -> str:
        choices = getattr(response, "choices", None)
        if choices is None and isinstance(response, dict):
            choices = response.get("choices")
        for choice in choices or []:
            message = getattr(choice, "message", None)
            if message is None and isinstance(choice, dict):
                message = choice.get("message")
            if not message:
                continue
            content = getattr(message, "content", None)
            if content is None and isinstance(message, dict):
                content = message.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()
        return ""
