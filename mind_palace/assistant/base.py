from __future__ import annotations

from typing import Protocol


class ChatModel(Protocol):
    async def complete(self, messages: list[dict[str, str]]) -> str:  # noqa: D401
        """Return the assistant reply for chat-completion style ``messages``."""
