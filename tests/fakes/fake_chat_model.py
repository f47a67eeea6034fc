from __future__ import annotations

import json


class FakeChatModel:
    """Replays canned replies and records the messages it was sent."""

    def __init__(self, replies: list[str | Exception]):
        self._replies = list(replies)
        self.calls: list[list[dict[str, str]]] = []

    async def complete(self, messages: list[dict[str, str]]) -> str:
        self.calls.append(messages)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def add_reply(room: str, memory: str) -> str:
    return json.dumps({"room": room, "memory": memory}, indent=2)


def search_reply(room: str, keywords: list[str]) -> str:
    return json.dumps({"room": room, "keywords": keywords})
