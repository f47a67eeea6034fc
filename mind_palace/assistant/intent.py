"""Interpret the chat model's reply as an add, a search, or a plain answer."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Literal

IntentKind = Literal["add", "search", "answer"]

_FENCE_RE = re.compile(r"^```[\w-]*\s*\n?(.*?)\n?```$", re.DOTALL)


@dataclass
class Intent:
    kind: IntentKind
    text: str
    room: str | None = None
    description: str | None = None
    keywords: list[str] = field(default_factory=list)


def _nonempty(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _load_object(text: str) -> dict | None:
    body = text.strip()
    fenced = _FENCE_RE.match(body)
    if fenced:
        body = fenced.group(1).strip()
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def parse_reply(text: str) -> Intent:
    """Classify ``text``.

    ``{"room", "memory"}`` is an add, ``{"room", "keywords"}`` a search;
    anything else, including prose and malformed JSON, is an answer.
    """

    data = _load_object(text)
    if data is None or not _nonempty(data.get("room")):
        return Intent(kind="answer", text=text)

    room = data["room"]
    memory = data.get("memory")
    if _nonempty(memory):
        return Intent(kind="add", text=text, room=room, description=memory)

    keywords = data.get("keywords")
    if isinstance(keywords, str):
        keywords = [keywords]
    if isinstance(keywords, list) and keywords and all(isinstance(k, str) for k in keywords):
        return Intent(kind="search", text=text, room=room, keywords=list(keywords))

    return Intent(kind="answer", text=text)
