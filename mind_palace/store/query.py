"""Keyword search over a single room."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import InvalidArgumentError
from ..metrics import searches_total
from .models import Memory
from .palace import PalaceStore, require_text

logger = logging.getLogger(__name__)


def _normalize_keywords(keywords: Iterable[str]) -> list[str]:
    if isinstance(keywords, str):
        raise InvalidArgumentError("keywords must be a list of strings, not a single string")
    needles: list[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str):
            raise InvalidArgumentError(f"keywords must be strings, got {keyword!r}")
        if keyword.strip():
            needles.append(keyword.casefold())
    return needles


def fetch_memories(store: PalaceStore, room: str, keywords: Iterable[str]) -> list[Memory]:
    """Return memories of ``room`` mentioning any of ``keywords``.

    The room is matched ignoring case. A memory matches when its description
    contains at least one keyword as a case-insensitive substring, surrounding
    whitespace included. Blank keywords are ignored. Results keep the stored
    order; an unknown room gives an empty list.
    """

    room = require_text(room, "room")
    needles = _normalize_keywords(keywords)

    searches_total.inc()
    target = store.load().find_room(room)
    if target is None or not needles:
        matches: list[Memory] = []
    else:
        matches = [
            memory
            for memory in target.memories
            if any(needle in memory.description.casefold() for needle in needles)
        ]

    logger.info(
        "memories_fetched",
        extra={"event_type": "memories_fetched", "room": room, "memories_total": len(matches)},
    )
    return matches
