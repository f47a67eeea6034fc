from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from ..errors import DocumentFormatError, InvalidArgumentError, StoreWriteError
from ..metrics import memories_added_total
from .models import Memory, MindPalace, Room


def require_text(value: object, field: str) -> str:
    """Return ``value`` unchanged, or raise if it is not a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field} must be a non-empty string, got {value!r}")
    return value


def dumps(palace: MindPalace) -> str:
    """Serialize ``palace`` the way it is written to disk."""
    return json.dumps(palace.to_document(), indent=2, ensure_ascii=False)


def _salvage(document: dict) -> tuple[MindPalace, int]:
    """Keep every room and memory of ``document`` that validates.

    Returns the palace and the number of entries left out.
    """
    dropped = 0
    rooms: list[Room] = []
    for raw_room in document["Rooms"]:
        if isinstance(raw_room, dict) and isinstance(raw_room.get("Memories"), list):
            memories = []
            for raw_memory in raw_room["Memories"]:
                try:
                    memories.append(Memory.model_validate(raw_memory))
                except ValidationError:
                    dropped += 1
            raw_room = {**raw_room, "Memories": memories}
        try:
            rooms.append(Room.model_validate(raw_room))
        except ValidationError:
            dropped += 1
    extras = {key: value for key, value in document.items() if key != "Rooms"}
    try:
        return MindPalace.model_validate({**extras, "Rooms": rooms}), dropped
    except ValidationError:
        return MindPalace(rooms=rooms), dropped + 1


class PalaceStore:
    """JSON file holding the whole palace.

    Every call reads or rewrites the full document; nothing is cached between
    calls. A missing document, or one that is not a JSON object with a
    ``Rooms`` list, loads as an empty palace. Entries that do not fit the
    schema are left out of reads, and writes are refused while they exist.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.log = logging.getLogger(__name__)

    def _read_document(self) -> dict | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            self.log.warning(
                "palace_unreadable",
                extra={"event_type": "palace_unreadable", "error_category": "storage"},
                exc_info=exc,
            )
            return None

        if not raw.strip():
            return None
        try:
            document = json.loads(raw)
        except json.JSONDecodeError:
            document = None
        if not isinstance(document, dict) or not isinstance(document.get("Rooms"), list):
            self.log.warning(
                "palace_invalid %s",
                self.path,
                extra={"event_type": "palace_invalid", "error_category": "storage"},
            )
            return None
        return document

    def _parse(self) -> tuple[MindPalace, int]:
        document = self._read_document()
        if document is None:
            return MindPalace(), 0
        try:
            return MindPalace.model_validate(document), 0
        except ValidationError:
            palace, dropped = _salvage(document)
        self.log.warning(
            "palace_entries_skipped %s: %d",
            self.path,
            dropped,
            extra={"event_type": "palace_entries_skipped", "error_category": "storage"},
        )
        return palace, dropped

    def load(self) -> MindPalace:
        return self._parse()[0]

    def save(self, palace: MindPalace) -> None:
        text = dumps(palace)
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StoreWriteError(f"could not write {self.path}: {exc}") from exc

    def add_memory(self, room: str, description: str, *, day: date | None = None) -> Memory:
        """File ``description`` under the room named exactly ``room``.

        The room is created when no room has that name. Raises
        :class:`DocumentFormatError` without writing when the document holds
        entries that could not be read.
        """
        room = require_text(room, "room")
        description = require_text(description, "description")

        palace, dropped = self._parse()
        if dropped:
            raise DocumentFormatError(
                f"{self.path} has {dropped} malformed entr{'y' if dropped == 1 else 'ies'}; "
                "fix the file before adding memories"
            )
        target = palace.get_room(room)
        if target is None:
            target = Room(name=room)
            palace.rooms.append(target)
            self.log.info("room_created", extra={"event_type": "room_created", "room": room})

        memory = Memory(day=(day or date.today()).isoformat(), description=description)
        target.memories.append(memory)
        self.save(palace)

        memories_added_total.inc()
        self.log.info(
            "memory_added",
            extra={
                "event_type": "memory_added",
                "room": room,
                "memories_total": len(target.memories),
            },
        )
        return memory

    def room_names(self) -> list[str]:
        return [room.name for room in self.load().rooms]
