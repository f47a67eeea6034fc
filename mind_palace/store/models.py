"""Typed view of the persisted palace document.

Field aliases are the exact key names of the JSON file, so documents
written by earlier versions keep loading. ``Day`` is kept as the string
found in the file and unknown keys are carried through on save, so a
hand-edited document round-trips unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Memory(BaseModel):
    """A dated note. Immutable once created."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    day: str = Field(alias="Day")
    description: str = Field(alias="Description")


class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(alias="Name")
    memories: list[Memory] = Field(default_factory=list, alias="Memories")


class MindPalace(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    rooms: list[Room] = Field(default_factory=list, alias="Rooms")

    def get_room(self, name: str) -> Room | None:
        """Return the room whose name is exactly ``name``."""
        return next((room for room in self.rooms if room.name == name), None)

    def find_room(self, name: str) -> Room | None:
        """Return the first room whose name matches ``name`` ignoring case."""
        wanted = name.casefold()
        return next((room for room in self.rooms if room.name.casefold() == wanted), None)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
