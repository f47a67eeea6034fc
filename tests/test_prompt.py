import json
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mind_palace.assistant.prompt import render_palace, render_system_prompt
from mind_palace.store.models import Memory, MindPalace, Room


def _palace() -> MindPalace:
    return MindPalace(
        rooms=[Room(name="Pets", memories=[Memory(day="2024-03-01", description="Rex ate")])]
    )


def test_render_palace_uses_document_keys():
    data = json.loads(render_palace(_palace()))
    assert data == {
        "Rooms": [{"Name": "Pets", "Memories": [{"Day": "2024-03-01", "Description": "Rex ate"}]}]
    }


def test_system_prompt_mentions_user_rooms_date_and_palace():
    palace = _palace()
    text = render_system_prompt(
        palace, user_name="Ada", room_names=["Pets", "Work"], today=date(2024, 3, 2)
    )
    assert "Ada's brain" in text
    assert "[Pets, Work]" in text
    assert "Today's date is 2024-03-02." in text
    assert render_palace(palace) in text
    assert '"memory": "memory_description"' in text
    assert '"keywords": ["keyword", "..."]' in text


def test_system_prompt_defaults_to_people_room():
    text = render_system_prompt(MindPalace(), user_name="Ada", today=date(2024, 3, 2))
    assert "[People]" in text
    assert '{"Rooms":[]}' in text
