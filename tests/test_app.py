import asyncio
import sys
from datetime import date
from pathlib import Path

import openai
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mind_palace.app import PROMPT, run
from mind_palace.config import Settings
from mind_palace.store.palace import PalaceStore
from tests.fakes.fake_chat_model import FakeChatModel, add_reply, search_reply


def _drive(store, replies, inputs):
    lines: list[str] = []
    prompts: list[str] = []
    pending = iter(inputs)

    def prompt(text: str) -> str:
        prompts.append(text)
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    asyncio.run(
        run(
            Settings(palace_path=str(store.path)),
            model=FakeChatModel(replies),
            store=store,
            prompt=prompt,
            echo=lines.append,
        )
    )
    return lines, prompts


@pytest.fixture
def store(tmp_path):
    return PalaceStore(tmp_path / "mind_palace.json")


def test_exit_says_goodbye(store):
    lines, prompts = _drive(store, [], ["  EXIT "])
    assert lines == ["Goodbye!"]
    assert prompts == [PROMPT]


def test_add_then_search_scenario(store):
    today = date.today().isoformat()
    lines, _ = _drive(
        store,
        [add_reply("People", "Met Alice at the park"), search_reply("people", ["alice"])],
        ["I met Alice at the park", "When did I meet Alice?", "exit"],
    )
    assert "Memory added successfully!" in lines
    assert 'Matching memories in room "people":' in lines
    assert f"Day: {today}, Description: Met Alice at the park" in lines
    assert lines[-1] == "Goodbye!"


def test_search_without_matches(store):
    lines, _ = _drive(store, [search_reply("people", ["bob"])], ["Bob?", "exit"])
    assert 'No matching memories found in room "people".' in lines


def test_answer_is_printed_and_blank_input_skipped(store):
    lines, prompts = _drive(store, ["Hello Pranav."], ["", "hi", "exit"])
    assert lines[0] == "Hello Pranav."
    assert "Memory added successfully!" not in lines
    assert len(prompts) == 3


def test_errors_are_reported_and_loop_continues(store):
    lines, _ = _drive(
        store,
        [openai.OpenAIError("service unavailable"), "Still here."],
        ["first", "second", "exit"],
    )
    assert "Error: service unavailable" in lines
    assert "Still here." in lines


def test_write_failure_is_reported(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    store = PalaceStore(blocker / "palace.json")
    lines, _ = _drive(store, [add_reply("People", "Met Alice")], ["remember Alice", "exit"])
    assert any(line.startswith("Error: could not write") for line in lines)
    assert lines[-1] == "Goodbye!"


def test_end_of_input_stops_loop(store):
    lines, _ = _drive(store, [], [])
    assert lines == ["Goodbye!"]
