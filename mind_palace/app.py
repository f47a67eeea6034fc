from __future__ import annotations

import logging
from collections.abc import Callable

from .assistant.base import ChatModel
from .config import Settings, get_settings
from .errors import ErrorCategory, MindPalaceError
from .logging import configure_logging
from .store.models import Memory
from .store.palace import PalaceStore

PROMPT = 'Enter a memory, ask a question, or search memories (type "exit" to quit): '


def format_memory(memory: Memory) -> str:
    return f"Day: {memory.day}, Description: {memory.description}"


def report_search(room: str, memories: list[Memory], echo: Callable[[str], object]) -> None:
    if not memories:
        echo(f'No matching memories found in room "{room}".')
        return
    echo(f'Matching memories in room "{room}":')
    for memory in memories:
        echo(format_memory(memory))


async def run(
    settings: Settings | None = None,
    *,
    model: ChatModel | None = None,
    store: PalaceStore | None = None,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], object] = print,
) -> None:
    """Run the interactive assistant until the user types ``exit``."""

    configure_logging()
    settings = settings or get_settings()

    # Lazy imports keep the openai client off the store-only code paths.
    from openai import OpenAIError

    from .assistant.conversation import ConversationContext
    from .assistant.openai_impl import OpenAIChatModel
    from .assistant.orchestrator import Assistant

    log = logging.getLogger(__name__)

    store = store or PalaceStore(settings.palace_path)
    model = model or OpenAIChatModel(settings=settings)
    assistant = Assistant(store, model, settings)
    context = ConversationContext(max_turns=settings.history_turns)

    log.info(
        "assistant starting",
        extra={"event_type": "assistant_start", "palace": str(store.path)},
    )

    while True:
        try:
            utterance = prompt(PROMPT)
        except (EOFError, KeyboardInterrupt):
            echo("Goodbye!")
            return

        if utterance.strip().lower() == "exit":
            echo("Goodbye!")
            return
        if not utterance.strip():
            continue

        try:
            result = await assistant.handle(context, utterance)
        except (MindPalaceError, OpenAIError) as exc:
            category = getattr(exc, "category", ErrorCategory.API)
            log.error(
                "turn_failed",
                extra={"event_type": "turn_failed", "error_category": category.value},
            )
            echo(f"Error: {exc}")
            echo("")
            continue

        echo(result.reply)
        if result.intent.kind == "add":
            echo("Memory added successfully!")
        elif result.intent.kind == "search":
            report_search(result.intent.room or "", result.memories, echo)
        echo("")
