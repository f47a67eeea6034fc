from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import Settings
from ..metrics import turns_total
from ..store.models import Memory
from ..store.palace import PalaceStore
from ..store.query import fetch_memories
from .base import ChatModel
from .conversation import ConversationContext, Turn
from .intent import Intent, parse_reply
from .prompt import render_system_prompt

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    intent: Intent
    reply: str
    memory: Memory | None = None
    memories: list[Memory] = field(default_factory=list)


class Assistant:
    """Route each utterance through the chat model and into the store."""

    def __init__(self, store: PalaceStore, model: ChatModel, settings: Settings) -> None:
        self.store = store
        self.model = model
        self.settings = settings

    def build_messages(self, context: ConversationContext, utterance: str) -> list[dict[str, str]]:
        palace = self.store.load()
        system = render_system_prompt(
            palace,
            user_name=self.settings.user_name,
            room_names=[room.name for room in palace.rooms],
        )
        return [
            {"role": "system", "content": system},
            *context.as_messages(),
            {"role": "user", "content": utterance},
        ]

    async def handle(self, context: ConversationContext, utterance: str) -> TurnResult:
        """Run one turn and record it in ``context``."""

        turns_total.inc()
        reply = await self.model.complete(self.build_messages(context, utterance))
        intent = parse_reply(reply)
        logger.info(
            "turn_classified",
            extra={"event_type": "turn_classified", "intent": intent.kind, "room": intent.room},
        )

        result = TurnResult(intent=intent, reply=reply)
        if intent.kind == "add":
            result.memory = self.store.add_memory(intent.room, intent.description)
        elif intent.kind == "search":
            result.memories = fetch_memories(self.store, intent.room, intent.keywords)

        context.append(Turn(role="user", text=utterance))
        context.append(Turn(role="assistant", text=reply))
        return result
