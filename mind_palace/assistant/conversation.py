from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

Role = Literal["user", "assistant"]


@dataclass
class Turn:
    role: Role
    text: str


@dataclass
class ConversationContext:
    """Chat history for one interactive session.

    Owned by the caller and passed into every turn; only the newest
    ``max_turns`` turns are kept.
    """

    max_turns: int = 20
    history: list[Turn] = field(default_factory=list)

    def append(self, turn: Turn) -> None:
        logging.getLogger(__name__).debug("append_turn", extra={"role": turn.role})
        self.history.append(turn)
        overflow = len(self.history) - self.max_turns
        if overflow > 0:
            del self.history[:overflow]

    def as_messages(self) -> list[dict[str, str]]:
        return [{"role": turn.role, "content": turn.text} for turn in self.history]
