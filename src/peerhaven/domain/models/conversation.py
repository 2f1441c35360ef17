"""
Conversation Turn Model

Conversation history is passed into and returned from the
assistant as immutable tuples of turns. The caller owns storage
and display of the history.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

from peerhaven.domain.models.intent import ComposedResponse


class TurnRole(StrEnum):
    """Author of a conversation turn."""
    
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    """
    A single message in a conversation.
    
    Attributes:
        role: Author role
        content: Message text
        timestamp: When the turn was created (UTC)
        response: Structured reply for assistant turns
    """
    
    role: TurnRole
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    response: Optional[ComposedResponse] = None
    
    def to_dict(self) -> dict:
        data = {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.response is not None:
            data["response"] = self.response.to_dict()
        return data


History = tuple[ConversationTurn, ...]
