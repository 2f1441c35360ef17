"""
Assistant Endpoints

Chat with the scripted support assistant. The client owns the
conversation: it sends the history it holds and receives the
updated history back.
"""

from datetime import datetime, timezone
from typing import Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from peerhaven.domain.models.conversation import ConversationTurn, History, TurnRole
from peerhaven.infrastructure.metrics.prometheus_metrics import track_intent
from peerhaven.services.assistant.support_assistant import QUICK_PROMPTS
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()

MAX_MESSAGE_LENGTH = 4000
MAX_HISTORY_TURNS = 200


# Request/Response Models

class HistoryTurn(BaseModel):
    """A conversation turn held by the client."""
    
    role: Literal["user", "assistant"]
    content: str = Field(..., max_length=MAX_MESSAGE_LENGTH)
    timestamp: Optional[datetime] = None
    
    def to_turn(self) -> ConversationTurn:
        return ConversationTurn(
            role=TurnRole(self.role),
            content=self.content,
            timestamp=self.timestamp or datetime.now(timezone.utc),
        )


class MessageRequest(BaseModel):
    """A user message with the conversation so far."""
    
    message: str = Field(..., max_length=MAX_MESSAGE_LENGTH, description="User message")
    history: list[HistoryTurn] = Field(default_factory=list, max_length=MAX_HISTORY_TURNS)
    speak: bool = Field(default=True, description="Voice urgent or voice-requested replies")
    helper_name: Optional[str] = Field(default=None, max_length=200)
    category: Optional[str] = Field(default=None, max_length=100)


class MessageResponse(BaseModel):
    """Assistant reply with the updated history."""
    
    intent: dict
    response: dict
    history: list[dict]
    speech_status: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "intent": {
                    "kind": "category_topic",
                    "matched_category": "mental-health",
                    "urgency": "none",
                    "matched_keywords": ["anxious"],
                },
                "response": {
                    "text": "I understand you're feeling anxious...",
                    "knowledge": [],
                    "contacts": [],
                    "urgent": False,
                },
                "history": [],
                "speech_status": None,
            }
        }


class ClassifyRequest(BaseModel):
    message: str = Field(..., max_length=MAX_MESSAGE_LENGTH)


class GreetingResponse(BaseModel):
    greeting: str
    quick_prompts: list[str]


@router.get(
    "/greeting",
    response_model=GreetingResponse,
    summary="Opening message",
)
async def greeting(
    helper_name: Optional[str] = None,
    category: Optional[str] = None,
    container: ServiceContainer = Depends(get_container),
) -> GreetingResponse:
    return GreetingResponse(
        greeting=container.assistant.greeting(helper_name, category),
        quick_prompts=list(QUICK_PROMPTS),
    )


@router.post(
    "/message",
    response_model=MessageResponse,
    summary="Send a message to the assistant",
)
async def send_message(
    request: MessageRequest,
    container: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    """
    Handle one conversational turn.
    
    An empty history starts a new conversation with the greeting
    (personalised when helper_name is supplied).
    """
    history: History
    if request.history:
        history = tuple(turn.to_turn() for turn in request.history)
    else:
        history = container.assistant.start(request.helper_name, request.category)
    
    reply = await container.assistant.converse(request.message, history, speak=request.speak)
    
    return MessageResponse(
        intent=reply.intent.to_dict(),
        response=reply.response.to_dict(),
        history=[turn.to_dict() for turn in reply.history],
        speech_status=reply.speech_status,
    )


@router.post(
    "/classify",
    summary="Classify a message without composing a reply",
)
async def classify_message(
    request: ClassifyRequest,
    container: ServiceContainer = Depends(get_container),
) -> dict:
    intent = container.classifier.classify(request.message)
    track_intent(intent.kind.value)
    return intent.to_dict()
