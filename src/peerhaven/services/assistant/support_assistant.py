"""
Support Assistant

One conversational turn: classify the message, compose a reply,
append both turns to the history and optionally voice the reply.

ARCHITECTURE: Conversation history is a value. Callers pass the
current history in and receive a new tuple back; nothing is kept
between calls, so the assistant is safe to share across requests.

SAFETY_NOTE: Message text is never logged, only its length.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.matching import IntentKind
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.conversation import ConversationTurn, History, TurnRole
from peerhaven.domain.models.intent import ComposedResponse, Intent
from peerhaven.infrastructure.metrics.prometheus_metrics import track_crisis_response, track_intent
from peerhaven.infrastructure.speech.provider import SpeechOptions, SpeechResult
from peerhaven.infrastructure.speech.speech_service import SpeechService
from peerhaven.services.matching.intent_classifier import IntentClassifier
from peerhaven.services.matching.response_composer import ResponseComposer

logger = get_logger(__name__)

QUICK_PROMPTS: tuple[str, ...] = (
    "I'm feeling anxious and need coping strategies",
    "Help me with job interview preparation",
    "I'm having relationship communication issues",
    "I need crisis support resources",
    "Can you teach me mindfulness techniques?",
    "I want to speak with voice AI",
)


@dataclass(frozen=True)
class AssistantReply:
    """Everything produced by one turn."""
    
    intent: Intent
    response: ComposedResponse
    history: History
    speech: Optional[SpeechResult] = None
    
    @property
    def speech_status(self) -> Optional[str]:
        return self.speech.status if self.speech else None


class SupportAssistant:
    """
    Scripted support assistant.
    
    Usage:
        assistant = SupportAssistant(classifier, composer, speech)
        history = assistant.start()
        response, history = await assistant.respond("I feel anxious", history)
    """
    
    def __init__(
        self,
        classifier: IntentClassifier,
        composer: ResponseComposer,
        speech: Optional[SpeechService] = None,
        speech_timeout_seconds: float = 3.0,
    ) -> None:
        self._classifier = classifier
        self._composer = composer
        self._speech = speech
        self._speech_timeout = speech_timeout_seconds
    
    @staticmethod
    def greeting(helper_name: Optional[str] = None, category: Optional[str] = None) -> str:
        """
        Opening message.
        
        Mentions the helper (and their category when it is a known
        one) when the chat is started from a helper profile.
        """
        if not helper_name:
            return (
                "Hello! I'm your AI support assistant with access to comprehensive "
                "knowledge across mental health, career, relationships, and more. "
                "I can provide expert guidance and emergency resources. "
                "What would you like to explore?"
            )
        
        known = SupportCategory.parse(category) if category else None
        speciality = f" with specialized knowledge in {known.value}" if known else ""
        return (
            f"Hello! I'm {helper_name}'s AI assistant{speciality}. "
            "I'm here to provide immediate support while you wait to connect. "
            "How can I help you today?"
        )
    
    def start(self, helper_name: Optional[str] = None, category: Optional[str] = None) -> History:
        """New history holding only the greeting turn."""
        return (ConversationTurn(role=TurnRole.ASSISTANT, content=self.greeting(helper_name, category)),)
    
    async def respond(
        self,
        utterance: str,
        history: History = (),
        speak: bool = True,
    ) -> tuple[ComposedResponse, History]:
        """
        Handle one user message.
        
        Args:
            utterance: User message
            history: Conversation so far (not modified)
            speak: Voice the reply when it warrants it
            
        Returns:
            Tuple of (reply, new history)
        """
        reply = await self.converse(utterance, history, speak=speak)
        return reply.response, reply.history
    
    async def converse(
        self,
        utterance: str,
        history: History = (),
        speak: bool = True,
        speech_options: Optional[SpeechOptions] = None,
    ) -> AssistantReply:
        """
        Handle one user message, returning the intent and speech
        outcome alongside the reply.
        """
        intent = self._classifier.classify(utterance)
        track_intent(intent.kind.value)
        
        response = await self._composer.compose(intent)
        if intent.is_crisis:
            track_crisis_response()
            logger.warning(
                "Crisis language detected",
                urgency=intent.urgency.label,
                message_length=len(utterance or ""),
                contact_count=len(response.contacts),
            )
        else:
            logger.info(
                "Assistant turn handled",
                intent=intent.kind.value,
                category=intent.matched_category.value if intent.matched_category else None,
                urgency=intent.urgency.label,
                knowledge_count=len(response.knowledge),
            )
        
        new_history = tuple(history) + (
            ConversationTurn(role=TurnRole.USER, content=utterance or ""),
            ConversationTurn(role=TurnRole.ASSISTANT, content=response.text, response=response),
        )
        
        speech = None
        if speak and self._should_speak(intent, response):
            speech = await self._voice(response.text, speech_options)
        
        return AssistantReply(intent=intent, response=response, history=new_history, speech=speech)
    
    async def _voice(self, text: str, options: Optional[SpeechOptions]) -> SpeechResult:
        """Speak the reply, giving up after the speech timeout."""
        try:
            return await asyncio.wait_for(self._speech.speak(text, options), self._speech_timeout)
        except asyncio.TimeoutError:
            logger.warning("Speech timed out, reply sent without audio", timeout_seconds=self._speech_timeout)
            return self._speech.degraded()
    
    def _should_speak(self, intent: Intent, response: ComposedResponse) -> bool:
        if self._speech is None:
            return False
        return intent.kind == IntentKind.VOICE_REQUEST or response.urgent
