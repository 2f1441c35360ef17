"""
Unit Tests for Support Assistant

Tests history handling, greetings and when replies are voiced.
"""

import asyncio
import time
from typing import Sequence

import pytest

from peerhaven.domain.enums.matching import IntentKind
from peerhaven.domain.models.conversation import ConversationTurn, TurnRole
from peerhaven.infrastructure.speech.provider import SpeechOptions, SpeechProvider, Voice
from peerhaven.infrastructure.speech.speech_service import STATUS_CONNECTED, STATUS_FALLBACK, SpeechService
from peerhaven.infrastructure.stores.memory import InMemoryContactStore, InMemoryKnowledgeStore
from peerhaven.services.assistant.support_assistant import SupportAssistant
from peerhaven.services.matching.intent_classifier import IntentClassifier
from peerhaven.services.matching.response_composer import ResponseComposer


class RecordingProvider(SpeechProvider):
    """Provider that records what it was asked to say."""
    
    def __init__(self) -> None:
        self.spoken: list[str] = []
    
    @property
    def provider_name(self) -> str:
        return "recording"
    
    def is_configured(self) -> bool:
        return True
    
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        self.spoken.append(text)
        return b"ID3audio"
    
    async def list_voices(self) -> Sequence[Voice]:
        return ()


class SlowProvider(RecordingProvider):
    """Provider that takes a long time to synthesize."""
    
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        await asyncio.sleep(2.0)
        return await super().synthesize(text, options)


class FailingProvider(RecordingProvider):
    
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        raise RuntimeError("synthesizer crashed")


class TestSupportAssistant:
    """Test suite for SupportAssistant."""
    
    @pytest.fixture
    def provider(self) -> RecordingProvider:
        return RecordingProvider()
    
    @pytest.fixture
    def assistant(
        self,
        knowledge_store: InMemoryKnowledgeStore,
        contact_store: InMemoryContactStore,
        provider: RecordingProvider,
    ) -> SupportAssistant:
        composer = ResponseComposer(knowledge_store, contact_store, timeout_seconds=1.0)
        return SupportAssistant(IntentClassifier(), composer, SpeechService(provider))
    
    async def test_respond_returns_new_history(self, assistant: SupportAssistant) -> None:
        """Test that history is extended as a new value, never mutated."""
        history = assistant.start()
        
        response, new_history = await assistant.respond("I'm feeling anxious", history)
        
        assert len(history) == 1
        assert len(new_history) == 3
        assert new_history[:1] == history
        assert new_history[1].role == TurnRole.USER
        assert new_history[1].content == "I'm feeling anxious"
        assert new_history[2].role == TurnRole.ASSISTANT
        assert new_history[2].response == response
    
    async def test_history_accumulates_over_turns(self, assistant: SupportAssistant) -> None:
        history: tuple[ConversationTurn, ...] = ()
        for message in ("hello", "my job is stressful", "thanks"):
            _, history = await assistant.respond(message, history, speak=False)
        
        assert [turn.role for turn in history] == [TurnRole.USER, TurnRole.ASSISTANT] * 3
    
    async def test_crisis_reply_is_voiced(self, assistant: SupportAssistant, provider: RecordingProvider) -> None:
        reply = await assistant.converse("I want to kill myself")
        
        assert reply.intent.kind == IntentKind.CRISIS
        assert reply.response.urgent
        assert provider.spoken == [reply.response.text]
        assert reply.speech_status == STATUS_CONNECTED
    
    async def test_voice_request_is_voiced(self, assistant: SupportAssistant, provider: RecordingProvider) -> None:
        reply = await assistant.converse("Can you speak to me?")
        
        assert reply.intent.kind == IntentKind.VOICE_REQUEST
        assert len(provider.spoken) == 1
    
    async def test_ordinary_reply_is_not_voiced(self, assistant: SupportAssistant, provider: RecordingProvider) -> None:
        reply = await assistant.converse("I'm feeling anxious")
        
        assert provider.spoken == []
        assert reply.speech_status is None
    
    async def test_speak_flag_disables_voice(self, assistant: SupportAssistant, provider: RecordingProvider) -> None:
        await assistant.converse("I want to die", speak=False)
        
        assert provider.spoken == []
    
    async def test_slow_speech_does_not_hold_crisis_reply(
        self,
        knowledge_store: InMemoryKnowledgeStore,
        contact_store: InMemoryContactStore,
    ) -> None:
        """Test that the reply is sent without audio once the speech timeout passes."""
        composer = ResponseComposer(knowledge_store, contact_store, timeout_seconds=1.0)
        assistant = SupportAssistant(
            IntentClassifier(), composer, SpeechService(SlowProvider()), speech_timeout_seconds=0.05
        )
        
        started = time.monotonic()
        reply = await assistant.converse("I want to kill myself")
        
        assert time.monotonic() - started < 1.0
        assert reply.response.urgent
        assert len(reply.response.contacts) == 3
        assert not reply.speech.spoken
        assert reply.speech_status == STATUS_FALLBACK
    
    async def test_crashing_speech_does_not_break_crisis_reply(
        self,
        knowledge_store: InMemoryKnowledgeStore,
        contact_store: InMemoryContactStore,
    ) -> None:
        composer = ResponseComposer(knowledge_store, contact_store, timeout_seconds=1.0)
        assistant = SupportAssistant(IntentClassifier(), composer, SpeechService(FailingProvider()))
        
        reply = await assistant.converse("I want to kill myself")
        
        assert reply.intent.kind == IntentKind.CRISIS
        assert len(reply.response.contacts) == 3
        assert reply.speech_status == STATUS_FALLBACK
    
    async def test_missing_speech_does_not_change_reply(
        self,
        knowledge_store: InMemoryKnowledgeStore,
        contact_store: InMemoryContactStore,
    ) -> None:
        """Test that a silent fallback leaves the composed reply intact."""
        composer = ResponseComposer(knowledge_store, contact_store, timeout_seconds=1.0)
        assistant = SupportAssistant(IntentClassifier(), composer, SpeechService())
        
        reply = await assistant.converse("I want to kill myself")
        
        assert reply.response.urgent
        assert len(reply.response.contacts) == 3
        assert reply.speech is not None
        assert not reply.speech.spoken
        assert reply.speech_status == STATUS_FALLBACK
    
    def test_default_greeting(self) -> None:
        assert "AI support assistant" in SupportAssistant.greeting()
    
    def test_helper_greeting(self) -> None:
        greeting = SupportAssistant.greeting("Sarah Johnson", "mental-health")
        
        assert greeting.startswith("Hello! I'm Sarah Johnson's AI assistant")
        assert "mental-health" in greeting
    
    def test_helper_greeting_ignores_unknown_category(self) -> None:
        greeting = SupportAssistant.greeting("Sarah Johnson", "astrology")
        
        assert "astrology" not in greeting
    
    def test_start_with_helper(self, assistant: SupportAssistant) -> None:
        history = assistant.start("Michael Chen", "career")
        
        assert len(history) == 1
        assert history[0].role == TurnRole.ASSISTANT
        assert "Michael Chen" in history[0].content
