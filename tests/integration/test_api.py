"""
Integration Tests - HTTP API

Exercises the FastAPI application end to end over the built-in
seed data, with speech served by a mocked ElevenLabs transport.
"""

from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from peerhaven.config import Settings
from peerhaven.config.settings import SpeechSettings
from peerhaven.infrastructure.speech.elevenlabs_provider import ElevenLabsProvider
from peerhaven.infrastructure.speech.speech_service import STATUS_CONNECTED, STATUS_FALLBACK, SpeechService
from peerhaven.infrastructure.stores.memory import (
    InMemoryContactStore,
    InMemoryHelperStore,
    InMemoryKnowledgeStore,
    SeedData,
)
from peerhaven.main import create_application
from peerhaven.services.container import ServiceContainer, get_container

AUDIO = b"ID3\x03\x00fake-mpeg"


def build_container(seed: SeedData, speech: SpeechService) -> ServiceContainer:
    return ServiceContainer(
        InMemoryKnowledgeStore(seed.knowledge),
        InMemoryContactStore(seed.contacts),
        InMemoryHelperStore(seed.helpers),
        speech=speech,
        timeout_seconds=1.0,
    )


def elevenlabs(handler) -> SpeechService:
    settings = SpeechSettings(api_key=SecretStr("test-key"), max_retries=1)
    return SpeechService(ElevenLabsProvider(settings, transport=httpx.MockTransport(handler)))


@pytest.fixture
def client(test_settings: Settings, seed: SeedData) -> Iterator[TestClient]:
    """Client with a silent speech fallback."""
    app = create_application(test_settings, build_container(seed, SpeechService()))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def voiced_client(test_settings: Settings, seed: SeedData) -> Iterator[TestClient]:
    """Client whose speech provider answers with audio."""
    speech = elevenlabs(lambda request: httpx.Response(200, content=AUDIO))
    app = create_application(test_settings, build_container(seed, speech))
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoints:
    
    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Correlation-ID" in response.headers
    
    def test_correlation_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/v1/health/live", headers={"X-Correlation-ID": "abc-123"})
        
        assert response.headers["X-Correlation-ID"] == "abc-123"
    
    def test_ready(self, client: TestClient) -> None:
        body = client.get("/api/v1/health/ready").json()
        
        assert body["ready"] is True
        assert body["components"]["speech"] is False
    
    def test_metrics(self, client: TestClient) -> None:
        client.post("/api/v1/assistant/classify", json={"message": "hello"})
        
        response = client.get("/metrics")
        
        assert response.status_code == 200
        assert "peerhaven_intents_classified_total" in response.text


class TestAssistantEndpoints:
    
    def test_crisis_message(self, client: TestClient) -> None:
        response = client.post("/api/v1/assistant/message", json={"message": "I want to kill myself"})
        body = response.json()
        
        assert response.status_code == 200
        assert body["intent"]["kind"] == "crisis"
        assert body["intent"]["urgency"] == "critical"
        assert body["response"]["urgent"] is True
        assert [c["id"] for c in body["response"]["contacts"]] == ["ec-1", "ec-4", "ec-2"]
        assert body["speech_status"] == STATUS_FALLBACK
    
    def test_new_conversation_starts_with_greeting(self, client: TestClient) -> None:
        body = client.post(
            "/api/v1/assistant/message",
            json={"message": "I'm feeling anxious about my new job", "helper_name": "Sarah Johnson"},
        ).json()
        
        assert [turn["role"] for turn in body["history"]] == ["assistant", "user", "assistant"]
        assert "Sarah Johnson" in body["history"][0]["content"]
        assert body["intent"]["matched_category"] == "mental-health"
        assert [k["id"] for k in body["response"]["knowledge"]] == ["kb-mh-1", "kb-mh-3"]
    
    def test_history_round_trip(self, client: TestClient) -> None:
        first = client.post("/api/v1/assistant/message", json={"message": "hello"}).json()
        
        second = client.post(
            "/api/v1/assistant/message",
            json={"message": "I need study tips for my exam", "history": first["history"]},
        ).json()
        
        assert len(second["history"]) == len(first["history"]) + 2
        assert second["intent"]["matched_category"] == "education"
    
    def test_classify(self, client: TestClient) -> None:
        body = client.post("/api/v1/assistant/classify", json={"message": "Can you speak to me?"}).json()
        
        assert body["kind"] == "voice_request"
    
    def test_empty_message_is_generic(self, client: TestClient) -> None:
        body = client.post("/api/v1/assistant/message", json={"message": "   "}).json()
        
        assert body["intent"]["kind"] == "generic"
        assert body["response"]["text"]
    
    def test_greeting(self, client: TestClient) -> None:
        body = client.get("/api/v1/assistant/greeting").json()
        
        assert body["greeting"].startswith("Hello!")
        assert len(body["quick_prompts"]) == 6
    
    def test_missing_message_is_rejected(self, client: TestClient) -> None:
        assert client.post("/api/v1/assistant/message", json={}).status_code == 422


class TestHelperEndpoints:
    
    def test_search(self, client: TestClient) -> None:
        body = client.post("/api/v1/helpers/search", json={"min_rating": 4.8, "sort_key": "priceAsc"}).json()
        
        assert [h["id"] for h in body["helpers"]] == ["h-005", "h-007", "h-002", "h-001"]
        assert body["total"] == 4
        assert body["active_filters"] == ["min_rating"]
    
    def test_invalid_criteria_are_recovered(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/helpers/search",
            json={"min_rating": 42, "experience_band": "ten+", "category": "career"},
        )
        
        assert response.status_code == 200
        assert [h["id"] for h in response.json()["helpers"]] == ["h-002", "h-008"]
    
    def test_empty_body_returns_everything(self, client: TestClient) -> None:
        assert client.post("/api/v1/helpers/search", json={}).json()["total"] == 8


class TestCategoryEndpoints:
    
    def test_list(self, client: TestClient) -> None:
        body = client.get("/api/v1/categories").json()
        
        assert [c["id"] for c in body][:2] == ["mental-health", "career"]
        mental_health = body[0]
        assert mental_health["helper_count"] == 2
        assert mental_health["available_count"] == 1
    
    def test_detail_includes_mapped_contacts(self, client: TestClient) -> None:
        body = client.get("/api/v1/categories/relationships").json()
        
        assert body["contact_category"] == "domestic_violence"
        assert [c["id"] for c in body["emergency_contacts"]] == ["ec-10"]
    
    def test_unknown_category(self, client: TestClient) -> None:
        assert client.get("/api/v1/categories/astrology").status_code == 404


class TestResourceEndpoints:
    
    def test_list_by_category(self, client: TestClient) -> None:
        body = client.get("/api/v1/resources/emergency", params={"category": "crisis"}).json()
        
        assert [c["id"] for c in body["contacts"]] == ["ec-5", "ec-7", "ec-6"]
    
    def test_search_by_country(self, client: TestClient) -> None:
        body = client.get("/api/v1/resources/emergency", params={"country": "United States"}).json()
        
        assert {c["country"] for c in body["contacts"]} == {"United States", "Global"}
    
    def test_unknown_category_is_rejected(self, client: TestClient) -> None:
        assert client.get("/api/v1/resources/emergency", params={"category": "astrology"}).status_code == 400
    
    def test_triage(self, client: TestClient) -> None:
        body = client.post("/api/v1/resources/triage", json={"message": "I'm struggling with drugs"}).json()
        
        assert [c["id"] for c in body["contacts"]] == ["ec-11"]
        assert body["urgent"] is False


class TestSpeechEndpoints:
    
    def test_fallback_synthesize(self, client: TestClient) -> None:
        response = client.post("/api/v1/speech/synthesize", json={"text": "Hello"})
        
        assert response.status_code == 204
        assert response.headers["X-Speech-Status"] == STATUS_FALLBACK
    
    def test_fallback_status_and_voices(self, client: TestClient) -> None:
        status = client.get("/api/v1/speech/status").json()
        voices = client.get("/api/v1/speech/voices").json()["voices"]
        
        assert status == {"available": False, "status": STATUS_FALLBACK}
        assert [v["voice_id"] for v in voices] == ["web-speech-female", "web-speech-male"]
    
    def test_synthesize_audio(self, voiced_client: TestClient) -> None:
        response = voiced_client.post("/api/v1/speech/synthesize", json={"text": "Hello", "stability": 0.8})
        
        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.headers["X-Speech-Status"] == STATUS_CONNECTED
        assert response.content == AUDIO
    
    def test_out_of_range_voice_setting(self, voiced_client: TestClient) -> None:
        response = voiced_client.post("/api/v1/speech/synthesize", json={"text": "Hello", "stability": 2})
        
        assert response.status_code == 422
    
    def test_voice_request_is_spoken(self, voiced_client: TestClient) -> None:
        body = voiced_client.post("/api/v1/assistant/message", json={"message": "Please use your voice"}).json()
        
        assert body["intent"]["kind"] == "voice_request"
        assert body["speech_status"] == STATUS_CONNECTED


class TestErrorHandling:
    
    def test_unexpected_error_is_sanitized(self, test_settings: Settings, seed: SeedData) -> None:
        """Test that unexpected failures become a 500 with a correlation id."""
        app = create_application(test_settings, build_container(seed, SpeechService()))
        
        def broken_container() -> ServiceContainer:
            raise RuntimeError("wiring failure")
        
        app.dependency_overrides[get_container] = broken_container
        with TestClient(app) as test_client:
            response = test_client.get("/api/v1/categories")
        
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert body["correlation_id"] == response.headers["X-Correlation-ID"]
        assert "wiring failure" not in response.text


class TestKnowledgeEndpoints:
    
    def test_search(self, client: TestClient) -> None:
        body = client.get("/api/v1/knowledge/search", params={"q": "anxiety"}).json()
        
        assert body["entries"][0]["id"] == "kb-mh-1"
        assert body["total"] == len(body["entries"])
    
    def test_search_within_category(self, client: TestClient) -> None:
        body = client.get("/api/v1/knowledge/search", params={"q": "anxiety", "category": "education"}).json()
        
        assert [e["id"] for e in body["entries"]] == ["kb-ed-2"]
    
    def test_blank_query_is_rejected(self, client: TestClient) -> None:
        assert client.get("/api/v1/knowledge/search", params={"q": ""}).status_code == 422
