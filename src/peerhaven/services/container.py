"""
Service Container

Builds and owns the long-lived collaborators of the application:
stores, speech capability, and the services built on top of them.

ARCHITECTURE: The matching core itself is stateless. The container
only holds the store/speech handles it is wired to, and is created
once during application startup.
"""

from typing import Optional

from peerhaven.config.logging_config import get_logger
from peerhaven.config.settings import Settings
from peerhaven.infrastructure.database.connection import DatabaseManager
from peerhaven.infrastructure.speech.elevenlabs_provider import ElevenLabsProvider
from peerhaven.infrastructure.speech.speech_service import SpeechService
from peerhaven.infrastructure.stores.base import ContactStore, HelperStore, KnowledgeStore
from peerhaven.infrastructure.stores.memory import (
    InMemoryContactStore,
    InMemoryHelperStore,
    InMemoryKnowledgeStore,
    SeedData,
)
from peerhaven.infrastructure.stores.sql import SqlContactStore, SqlHelperStore, SqlKnowledgeStore
from peerhaven.services.assistant.support_assistant import SupportAssistant
from peerhaven.services.matching.helper_ranking import HelperRankingEngine
from peerhaven.services.matching.intent_classifier import IntentClassifier
from peerhaven.services.matching.response_composer import ResponseComposer
from peerhaven.services.search.helper_search import HelperSearchService
from peerhaven.services.search.resource_directory import ResourceDirectory

logger = get_logger(__name__)


class ServiceContainer:
    """
    Application service wiring.
    
    Usage:
        container = ServiceContainer.from_settings(settings)
        await container.initialize()
        reply = await container.assistant.converse("hello")
        await container.shutdown()
    """
    
    def __init__(
        self,
        knowledge_store: KnowledgeStore,
        contact_store: ContactStore,
        helper_store: HelperStore,
        speech: Optional[SpeechService] = None,
        db: Optional[DatabaseManager] = None,
        timeout_seconds: float = 2.0,
        speech_timeout_seconds: float = 3.0,
    ) -> None:
        """
        Wire services over the given stores.
        
        Args:
            knowledge_store: Knowledge base access
            contact_store: Emergency contact access
            helper_store: Helper listing access
            speech: Speech capability (silent fallback when None)
            db: Database manager owned by the container, if any
            timeout_seconds: Upper bound for each store fetch
            speech_timeout_seconds: Upper bound on voicing an assistant reply
        """
        self.knowledge_store = knowledge_store
        self.contact_store = contact_store
        self.helper_store = helper_store
        self.speech = speech or SpeechService()
        self._db = db
        self.store_timeout = timeout_seconds
        
        self.classifier = IntentClassifier()
        self.composer = ResponseComposer(knowledge_store, contact_store, timeout_seconds)
        self.assistant = SupportAssistant(
            self.classifier, self.composer, self.speech, speech_timeout_seconds
        )
        self.helper_search = HelperSearchService(helper_store, HelperRankingEngine(), timeout_seconds)
        self.resources = ResourceDirectory(contact_store, timeout_seconds=timeout_seconds)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContainer":
        """
        Build stores and speech from configuration.
        
        The memory backend loads the seed document immediately; the
        database backend connects in initialize().
        """
        timeout = settings.store.timeout_seconds
        speech = SpeechService(ElevenLabsProvider(settings.speech))
        
        if settings.store.backend == "database":
            db = DatabaseManager(settings.database)
            return cls(
                SqlKnowledgeStore(db),
                SqlContactStore(db),
                SqlHelperStore(db),
                speech=speech,
                db=db,
                timeout_seconds=timeout,
                speech_timeout_seconds=settings.speech.reply_timeout_seconds,
            )
        
        seed = SeedData.load(settings.store.seed_path)
        return cls(
            InMemoryKnowledgeStore(seed.knowledge),
            InMemoryContactStore(seed.contacts),
            InMemoryHelperStore(seed.helpers),
            speech=speech,
            timeout_seconds=timeout,
            speech_timeout_seconds=settings.speech.reply_timeout_seconds,
        )
    
    async def initialize(self) -> None:
        """Open connections. Called once during application startup."""
        if self._db is not None:
            await self._db.initialize()
        logger.info(
            "Service container initialized",
            database=self._db is not None,
            speech_status=self.speech.status(),
        )
    
    async def shutdown(self) -> None:
        """Release connections. Called during application shutdown."""
        await self.speech.close()
        if self._db is not None:
            await self._db.close()
        logger.info("Service container shut down")
    
    async def health_check(self) -> dict[str, bool]:
        """
        Check health of all components.
        
        Returns:
            Dictionary of component health statuses
        """
        components = {
            "knowledge_store": await self.knowledge_store.health_check(),
            "contact_store": await self.contact_store.health_check(),
            "helper_store": await self.helper_store.health_check(),
            "speech": self.speech.is_available(),
        }
        if self._db is not None:
            components["database"] = await self._db.health_check()
        return components


_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global service container."""
    if _container is None:
        raise RuntimeError("Service container not initialized")
    return _container


def set_container(container: Optional[ServiceContainer]) -> None:
    """Install (or clear) the global service container."""
    global _container
    _container = container
