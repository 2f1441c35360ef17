"""
Speech Service

Speech capability with a defined fallback contract: try the
primary provider, degrade to the silent fallback, never raise.
"""

from typing import Optional, Sequence

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.errors import SpeechUnavailableError
from peerhaven.infrastructure.metrics.prometheus_metrics import track_speech_request
from peerhaven.infrastructure.speech.provider import (
    SpeechOptions,
    SpeechProvider,
    SpeechResult,
    Voice,
)
from peerhaven.infrastructure.speech.silent_provider import SilentSpeechProvider

logger = get_logger(__name__)

STATUS_CONNECTED = "ElevenLabs API Connected"
STATUS_FALLBACK = "Using silent fallback (speech synthesis not available)"


class SpeechService:
    """
    Speech capability used by the assistant and the speech API.
    
    Usage:
        service = SpeechService(ElevenLabsProvider(settings.speech))
        result = await service.speak("Hello")
        if not result.spoken:
            show(result.status)
    """
    
    def __init__(
        self,
        primary: Optional[SpeechProvider] = None,
        fallback: Optional[SpeechProvider] = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback or SilentSpeechProvider()
    
    def is_available(self) -> bool:
        """Whether a real synthesizer is configured."""
        return self._primary is not None and self._primary.is_configured()
    
    def status(self) -> str:
        return STATUS_CONNECTED if self.is_available() else STATUS_FALLBACK
    
    async def speak(self, text: str, options: Optional[SpeechOptions] = None) -> SpeechResult:
        """
        Synthesize speech, degrading silently on failure.
        
        Args:
            text: Text to speak
            options: Voice settings
            
        Returns:
            SpeechResult; audio is None when degraded
        """
        options = options or SpeechOptions()
        
        if self.is_available():
            try:
                audio = await self._primary.synthesize(text, options)
                track_speech_request(self._primary.provider_name, "spoken")
                return SpeechResult(
                    audio=audio,
                    provider=self._primary.provider_name,
                    status=STATUS_CONNECTED,
                )
            except SpeechUnavailableError as e:
                logger.warning(
                    "Speech provider failed, degrading to fallback",
                    provider=e.provider,
                    reason=e.reason,
                )
            except Exception as e:
                logger.warning(
                    "Speech provider raised unexpectedly, degrading to fallback",
                    provider=self._primary.provider_name,
                    error_type=type(e).__name__,
                )
        
        try:
            audio = await self._fallback.synthesize(text, options)
            track_speech_request(self._fallback.provider_name, "spoken")
            return SpeechResult(audio=audio, provider=self._fallback.provider_name, status=self.status())
        except SpeechUnavailableError:
            return self.degraded()
    
    def degraded(self) -> SpeechResult:
        """Result reported when nothing could be spoken."""
        track_speech_request(self._fallback.provider_name, "degraded")
        return SpeechResult(audio=None, provider=self._fallback.provider_name, status=STATUS_FALLBACK)
    
    async def list_voices(self) -> Sequence[Voice]:
        """Voices of the primary provider, or the fallback voices."""
        if self.is_available():
            try:
                voices = await self._primary.list_voices()
                if voices:
                    return voices
            except SpeechUnavailableError as e:
                logger.warning("Voice listing failed, using fallback voices", reason=e.reason)
            except Exception as e:
                logger.warning("Voice listing failed, using fallback voices", error_type=type(e).__name__)
        return await self._fallback.list_voices()
    
    async def close(self) -> None:
        if self._primary is not None:
            await self._primary.close()
        await self._fallback.close()
