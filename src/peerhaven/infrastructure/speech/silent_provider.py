"""
Silent Speech Provider

Fallback used when no speech service is reachable. Server-side
there is no local synthesizer, so the fallback produces no audio
and leaves playback to the client's own speech engine.
"""

from typing import Sequence

from peerhaven.domain.errors import SpeechUnavailableError
from peerhaven.infrastructure.speech.provider import SpeechOptions, SpeechProvider, Voice


class SilentSpeechProvider(SpeechProvider):
    """No-op provider with the client's built-in voices."""
    
    FALLBACK_VOICES: tuple[Voice, ...] = (
        Voice(
            voice_id="web-speech-female",
            name="System Female Voice",
            category="generated",
            description="Browser built-in female voice",
        ),
        Voice(
            voice_id="web-speech-male",
            name="System Male Voice",
            category="generated",
            description="Browser built-in male voice",
        ),
    )
    
    @property
    def provider_name(self) -> str:
        return "silent"
    
    def is_configured(self) -> bool:
        return True
    
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        raise SpeechUnavailableError(self.provider_name, "speech synthesis not available")
    
    async def list_voices(self) -> Sequence[Voice]:
        return self.FALLBACK_VOICES
