"""Speech synthesis infrastructure."""

from peerhaven.infrastructure.speech.elevenlabs_provider import ElevenLabsProvider
from peerhaven.infrastructure.speech.provider import (
    SpeechOptions,
    SpeechProvider,
    SpeechResult,
    Voice,
)
from peerhaven.infrastructure.speech.silent_provider import SilentSpeechProvider
from peerhaven.infrastructure.speech.speech_service import SpeechService

__all__ = [
    "ElevenLabsProvider",
    "SpeechOptions",
    "SpeechProvider",
    "SpeechResult",
    "Voice",
    "SilentSpeechProvider",
    "SpeechService",
]
