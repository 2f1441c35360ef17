"""
Speech Provider Abstract Interface

Defines the contract for text-to-speech providers. The matching
core never blocks on speech: failures surface as
SpeechUnavailableError and the speech service degrades silently.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class SpeechOptions:
    """
    Voice settings for a synthesis request.
    
    Attributes:
        voice_id: Provider voice id (provider default when None)
        stability: Voice stability (0.0-1.0)
        similarity_boost: Similarity boost (0.0-1.0)
        style: Style exaggeration (0.0-1.0)
        use_speaker_boost: Speaker boost toggle
    """
    
    voice_id: Optional[str] = None
    stability: float = 0.5
    similarity_boost: float = 0.5
    style: float = 0.0
    use_speaker_boost: bool = True


@dataclass(frozen=True)
class Voice:
    """A selectable voice."""
    
    voice_id: str
    name: str
    category: str
    description: str = ""
    
    def to_dict(self) -> dict:
        return {
            "voice_id": self.voice_id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
        }


@dataclass(frozen=True)
class SpeechResult:
    """
    Outcome of a speak request.
    
    Attributes:
        audio: Encoded audio (audio/mpeg) or None when degraded
        provider: Provider that handled the request
        status: Human-readable status for display
        media_type: MIME type of the audio
    """
    
    audio: Optional[bytes]
    provider: str
    status: str
    media_type: str = "audio/mpeg"
    
    @property
    def spoken(self) -> bool:
        return self.audio is not None


class SpeechProvider(ABC):
    """
    Abstract text-to-speech provider.
    
    Implementations raise SpeechUnavailableError on any failure;
    they never return partial audio.
    """
    
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name for logging/tracking."""
    
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials and settings are present."""
    
    @abstractmethod
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        """
        Synthesize speech.
        
        Raises:
            SpeechUnavailableError: On any provider failure
        """
    
    @abstractmethod
    async def list_voices(self) -> Sequence[Voice]:
        """
        List available voices.
        
        Raises:
            SpeechUnavailableError: On any provider failure
        """
    
    async def close(self) -> None:
        """Release provider resources."""
