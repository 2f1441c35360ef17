"""
ElevenLabs Speech Provider

Text-to-speech over the ElevenLabs HTTP API.
Includes retries with exponential backoff for transport errors,
rate limiting and server errors.
"""

from typing import Optional, Sequence

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from peerhaven.config.logging_config import get_logger
from peerhaven.config.settings import SpeechSettings
from peerhaven.domain.errors import SpeechUnavailableError
from peerhaven.infrastructure.speech.provider import SpeechOptions, SpeechProvider, Voice

logger = get_logger(__name__)


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, SpeechUnavailableError) and error.is_retryable


class ElevenLabsProvider(SpeechProvider):
    """
    ElevenLabs API provider implementation.
    
    Usage:
        provider = ElevenLabsProvider(settings.speech)
        audio = await provider.synthesize("Hello", SpeechOptions())
    """
    
    def __init__(
        self,
        settings: SpeechSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_wait_seconds: float = 0.5,
    ) -> None:
        """
        Initialize ElevenLabs provider.
        
        Args:
            settings: Speech settings (API key, base URL, defaults)
            transport: Optional httpx transport (tests)
            retry_wait_seconds: Backoff multiplier between retries
        """
        self._api_key = settings.api_key.get_secret_value()
        self._base_url = settings.base_url.rstrip("/")
        self._default_voice_id = settings.default_voice_id
        self._model_id = settings.model_id
        self._timeout = settings.timeout_seconds
        self._max_retries = settings.max_retries
        self._retry_wait = retry_wait_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
    
    @property
    def provider_name(self) -> str:
        return "elevenlabs"
    
    def is_configured(self) -> bool:
        return bool(self._api_key)
    
    def _get_client(self) -> httpx.AsyncClient:
        """Get or create async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"xi-api-key": self._api_key},
                timeout=httpx.Timeout(self._timeout, connect=5.0),
                transport=self._transport,
            )
        return self._client
    
    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
    
    async def synthesize(self, text: str, options: SpeechOptions) -> bytes:
        """
        Synthesize speech via POST /text-to-speech/{voice_id}.
        
        Args:
            text: Text to speak
            options: Voice settings
            
        Returns:
            audio/mpeg bytes
            
        Raises:
            SpeechUnavailableError: When unconfigured or the call fails
        """
        if not self.is_configured():
            raise SpeechUnavailableError(self.provider_name, "API key not configured")
        if not text.strip():
            raise SpeechUnavailableError(self.provider_name, "nothing to speak")
        
        voice_id = options.voice_id or self._default_voice_id
        payload = {
            "text": text,
            "model_id": self._model_id,
            "voice_settings": {
                "stability": options.stability,
                "similarity_boost": options.similarity_boost,
                "style": options.style,
                "use_speaker_boost": options.use_speaker_boost,
            },
        }
        
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=self._retry_wait, max=8),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        ):
            with attempt:
                response = await self._request(
                    "POST",
                    f"/text-to-speech/{voice_id}",
                    json=payload,
                    headers={"Accept": "audio/mpeg"},
                )
                logger.debug(
                    "Speech synthesized",
                    voice_id=voice_id,
                    text_length=len(text),
                    audio_bytes=len(response.content),
                )
                return response.content
        raise SpeechUnavailableError(self.provider_name, "retries exhausted")
    
    async def list_voices(self) -> Sequence[Voice]:
        """
        List voices via GET /voices.
        
        Raises:
            SpeechUnavailableError: When unconfigured or the call fails
        """
        if not self.is_configured():
            raise SpeechUnavailableError(self.provider_name, "API key not configured")
        
        response = await self._request("GET", "/voices")
        try:
            voices = response.json().get("voices", [])
            return tuple(
                Voice(
                    voice_id=v["voice_id"],
                    name=v.get("name", v["voice_id"]),
                    category=v.get("category", ""),
                    description=v.get("description") or "",
                )
                for v in voices
            )
        except (ValueError, KeyError, AttributeError) as e:
            raise SpeechUnavailableError(
                self.provider_name, "malformed voices payload", original_error=e
            ) from e
    
    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, translating failures into SpeechUnavailableError."""
        try:
            response = await self._get_client().request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise SpeechUnavailableError(
                self.provider_name, "request timed out", is_retryable=True, original_error=e
            ) from e
        except httpx.HTTPError as e:
            raise SpeechUnavailableError(
                self.provider_name, f"transport error: {type(e).__name__}", is_retryable=True, original_error=e
            ) from e
        except (httpx.InvalidURL, ValueError) as e:
            # Bad base URL or a key that cannot be sent as a header
            raise SpeechUnavailableError(
                self.provider_name, f"invalid request: {type(e).__name__}", original_error=e
            ) from e
        
        if response.status_code == 429 or response.status_code >= 500:
            raise SpeechUnavailableError(
                self.provider_name, f"HTTP {response.status_code}", is_retryable=True
            )
        if response.status_code >= 400:
            raise SpeechUnavailableError(self.provider_name, f"HTTP {response.status_code}")
        return response
