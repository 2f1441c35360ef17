"""
Speech Endpoints

Text-to-speech with silent fallback. When no synthesizer is
available the synthesize endpoint answers 204 and reports why in
the X-Speech-Status header; the client may then use its own
browser voice.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from peerhaven.infrastructure.speech.provider import SpeechOptions
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()

STATUS_HEADER = "X-Speech-Status"


class SynthesizeRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    voice_id: Optional[str] = Field(default=None, max_length=100)
    stability: float = Field(default=0.5, ge=0.0, le=1.0)
    similarity_boost: float = Field(default=0.5, ge=0.0, le=1.0)
    style: float = Field(default=0.0, ge=0.0, le=1.0)
    use_speaker_boost: bool = True
    
    def to_options(self) -> SpeechOptions:
        return SpeechOptions(
            voice_id=self.voice_id,
            stability=self.stability,
            similarity_boost=self.similarity_boost,
            style=self.style,
            use_speaker_boost=self.use_speaker_boost,
        )


class SpeechStatusResponse(BaseModel):
    available: bool
    status: str


@router.post(
    "/synthesize",
    summary="Synthesize speech",
    responses={
        200: {"content": {"audio/mpeg": {}}},
        204: {"description": "Speech unavailable; see X-Speech-Status"},
    },
)
async def synthesize(
    request: SynthesizeRequest,
    container: ServiceContainer = Depends(get_container),
) -> Response:
    result = await container.speech.speak(request.text, request.to_options())
    if not result.spoken:
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers={STATUS_HEADER: result.status},
        )
    return Response(
        content=result.audio,
        media_type=result.media_type,
        headers={STATUS_HEADER: result.status},
    )


@router.get("/status", response_model=SpeechStatusResponse, summary="Speech capability status")
async def speech_status(
    container: ServiceContainer = Depends(get_container),
) -> SpeechStatusResponse:
    return SpeechStatusResponse(
        available=container.speech.is_available(),
        status=container.speech.status(),
    )


@router.get("/voices", summary="Available voices")
async def list_voices(
    container: ServiceContainer = Depends(get_container),
) -> dict:
    voices = await container.speech.list_voices()
    return {"voices": [voice.to_dict() for voice in voices]}
