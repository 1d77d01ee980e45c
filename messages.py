"""Cross-context request/response messages.

Each inbound message kind is its own frozen dataclass; ``Message`` is the
union of them.  ``parse_message`` turns a wire dict into a variant and
``to_dict`` turns it back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from errors import UnknownMessageError
from models import ModelKind


class MessageType(str, Enum):
    TRANSCRIBE = "TRANSCRIBE"
    LOAD_MODELS = "LOAD_MODELS"
    GET_SETTINGS = "GET_SETTINGS"
    MODEL_PROGRESS = "MODEL_PROGRESS"


@dataclass(frozen=True)
class TranscribeMessage:
    audio_data: str

    type = MessageType.TRANSCRIBE

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "payload": {"audioData": self.audio_data}}


@dataclass(frozen=True)
class LoadModelsMessage:
    """Either explicit model ids, or a ``settings`` shorthand (status check)."""

    asr_model: Optional[str] = None
    embedding_model: Optional[str] = None
    settings: Optional[dict[str, Any]] = None
    min_similarity: Optional[float] = None

    type = MessageType.LOAD_MODELS

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.settings is not None:
            payload["settings"] = dict(self.settings)
        if self.asr_model is not None:
            payload["asrModel"] = self.asr_model
        if self.embedding_model is not None:
            payload["embeddingModel"] = self.embedding_model
        if self.min_similarity is not None:
            payload["minSimilarity"] = self.min_similarity
        return {"type": self.type.value, "payload": payload}


@dataclass(frozen=True)
class GetSettingsMessage:
    type = MessageType.GET_SETTINGS

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "payload": {}}


@dataclass(frozen=True)
class ModelProgressMessage:
    model_type: ModelKind
    progress: int
    status: str

    type = MessageType.MODEL_PROGRESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "payload": {
                "modelType": self.model_type.value,
                "progress": self.progress,
                "status": self.status,
            },
        }


Message = Union[TranscribeMessage, LoadModelsMessage, GetSettingsMessage, ModelProgressMessage]


@dataclass(frozen=True)
class Response:
    success: bool
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[dict[str, Any]] = None) -> "Response":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Response":
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            out["data"] = self.data
        if self.error is not None:
            out["error"] = self.error
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Response":
        return cls(
            success=bool(data.get("success")),
            data=data.get("data"),
            error=data.get("error"),
        )


def parse_message(raw: dict[str, Any]) -> Message:
    """Build the message variant for ``raw``; raises UnknownMessageError."""
    if not isinstance(raw, dict):
        raise ValueError("message must be an object")
    kind = raw.get("type")
    payload = raw.get("payload") or {}
    if not isinstance(payload, dict):
        raise ValueError(f"payload of {kind} must be an object")

    if kind == MessageType.TRANSCRIBE.value:
        audio = payload.get("audioData")
        if not isinstance(audio, str) or not audio:
            raise ValueError("TRANSCRIBE requires audioData")
        return TranscribeMessage(audio_data=audio)
    if kind == MessageType.LOAD_MODELS.value:
        settings = payload.get("settings")
        min_similarity = payload.get("minSimilarity")
        return LoadModelsMessage(
            asr_model=payload.get("asrModel"),
            embedding_model=payload.get("embeddingModel"),
            settings=dict(settings) if isinstance(settings, dict) else None,
            min_similarity=float(min_similarity) if min_similarity is not None else None,
        )
    if kind == MessageType.GET_SETTINGS.value:
        return GetSettingsMessage()
    if kind == MessageType.MODEL_PROGRESS.value:
        return ModelProgressMessage(
            model_type=ModelKind(payload.get("modelType")),
            progress=int(payload.get("progress", 0)),
            status=str(payload.get("status", "")),
        )
    raise UnknownMessageError(kind)
