"""Core data models for the app."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SessionState(str, Enum):
    IDLE = "IDLE"
    RECORDING = "RECORDING"
    PROCESSING = "PROCESSING"


class StatusKind(str, Enum):
    RECORDING = "recording"
    TRANSCRIBING = "transcribing"
    PROCESSING = "processing"
    COMPLETE = "complete"
    ERROR = "error"


class ModelKind(str, Enum):
    ASR = "asr"
    EMBEDDING = "embedding"


class ModelStatus(str, Enum):
    NOT_LOADED = "not-loaded"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Modifier(str, Enum):
    # "cmd" is the primary modifier: meta on macOS, control elsewhere.
    PRIMARY = "cmd"
    SHIFT = "shift"
    ALT = "alt"
    SECONDARY = "ctrl"


@dataclass(frozen=True)
class ShortcutDescriptor:
    id: str
    name: str
    description: str
    voice_triggers: tuple[str, ...]
    keys: tuple[str, ...]
    sequential: bool = False
    modifiers: tuple[Modifier, ...] = ()

    def __post_init__(self) -> None:
        if not self.keys:
            raise ValueError(f"shortcut {self.id!r} has no keys")
        if not self.sequential and len(self.keys) != 1:
            raise ValueError(
                f"shortcut {self.id!r} is not sequential but has {len(self.keys)} keys"
            )


@dataclass(frozen=True)
class TriggerEmbeddingEntry:
    shortcut_id: str
    trigger: str
    embedding: tuple[float, ...]

    @property
    def key(self) -> str:
        return f"{self.shortcut_id}:{self.trigger}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "shortcutId": self.shortcut_id,
            "trigger": self.trigger,
            "embedding": list(self.embedding),
        }


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    confidence: float
    model: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "confidence": self.confidence, "model": self.model}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranscriptionResult":
        return cls(
            text=str(data.get("text", "")),
            confidence=float(data.get("confidence", 0.0)),
            model=str(data.get("model", "unknown")),
        )


@dataclass(frozen=True)
class IntentResult:
    shortcut_id: Optional[str]
    confidence: float = 0.0
    matched_trigger: Optional[str] = None

    @classmethod
    def no_match(cls) -> "IntentResult":
        return cls(shortcut_id=None, confidence=0.0)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"shortcutId": self.shortcut_id, "confidence": self.confidence}
        if self.matched_trigger is not None:
            data["matchedTrigger"] = self.matched_trigger
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IntentResult":
        return cls(
            shortcut_id=data.get("shortcutId"),
            confidence=float(data.get("confidence", 0.0)),
            matched_trigger=data.get("matchedTrigger"),
        )


@dataclass
class ModelSlot:
    """Load state of one model inside the compute context."""

    kind: ModelKind
    status: ModelStatus = ModelStatus.NOT_LOADED
    progress: int = 0
    model_id: Optional[str] = None
    requested_id: Optional[str] = None
    pipeline: Any = field(default=None, repr=False)

    def is_ready_for(self, model_id: str) -> bool:
        return (
            self.status == ModelStatus.READY
            and self.pipeline is not None
            and self.model_id == model_id
        )


@dataclass(frozen=True)
class RecordedAudio:
    pcm16_bytes: bytes
    sample_rate: int = 16000
    channels: int = 1
    duration_ms: int = 0


@dataclass(frozen=True)
class KeyEvent:
    type: str  # "keydown" | "keyup"
    key: str
    code: str
    shift: bool = False
    meta: bool = False
    ctrl: bool = False
    alt: bool = False
