"""Protocol interfaces for the black-box collaborators."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from config import Settings
from models import KeyEvent, RecordedAudio

ProgressCallback = Callable[[float, str], None]


class Recorder(Protocol):
    def start(self) -> None: ...

    def stop(self) -> RecordedAudio: ...


class SpeechRecognizer(Protocol):
    model_id: str

    def transcribe(self, samples: Sequence[float]) -> str: ...


class TextEmbedder(Protocol):
    model_id: str

    def embed(self, text: str) -> list[float]: ...


class ModelLoader(Protocol):
    """Creates the black-box pipelines; ``on_progress`` takes a 0-100 percentage."""

    def has_acceleration(self) -> bool: ...

    def load_recognizer(self, model_id: str, on_progress: ProgressCallback) -> SpeechRecognizer: ...

    def load_embedder(self, model_id: str, on_progress: ProgressCallback) -> TextEmbedder: ...


class KeyEventTarget(Protocol):
    def dispatch_event(self, event: KeyEvent) -> None: ...


class SettingsSource(Protocol):
    def get_settings(self) -> Settings: ...


FocusedTargetProvider = Callable[[], Optional[KeyEventTarget]]
