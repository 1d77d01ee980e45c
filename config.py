"""Settings, constants and the JSON-based config store."""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

ASR_MODEL = "Systran/faster-whisper-base.en"
EMBEDDING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"

MIN_EMBEDDING_SIMILARITY = 0.65

SAMPLE_RATE = 16_000
MIN_RECORDING_MS = 300
MIN_AUDIO_BYTES = 100

SEQUENTIAL_KEY_DELAY_S = 0.05
COMPUTE_SETTLE_DELAY_S = 0.1

ERROR_TOAST_MS = 2000
SUCCESS_TOAST_MS = 1200

DEFAULT_SNAPSHOT_PATH = Path(__file__).resolve().parent / "data" / "trigger_embeddings.json"


def is_debug() -> bool:
    return os.getenv("VOICE_COMMANDS_DEBUG", "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    activation_key: str = "Key.alt_l"
    asr_model: str = ASR_MODEL
    embedding_model: str = EMBEDDING_MODEL
    confidence_threshold: float = MIN_EMBEDDING_SIMILARITY

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def merged(self, partial: dict[str, Any]) -> "Settings":
        """Return a copy with the known keys of ``partial`` applied."""
        known = {f.name for f in fields(self)}
        updates = {k: v for k, v in partial.items() if k in known and v is not None}
        if "confidence_threshold" in updates:
            try:
                updates["confidence_threshold"] = float(updates["confidence_threshold"])
            except (TypeError, ValueError):
                del updates["confidence_threshold"]
        return replace(self, **updates)


SettingsListener = Callable[[Settings, Settings], None]


class JsonConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "voice_commands" / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._listeners: list[SettingsListener] = []
        self._lock = threading.Lock()

    def get_settings(self) -> Settings:
        return Settings().merged(self._read_all())

    def save_settings(self, settings: Settings) -> None:
        old = self.get_settings()
        self._write_all(settings.to_dict())
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(old, settings)

    def get_activation_key(self) -> str:
        return self.get_settings().activation_key

    def set_activation_key(self, key: str) -> None:
        self.save_settings(replace(self.get_settings(), activation_key=key))

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """Call ``listener(old, new)`` after every save; returns an unsubscribe."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", self._path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
