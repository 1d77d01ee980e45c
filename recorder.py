"""Push-to-talk microphone recorder."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

from config import MIN_AUDIO_BYTES, MIN_RECORDING_MS, SAMPLE_RATE
from errors import AUDIO_TOO_SHORT, NO_AUDIO, PERMISSION_DENIED, VoiceCommandError
from models import RecordedAudio

try:
    import numpy as np
except Exception:  # pragma: no cover
    np = None  # type: ignore

try:
    import sounddevice as sd
except Exception:  # pragma: no cover
    sd = None  # type: ignore

logger = logging.getLogger(__name__)


class SoundDeviceRecorder:
    def __init__(
        self,
        sample_rate: int = SAMPLE_RATE,
        channels: int = 1,
        chunk_ms: int = 100,
        min_duration_ms: int = MIN_RECORDING_MS,
        min_bytes: int = MIN_AUDIO_BYTES,
    ) -> None:
        self.sample_rate = sample_rate
        self.channels = channels
        self.chunk_ms = chunk_ms
        self.min_duration_ms = min_duration_ms
        self.min_bytes = min_bytes
        self._stream: Any = None
        self._running = False
        self._lock = threading.Lock()
        self._chunks: list[bytes] = []
        self._started_at = 0.0

    @property
    def recording(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            if sd is None:
                raise RuntimeError("sounddevice is not installed")
            self._chunks = []
            blocksize = int(self.sample_rate * (self.chunk_ms / 1000.0))
            try:
                self._stream = sd.InputStream(
                    samplerate=self.sample_rate,
                    channels=self.channels,
                    dtype="int16",
                    blocksize=blocksize,
                    callback=self._on_audio,
                )
                self._stream.start()
            except Exception as exc:
                self._stream = None
                logger.error("Failed to start recording: %s", exc)
                raise VoiceCommandError(PERMISSION_DENIED) from exc
            self._started_at = time.monotonic()
            self._running = True

    def stop(self) -> RecordedAudio:
        """Stop capturing and return the blob; raises when it is too short or empty."""
        with self._lock:
            if not self._running:
                raise RuntimeError("Not recording")
            self._running = False
            duration_ms = int((time.monotonic() - self._started_at) * 1000)
            if self._stream is not None:
                self._stream.stop()
                self._stream.close()
                self._stream = None
            pcm = b"".join(self._chunks)
            self._chunks = []

        if duration_ms < self.min_duration_ms:
            raise VoiceCommandError(AUDIO_TOO_SHORT)
        if len(pcm) < self.min_bytes:
            raise VoiceCommandError(NO_AUDIO)
        logger.debug("Recorded %d bytes over %dms", len(pcm), duration_ms)
        return RecordedAudio(
            pcm16_bytes=pcm,
            sample_rate=self.sample_rate,
            channels=self.channels,
            duration_ms=duration_ms,
        )

    def _on_audio(self, indata: Any, frames: int, time_info: Any, status: Any) -> None:
        if not self._running:
            return
        if np is None:
            return
        if status:
            logger.debug("Input stream status: %s", status)
        self._chunks.append(np.asarray(indata, dtype=np.int16).tobytes())
