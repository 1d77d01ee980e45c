"""Speech recognizer backed by faster-whisper, plus the audio wire codec.

Audio crosses from the capture context to the compute context as a base64
encoded WAV.  The compute context decodes it back to float32 samples at
16 kHz before handing it to the model.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
import wave
from typing import Sequence

from config import SAMPLE_RATE
from errors import NO_AUDIO, VoiceCommandError

try:
    import numpy as np
except Exception:  # pragma: no cover
    np = None  # type: ignore

try:
    from faster_whisper import WhisperModel
except Exception:  # pragma: no cover
    WhisperModel = None  # type: ignore

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^a-zA-Z0-9\s]")


def _pcm_to_wav_base64(
    pcm: bytes,
    sample_rate: int = SAMPLE_RATE,
    channels: int = 1,
    sample_width: int = 2,
) -> str:
    """Convert raw PCM bytes to a base64-encoded WAV string."""
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm)
    wav_bytes = buf.getvalue()
    return base64.b64encode(wav_bytes).decode("ascii")


def decode_audio_base64(audio_data: str, target_rate: int = SAMPLE_RATE):
    """Decode a (possibly data-URL prefixed) base64 WAV into mono float32 samples."""
    if np is None:
        raise RuntimeError("numpy is not installed")
    payload = audio_data.split(",", 1)[1] if "," in audio_data else audio_data
    try:
        raw = base64.b64decode(payload, validate=False)
        with wave.open(io.BytesIO(raw), "rb") as wf:
            channels = wf.getnchannels()
            sample_width = wf.getsampwidth()
            rate = wf.getframerate()
            frames = wf.readframes(wf.getnframes())
    except (binascii.Error, wave.Error, EOFError) as exc:
        raise VoiceCommandError(NO_AUDIO, f"Invalid audio data: {exc}") from exc

    if sample_width != 2:
        raise VoiceCommandError(NO_AUDIO, f"Unsupported sample width: {sample_width}")

    samples = np.frombuffer(frames, dtype=np.int16).astype(np.float32) / 32768.0
    if channels > 1:
        samples = samples[::channels]
    if rate != target_rate and samples.size:
        duration = samples.size / rate
        n_out = max(1, int(round(duration * target_rate)))
        src_t = np.linspace(0.0, duration, num=samples.size, endpoint=False)
        dst_t = np.linspace(0.0, duration, num=n_out, endpoint=False)
        samples = np.interp(dst_t, src_t, samples).astype(np.float32)
    return samples


def calculate_confidence(text: str) -> float:
    """Length/symbol heuristic, not a recognizer-reported score."""
    if not text:
        return 0.0
    confidence = 0.8
    if len(text) < 5:
        confidence -= 0.2
    special = len(_NON_WORD.findall(text))
    if special > len(text) * 0.3:
        confidence -= 0.3
    return max(0.0, min(1.0, confidence))


class WhisperSpeechRecognizer:
    def __init__(
        self,
        model_path: str,
        model_id: str,
        device: str = "cuda",
        compute_type: str = "float16",
        beam_size: int = 1,
    ) -> None:
        if WhisperModel is None:
            raise RuntimeError("faster-whisper is not installed")
        self.model_id = model_id
        self._beam_size = beam_size
        self._model = WhisperModel(model_path, device=device, compute_type=compute_type)

    def transcribe(self, samples: Sequence[float]) -> str:
        segments, _info = self._model.transcribe(
            samples,
            language="en",
            beam_size=self._beam_size,
            vad_filter=False,
            without_timestamps=True,
        )
        # segments is a lazy generator; decoding happens while joining
        return " ".join(segment.text.strip() for segment in segments).strip()
