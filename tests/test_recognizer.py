"""Tests for the audio codec, confidence heuristic and WhisperSpeechRecognizer."""

from __future__ import annotations

import base64
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from errors import NO_AUDIO, VoiceCommandError
from recognizer import (
    WhisperSpeechRecognizer,
    _pcm_to_wav_base64,
    calculate_confidence,
    decode_audio_base64,
)


# ---------------------------------------------------------------
# _pcm_to_wav_base64
# ---------------------------------------------------------------

def test_pcm_to_wav_base64_produces_valid_base64() -> None:
    pcm = b"\x00\x00" * 1600  # 100ms of silence at 16kHz
    result = _pcm_to_wav_base64(pcm, sample_rate=16000, channels=1)
    assert isinstance(result, str)
    decoded = base64.b64decode(result)
    # WAV header starts with RIFF
    assert decoded[:4] == b"RIFF"


# ---------------------------------------------------------------
# decode_audio_base64
# ---------------------------------------------------------------

def test_decode_returns_float_samples() -> None:
    pcm = np.array([0, 16384, -16384, 32767], dtype=np.int16).tobytes()
    samples = decode_audio_base64(_pcm_to_wav_base64(pcm))

    assert samples.dtype == np.float32
    assert samples.tolist() == pytest.approx([0.0, 0.5, -0.5, 32767 / 32768.0])


def test_decode_strips_data_url_prefix() -> None:
    pcm = b"\x00\x00" * 160
    audio = "data:audio/wav;base64," + _pcm_to_wav_base64(pcm)
    assert decode_audio_base64(audio).size == 160


def test_decode_keeps_first_channel_only() -> None:
    stereo = np.array([100, -100, 200, -200], dtype=np.int16).tobytes()
    samples = decode_audio_base64(_pcm_to_wav_base64(stereo, channels=2))

    assert samples.size == 2
    assert (samples > 0).all()


def test_decode_resamples_to_target_rate() -> None:
    pcm = b"\x00\x00" * 8000  # 1s at 8kHz
    samples = decode_audio_base64(_pcm_to_wav_base64(pcm, sample_rate=8000), target_rate=16000)
    assert samples.size == 16000


def test_decode_rejects_garbage() -> None:
    with pytest.raises(VoiceCommandError) as info:
        decode_audio_base64(base64.b64encode(b"not a wav").decode("ascii"))
    assert info.value.code == NO_AUDIO


# ---------------------------------------------------------------
# calculate_confidence
# ---------------------------------------------------------------

def test_confidence_for_normal_phrase() -> None:
    assert calculate_confidence("go to inbox") == pytest.approx(0.8)


def test_confidence_for_short_text() -> None:
    assert calculate_confidence("hi") == pytest.approx(0.6)


def test_confidence_for_mostly_symbols() -> None:
    assert calculate_confidence("?!?!?!") == pytest.approx(0.5)


def test_confidence_for_empty_text() -> None:
    assert calculate_confidence("") == 0.0


# ---------------------------------------------------------------
# WhisperSpeechRecognizer
# ---------------------------------------------------------------

@patch("recognizer.WhisperModel")
def test_transcribe_joins_segments(mock_model_cls: MagicMock) -> None:
    mock_model = mock_model_cls.return_value
    segments = [SimpleNamespace(text=" go to"), SimpleNamespace(text=" inbox ")]
    mock_model.transcribe.return_value = (iter(segments), None)

    recognizer = WhisperSpeechRecognizer("/models/base", model_id="whisper-base")
    text = recognizer.transcribe(np.zeros(16000, dtype=np.float32))

    assert text == "go to inbox"
    assert recognizer.model_id == "whisper-base"
    mock_model_cls.assert_called_once_with("/models/base", device="cuda", compute_type="float16")
    kwargs = mock_model.transcribe.call_args.kwargs
    assert kwargs["language"] == "en"


@patch("recognizer.WhisperModel", None)
def test_recognizer_requires_faster_whisper() -> None:
    with pytest.raises(RuntimeError, match="faster-whisper is not installed"):
        WhisperSpeechRecognizer("/models/base", model_id="whisper-base")
