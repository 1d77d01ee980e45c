from __future__ import annotations

import asyncio
from types import SimpleNamespace

from compute_service import ComputeService
from config import ASR_MODEL, EMBEDDING_MODEL
from embedding_index import EmbeddingIndex
from errors import ERROR_MESSAGES, MODEL_NOT_LOADED, NO_SPEECH
from matching import IntentMatcher
from messages import GetSettingsMessage, LoadModelsMessage, ModelProgressMessage, TranscribeMessage
from models import ModelKind
from recognizer import _pcm_to_wav_base64
from shortcuts import SHORTCUTS

AUDIO = _pcm_to_wav_base64(b"\x00\x00" * 16000)


class FakeRecognizer:
    model_id = "whisper-test"

    def __init__(self, text: str) -> None:
        self.text = text
        self.sample_counts: list[int] = []

    def transcribe(self, samples) -> str:  # noqa: ANN001
        self.sample_counts.append(len(samples))
        return self.text


class FakeManager:
    def __init__(self, recognizer=None, embedder=None) -> None:  # noqa: ANN001
        self.recognizer = recognizer
        self.embedder = embedder
        self.index = EmbeddingIndex.build(SHORTCUTS, embedder) if embedder else None
        self.loaded: list[tuple[str, str]] = []
        self.listeners: list = []
        self.thresholds: list[float] = []

    def add_progress_listener(self, listener):  # noqa: ANN001
        self.listeners.append(listener)
        return lambda: None

    def slot(self, kind: ModelKind):
        return SimpleNamespace(model_id=self.recognizer.model_id if self.recognizer else None)

    def matcher(self, min_similarity: float) -> IntentMatcher:
        self.thresholds.append(min_similarity)
        return IntentMatcher(self.embedder, self.index, min_similarity=min_similarity)

    async def ensure_models_loaded(self, asr_model_id: str, embedding_model_id: str) -> None:
        self.loaded.append((asr_model_id, embedding_model_id))


def test_transcribe_returns_transcription_and_intent(embedder) -> None:  # noqa: ANN001
    recognizer = FakeRecognizer(" go to inbox ")
    service = ComputeService(FakeManager(recognizer, embedder))

    response = asyncio.run(service.handle(TranscribeMessage(audio_data=AUDIO)))

    assert response.success is True
    assert response.data["transcription"] == {
        "text": "go to inbox",
        "confidence": 0.8,
        "model": "whisper-test",
    }
    assert response.data["intent"]["shortcutId"] == "go_to_inbox"
    assert response.data["intent"]["matchedTrigger"] == "go to inbox"
    assert recognizer.sample_counts == [16000]


def test_transcribe_without_recognizer_fails() -> None:
    service = ComputeService(FakeManager())

    response = asyncio.run(service.handle(TranscribeMessage(audio_data=AUDIO)))

    assert response.success is False
    assert response.error == ERROR_MESSAGES[MODEL_NOT_LOADED]


def test_empty_transcript_reports_no_speech(embedder) -> None:  # noqa: ANN001
    service = ComputeService(FakeManager(FakeRecognizer("   "), embedder))

    response = asyncio.run(service.handle(TranscribeMessage(audio_data=AUDIO)))

    assert response.success is False
    assert response.error == ERROR_MESSAGES[NO_SPEECH]


def test_invalid_audio_fails_cleanly(embedder) -> None:  # noqa: ANN001
    service = ComputeService(FakeManager(FakeRecognizer("hello"), embedder))

    response = asyncio.run(service.handle(TranscribeMessage(audio_data="bm90IGEgd2F2")))

    assert response.success is False
    assert "Invalid audio data" in response.error


def test_transcribe_without_embedder_reports_no_match() -> None:
    service = ComputeService(FakeManager(FakeRecognizer("go to inbox")))

    response = asyncio.run(service.handle(TranscribeMessage(audio_data=AUDIO)))

    assert response.success is True
    assert response.data["intent"] == {"shortcutId": None, "confidence": 0.0}


def test_load_models_defaults_and_threshold() -> None:
    manager = FakeManager()
    service = ComputeService(manager)

    async def run() -> None:
        await service.handle(LoadModelsMessage())
        await service.handle(LoadModelsMessage(asr_model="a", embedding_model="e", min_similarity=0.8))

    asyncio.run(run())

    assert manager.loaded == [(ASR_MODEL, EMBEDDING_MODEL), ("a", "e")]
    assert service.min_similarity == 0.8


def test_unhandled_message_type_fails() -> None:
    service = ComputeService(FakeManager())

    response = asyncio.run(service.handle(GetSettingsMessage()))

    assert response.success is False
    assert response.error == "Unknown message type: GET_SETTINGS"


def test_progress_is_relayed_as_messages() -> None:
    sent: list = []
    manager = FakeManager()
    ComputeService(manager, notify=sent.append)

    manager.listeners[0](ModelKind.ASR, 40, "Downloading ASR model: 40%")

    assert sent == [ModelProgressMessage(ModelKind.ASR, 40, "Downloading ASR model: 40%")]
