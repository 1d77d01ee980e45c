"""Request handling inside the compute context."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

from config import ASR_MODEL, EMBEDDING_MODEL, MIN_EMBEDDING_SIMILARITY
from errors import MODEL_NOT_LOADED, NO_SPEECH, UnknownMessageError, VoiceCommandError
from messages import (
    LoadModelsMessage,
    Message,
    ModelProgressMessage,
    Response,
    TranscribeMessage,
)
from model_manager import ModelLifecycleManager
from models import ModelKind, TranscriptionResult
from recognizer import calculate_confidence, decode_audio_base64

logger = logging.getLogger(__name__)

Notify = Callable[[Message], None]


class ComputeService:
    def __init__(
        self,
        manager: ModelLifecycleManager,
        notify: Optional[Notify] = None,
        min_similarity: float = MIN_EMBEDDING_SIMILARITY,
    ) -> None:
        self._manager = manager
        self._notify = notify
        self.min_similarity = min_similarity
        manager.add_progress_listener(self._relay_progress)

    @property
    def manager(self) -> ModelLifecycleManager:
        return self._manager

    async def handle(self, message: Message) -> Response:
        logger.debug("Received message: %s", message.type.value)
        try:
            if isinstance(message, LoadModelsMessage):
                return await self._handle_load_models(message)
            if isinstance(message, TranscribeMessage):
                return await self._handle_transcribe(message)
            raise UnknownMessageError(message.type.value)
        except Exception as exc:
            logger.error("Message handler error (%s): %s", message.type.value, exc)
            return Response.fail(str(exc) or "Unknown error")

    async def _handle_load_models(self, message: LoadModelsMessage) -> Response:
        if message.min_similarity is not None:
            self.min_similarity = message.min_similarity
        asr_model = message.asr_model or ASR_MODEL
        embedding_model = message.embedding_model or EMBEDDING_MODEL
        await self._manager.ensure_models_loaded(asr_model, embedding_model)
        return Response.ok()

    async def _handle_transcribe(self, message: TranscribeMessage) -> Response:
        recognizer = self._manager.recognizer
        if recognizer is None:
            logger.error("ASR model not loaded")
            raise VoiceCommandError(MODEL_NOT_LOADED)

        loop = asyncio.get_running_loop()
        start = time.perf_counter()
        samples = decode_audio_base64(message.audio_data)
        logger.debug("Audio decoded (%d samples)", len(samples))

        text = await loop.run_in_executor(None, recognizer.transcribe, samples)
        confidence = calculate_confidence(text)
        logger.info(
            "Transcription completed in %.2fs: %r (confidence: %.2f)",
            time.perf_counter() - start,
            text,
            confidence,
        )
        if not text.strip():
            raise VoiceCommandError(NO_SPEECH)

        transcription = TranscriptionResult(
            text=text.strip(),
            confidence=confidence,
            model=self._manager.slot(ModelKind.ASR).model_id or "unknown",
        )

        intent_start = time.perf_counter()
        matcher = self._manager.matcher(self.min_similarity)
        intent = await loop.run_in_executor(None, matcher.resolve_intent, transcription.text)
        logger.debug("Intent matched in %.0fms", (time.perf_counter() - intent_start) * 1000)

        return Response.ok({"transcription": transcription.to_dict(), "intent": intent.to_dict()})

    def _relay_progress(self, kind: ModelKind, percent: int, status: str) -> None:
        if self._notify is None:
            return
        self._notify(ModelProgressMessage(model_type=kind, progress=percent, status=status))
