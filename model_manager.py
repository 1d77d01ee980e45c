"""Model lifecycle inside the compute context.

The manager is the only writer of the model pipelines and the embedding
index.  ``ensure_models_loaded`` is idempotent: once both requested models
are ready it returns without touching the loader again.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Optional

from config import DEFAULT_SNAPSHOT_PATH, SAMPLE_RATE
from embedding_index import EmbeddingIndex, load_snapshot
from errors import CapabilityError
from interfaces import ModelLoader, SpeechRecognizer, TextEmbedder
from matching import IntentMatcher
from models import ModelKind, ModelSlot, ModelStatus, ShortcutDescriptor
from shortcuts import list_shortcuts

try:
    import numpy as np
except Exception:  # pragma: no cover
    np = None  # type: ignore

logger = logging.getLogger(__name__)

ProgressListener = Callable[[ModelKind, int, str], None]


class ModelLifecycleManager:
    def __init__(
        self,
        loader: ModelLoader,
        shortcuts: Optional[Iterable[ShortcutDescriptor]] = None,
        snapshot_path: Optional[Path] = DEFAULT_SNAPSHOT_PATH,
        warmup_seconds: float = 1.0,
    ) -> None:
        self._loader = loader
        self._shortcuts = tuple(shortcuts) if shortcuts is not None else list_shortcuts()
        self._snapshot_path = snapshot_path
        self._warmup_seconds = warmup_seconds
        self._slots = {kind: ModelSlot(kind=kind) for kind in ModelKind}
        self._index: Optional[EmbeddingIndex] = None
        self._listeners: list[ProgressListener] = []
        self._lock: Optional[asyncio.Lock] = None

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    def slot(self, kind: ModelKind) -> ModelSlot:
        return self._slots[kind]

    # A slot being replaced keeps serving its previous pipeline until the
    # new one is ready.
    @property
    def recognizer(self) -> Optional[SpeechRecognizer]:
        return self._slots[ModelKind.ASR].pipeline

    @property
    def embedder(self) -> Optional[TextEmbedder]:
        return self._slots[ModelKind.EMBEDDING].pipeline

    @property
    def index(self) -> Optional[EmbeddingIndex]:
        return self._index

    def is_ready(self, kind: ModelKind) -> bool:
        return self._slots[kind].status == ModelStatus.READY

    def matcher(self, min_similarity: float) -> IntentMatcher:
        return IntentMatcher(self.embedder, self._index, min_similarity=min_similarity)

    def add_progress_listener(self, listener: ProgressListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def ensure_models_loaded(self, asr_model_id: str, embedding_model_id: str) -> None:
        """Load (or reuse) both models; raises on the first failing stage."""
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            asr = self._slots[ModelKind.ASR]
            emb = self._slots[ModelKind.EMBEDDING]
            if asr.is_ready_for(asr_model_id) and emb.is_ready_for(embedding_model_id):
                logger.debug("Models already loaded: %s, %s", asr_model_id, embedding_model_id)
                self._emit(ModelKind.ASR, 100, "ASR model already loaded")
                self._emit(ModelKind.EMBEDDING, 100, "Embedding model already loaded")
                return

            start = time.perf_counter()
            try:
                self._verify_acceleration()
                if asr.is_ready_for(asr_model_id):
                    self._emit(ModelKind.ASR, 100, "ASR model already loaded")
                else:
                    await self._load_recognizer(asr_model_id)
                if emb.is_ready_for(embedding_model_id):
                    self._emit(ModelKind.EMBEDDING, 100, "Embedding model already loaded")
                else:
                    await self._load_embedder(embedding_model_id)
            except Exception as exc:
                logger.error("Model loading failed: %s", exc)
                self._fail(str(exc))
                raise
            logger.info("All models loaded in %.2fs", time.perf_counter() - start)

    def _verify_acceleration(self) -> None:
        logger.debug("Verifying GPU availability...")
        if not self._loader.has_acceleration():
            raise CapabilityError("GPU acceleration (CUDA) is not available")

    async def _load_recognizer(self, model_id: str) -> None:
        slot = self._begin(ModelKind.ASR, model_id)
        loop = asyncio.get_running_loop()
        start = time.perf_counter()
        self._emit(ModelKind.ASR, 0, "Starting ASR model download...")

        recognizer = await loop.run_in_executor(
            None,
            self._loader.load_recognizer,
            model_id,
            self._threadsafe_progress(loop, ModelKind.ASR),
        )
        logger.info("ASR pipeline ready in %.2fs", time.perf_counter() - start)

        # One throwaway inference so the first real command does not pay for
        # kernel compilation and allocator warm-up.
        warmup_start = time.perf_counter()
        silence = self._silence()
        await loop.run_in_executor(None, recognizer.transcribe, silence)
        logger.info("ASR warm-up finished in %.2fs", time.perf_counter() - warmup_start)
        slot.pipeline = recognizer
        slot.model_id = model_id
        slot.status = ModelStatus.READY
        self._emit(ModelKind.ASR, 100, "ASR model ready")

    async def _load_embedder(self, model_id: str) -> None:
        slot = self._begin(ModelKind.EMBEDDING, model_id)
        loop = asyncio.get_running_loop()
        start = time.perf_counter()
        self._emit(ModelKind.EMBEDDING, 0, "Starting embedding model download...")

        embedder = await loop.run_in_executor(
            None,
            self._loader.load_embedder,
            model_id,
            self._threadsafe_progress(loop, ModelKind.EMBEDDING),
        )
        logger.info("Embedding pipeline ready in %.2fs", time.perf_counter() - start)

        snapshot = load_snapshot(self._snapshot_path) if self._snapshot_path else None
        index = await loop.run_in_executor(
            None, EmbeddingIndex.build, self._shortcuts, embedder, snapshot
        )
        slot.pipeline = embedder
        slot.model_id = model_id
        slot.status = ModelStatus.READY
        self._index = index
        self._emit(ModelKind.EMBEDDING, 100, "Embedding model ready")

    def _begin(self, kind: ModelKind, model_id: str) -> ModelSlot:
        slot = self._slots[kind]
        if slot.status == ModelStatus.READY:
            logger.info("Replacing %s model %s with %s", kind.value, slot.model_id, model_id)
        slot.status = ModelStatus.LOADING
        slot.requested_id = model_id
        slot.progress = 0
        logger.info("Loading %s model: %s", kind.value, model_id)
        return slot

    def _silence(self):
        n = int(SAMPLE_RATE * self._warmup_seconds)
        if np is None:
            return [0.0] * n
        return np.zeros(n, dtype=np.float32)

    def _fail(self, message: str) -> None:
        for slot in self._slots.values():
            if slot.status != ModelStatus.LOADING:
                continue
            slot.requested_id = slot.model_id
            if slot.pipeline is not None:
                logger.warning(
                    "Keeping previous %s model %s", slot.kind.value, slot.model_id
                )
                slot.status = ModelStatus.READY
            else:
                slot.status = ModelStatus.ERROR
        for kind in ModelKind:
            self._notify(kind, 0, f"Error: {message}")

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    def _threadsafe_progress(self, loop: asyncio.AbstractEventLoop, kind: ModelKind):
        def _report(percent: float, status: str) -> None:
            loop.call_soon_threadsafe(self._emit, kind, int(percent), status)

        return _report

    def _emit(self, kind: ModelKind, percent: int, status: str) -> None:
        """Forward a progress update, keeping each model's percentage non-decreasing."""
        slot = self._slots[kind]
        percent = max(0, min(100, percent))
        if slot.status == ModelStatus.LOADING:
            if percent >= 100:
                # 100 is only reported once the model is actually ready
                percent = 99
            if percent < slot.progress or (percent == slot.progress and slot.progress > 0):
                return
        elif slot.status == ModelStatus.READY:
            percent = 100
        slot.progress = percent
        self._notify(kind, percent, status)

    def _notify(self, kind: ModelKind, percent: int, status: str) -> None:
        if percent == 0 and status.startswith("Error"):
            self._slots[kind].progress = 0
        for listener in list(self._listeners):
            try:
                listener(kind, percent, status)
            except Exception as exc:
                logger.warning("Progress listener failed: %s", exc)
