"""Downloads and constructs the speech and embedding pipelines on the GPU."""

from __future__ import annotations

import logging
from typing import Callable

from embedder import SentenceTransformerEmbedder
from interfaces import ProgressCallback
from recognizer import WhisperSpeechRecognizer

try:
    import torch
except Exception:  # pragma: no cover
    torch = None  # type: ignore

try:
    from huggingface_hub import snapshot_download
except Exception:  # pragma: no cover
    snapshot_download = None  # type: ignore

try:
    from tqdm.auto import tqdm
except Exception:  # pragma: no cover
    tqdm = None  # type: ignore

logger = logging.getLogger(__name__)

# Share of the progress bar covered by the download; the rest is model init.
DOWNLOAD_SHARE = 90.0


def _progress_bar_class(on_fraction: Callable[[float], None]):
    """A tqdm subclass that reports ``n / total`` through ``on_fraction``."""

    class _ProgressBar(tqdm):  # type: ignore[misc, valid-type]
        def update(self, n=1):
            result = super().update(n)
            if self.total:
                on_fraction(min(1.0, self.n / self.total))
            return result

    return _ProgressBar


class HuggingFaceModelLoader:
    def __init__(
        self,
        device: str = "cuda",
        asr_compute_type: str = "float16",
        cache_dir: str | None = None,
    ) -> None:
        self._device = device
        self._asr_compute_type = asr_compute_type
        self._cache_dir = cache_dir

    def has_acceleration(self) -> bool:
        if torch is None:
            return False
        try:
            return bool(torch.cuda.is_available())
        except Exception as exc:
            logger.warning("CUDA probe failed: %s", exc)
            return False

    def load_recognizer(self, model_id: str, on_progress: ProgressCallback) -> WhisperSpeechRecognizer:
        path = self._download(model_id, "ASR", on_progress)
        on_progress(95.0, "Initializing ASR model...")
        return WhisperSpeechRecognizer(
            path,
            model_id=model_id,
            device=self._device,
            compute_type=self._asr_compute_type,
        )

    def load_embedder(
        self, model_id: str, on_progress: ProgressCallback
    ) -> SentenceTransformerEmbedder:
        path = self._download(model_id, "embedding", on_progress)
        on_progress(95.0, "Initializing embedding model...")
        return SentenceTransformerEmbedder(path, model_id=model_id, device=self._device)

    def _download(self, model_id: str, label: str, on_progress: ProgressCallback) -> str:
        if snapshot_download is None or tqdm is None:
            raise RuntimeError("huggingface_hub is not installed")

        def _on_fraction(fraction: float) -> None:
            percent = fraction * DOWNLOAD_SHARE
            on_progress(percent, f"Downloading {label} model: {int(percent)}%")

        logger.info("Fetching %s model %s", label, model_id)
        return snapshot_download(
            repo_id=model_id,
            cache_dir=self._cache_dir,
            tqdm_class=_progress_bar_class(_on_fraction),
        )
