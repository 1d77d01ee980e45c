"""Text embedder backed by sentence-transformers."""

from __future__ import annotations

try:
    from sentence_transformers import SentenceTransformer
except Exception:  # pragma: no cover
    SentenceTransformer = None  # type: ignore


class SentenceTransformerEmbedder:
    def __init__(self, model_path: str, model_id: str, device: str = "cuda") -> None:
        if SentenceTransformer is None:
            raise RuntimeError("sentence-transformers is not installed")
        self.model_id = model_id
        self._model = SentenceTransformer(model_path, device=device)

    def embed(self, text: str) -> list[float]:
        vector = self._model.encode(
            text,
            normalize_embeddings=True,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return [float(x) for x in vector]
