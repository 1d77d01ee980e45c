"""Nearest-trigger intent matching by cosine similarity."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from config import MIN_EMBEDDING_SIMILARITY
from embedding_index import EmbeddingIndex
from interfaces import TextEmbedder
from models import IntentResult

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """0.0 for vectors of different length or zero norm."""
    if len(a) != len(b):
        return 0.0
    dot = norm_a = norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


class IntentMatcher:
    """Read-only view over an embedder and an index; safe to share between queries."""

    def __init__(
        self,
        embedder: Optional[TextEmbedder],
        index: Optional[EmbeddingIndex],
        min_similarity: float = MIN_EMBEDDING_SIMILARITY,
    ) -> None:
        self._embedder = embedder
        self._index = index
        self.min_similarity = min_similarity

    @property
    def ready(self) -> bool:
        return self._embedder is not None and self._index is not None

    def resolve_intent(self, text: str) -> IntentResult:
        trimmed = text.strip()
        if not trimmed:
            return IntentResult.no_match()
        if not self.ready:
            logger.debug("Matcher not ready, reporting no match for %r", trimmed)
            return IntentResult.no_match()

        try:
            query = self._embedder.embed(trimmed)
        except Exception as exc:
            logger.error("Embedding match failed: %s", exc)
            return IntentResult.no_match()

        best = None
        best_similarity = 0.0
        for entry in self._index:
            similarity = cosine_similarity(query, entry.embedding)
            if best is None or similarity > best_similarity:
                best, best_similarity = entry, similarity

        if best is None or best_similarity < self.min_similarity:
            logger.info("No match found for %r (best %.3f)", trimmed, best_similarity)
            return IntentResult.no_match()

        logger.info(
            "Matched %r -> %s via %r (%.3f)", trimmed, best.shortcut_id, best.trigger, best_similarity
        )
        return IntentResult(
            shortcut_id=best.shortcut_id,
            confidence=best_similarity,
            matched_trigger=best.trigger,
        )
