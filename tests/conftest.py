from __future__ import annotations

import math
import zlib

import pytest


class HashingEmbedder:
    """Deterministic bag-of-words embedder for tests."""

    def __init__(self, model_id: str = "test-embedder", dims: int = 512) -> None:
        self.model_id = model_id
        self.dims = dims
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        vector = [0.0] * self.dims
        for word in text.lower().split():
            vector[zlib.crc32(word.encode("utf-8")) % self.dims] += 1.0
        norm = math.sqrt(sum(x * x for x in vector))
        return [x / norm for x in vector] if norm else vector


@pytest.fixture
def embedder() -> HashingEmbedder:
    return HashingEmbedder()
