"""Embedding index over every (shortcut, trigger phrase) pair.

Vectors come from a precomputed snapshot when one is available for the
requested embedding model; anything missing or stale is embedded live.
Snapshot layout::

    {
      "model": "<embedding model id>",
      "generatedAt": "<ISO-8601>",
      "count": <int>,
      "embeddings": {
        "<shortcutId>:<trigger>": {"shortcutId": ..., "trigger": ..., "embedding": [...]}
      }
    }
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from interfaces import TextEmbedder
from models import ShortcutDescriptor, TriggerEmbeddingEntry
from shortcuts import iter_triggers

logger = logging.getLogger(__name__)


def entry_key(shortcut_id: str, trigger: str) -> str:
    return f"{shortcut_id}:{trigger}"


@dataclass(frozen=True)
class EmbeddingSnapshot:
    model: str
    generated_at: str
    embeddings: dict[str, TriggerEmbeddingEntry]

    @property
    def count(self) -> int:
        return len(self.embeddings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "generatedAt": self.generated_at,
            "count": self.count,
            "embeddings": {key: entry.to_dict() for key, entry in self.embeddings.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbeddingSnapshot":
        entries: dict[str, TriggerEmbeddingEntry] = {}
        for key, value in (data.get("embeddings") or {}).items():
            entries[key] = TriggerEmbeddingEntry(
                shortcut_id=str(value["shortcutId"]),
                trigger=str(value["trigger"]),
                embedding=tuple(float(x) for x in value["embedding"]),
            )
        return cls(
            model=str(data.get("model", "")),
            generated_at=str(data.get("generatedAt", "")),
            embeddings=entries,
        )


def load_snapshot(path: Path) -> Optional[EmbeddingSnapshot]:
    """Read a snapshot file; returns None when it is absent or unreadable."""
    if not path.exists():
        logger.warning("Pre-computed embeddings not found at %s, will compute on startup", path)
        return None
    try:
        snapshot = EmbeddingSnapshot.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Ignoring unreadable embedding snapshot %s: %s", path, exc)
        return None
    logger.info("Loaded %d pre-computed embeddings (model: %s)", snapshot.count, snapshot.model)
    return snapshot


def write_snapshot(snapshot: EmbeddingSnapshot, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(snapshot.to_dict(), indent=2), encoding="utf-8")


def compute_snapshot(
    embedder: TextEmbedder,
    shortcuts: Iterable[ShortcutDescriptor],
    log_every: int = 10,
) -> EmbeddingSnapshot:
    entries: dict[str, TriggerEmbeddingEntry] = {}
    for shortcut, trigger in iter_triggers(shortcuts):
        key = entry_key(shortcut.id, trigger)
        entries[key] = TriggerEmbeddingEntry(
            shortcut_id=shortcut.id,
            trigger=trigger,
            embedding=tuple(embedder.embed(trigger)),
        )
        if log_every and len(entries) % log_every == 0:
            logger.info("Processed %d triggers...", len(entries))
    return EmbeddingSnapshot(
        model=embedder.model_id,
        generated_at=datetime.now(timezone.utc).isoformat(),
        embeddings=entries,
    )


class EmbeddingIndex:
    """Immutable, ordered collection of trigger embeddings."""

    def __init__(self, entries: Iterable[TriggerEmbeddingEntry], model: str = "") -> None:
        self._entries = tuple(entries)
        self.model = model

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TriggerEmbeddingEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[TriggerEmbeddingEntry, ...]:
        return self._entries

    @classmethod
    def build(
        cls,
        shortcuts: Iterable[ShortcutDescriptor],
        embedder: TextEmbedder,
        snapshot: Optional[EmbeddingSnapshot] = None,
    ) -> "EmbeddingIndex":
        """Index every trigger, reusing snapshot vectors that are still valid."""
        start = time.perf_counter()
        usable = snapshot if snapshot is not None and snapshot.model == embedder.model_id else None
        if snapshot is not None and usable is None:
            logger.warning(
                "Embedding snapshot was built with %s, not %s; recomputing",
                snapshot.model,
                embedder.model_id,
            )

        dims = _dominant_dimension(usable) if usable is not None else None
        entries: list[TriggerEmbeddingEntry] = []
        reused = computed = 0
        for shortcut, trigger in iter_triggers(shortcuts):
            cached = usable.embeddings.get(entry_key(shortcut.id, trigger)) if usable else None
            if cached is not None and len(cached.embedding) == dims:
                entries.append(cached)
                reused += 1
                continue
            entries.append(
                TriggerEmbeddingEntry(
                    shortcut_id=shortcut.id,
                    trigger=trigger,
                    embedding=tuple(embedder.embed(trigger)),
                )
            )
            computed += 1

        logger.info(
            "Embedding index ready: %d entries (%d from snapshot, %d computed) in %.0fms",
            len(entries),
            reused,
            computed,
            (time.perf_counter() - start) * 1000,
        )
        return cls(entries, model=embedder.model_id)


def _dominant_dimension(snapshot: EmbeddingSnapshot) -> Optional[int]:
    counts: dict[int, int] = {}
    for entry in snapshot.embeddings.values():
        counts[len(entry.embedding)] = counts.get(len(entry.embedding), 0) + 1
    if not counts:
        return None
    return max(counts, key=counts.get)
