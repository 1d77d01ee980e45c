from __future__ import annotations

import json
from pathlib import Path

from embedding_index import (
    EmbeddingIndex,
    EmbeddingSnapshot,
    compute_snapshot,
    entry_key,
    load_snapshot,
    write_snapshot,
)
from models import ShortcutDescriptor, TriggerEmbeddingEntry

SAMPLE = (
    ShortcutDescriptor(
        id="go_to_inbox",
        name="Go to Inbox",
        description="Navigate to inbox view",
        voice_triggers=("go to inbox", "open inbox"),
        keys=("g", "i"),
        sequential=True,
    ),
    ShortcutDescriptor(
        id="create_issue",
        name="Create Issue",
        description="Create a new issue",
        voice_triggers=("create issue", "new issue"),
        keys=("c",),
    ),
)


def test_compute_snapshot_covers_every_trigger(embedder) -> None:  # noqa: ANN001
    snapshot = compute_snapshot(embedder, SAMPLE)

    assert snapshot.model == embedder.model_id
    assert snapshot.count == 4
    assert set(snapshot.embeddings) == {
        "go_to_inbox:go to inbox",
        "go_to_inbox:open inbox",
        "create_issue:create issue",
        "create_issue:new issue",
    }


def test_snapshot_file_layout(tmp_path: Path, embedder) -> None:  # noqa: ANN001
    path = tmp_path / "data" / "trigger_embeddings.json"
    write_snapshot(compute_snapshot(embedder, SAMPLE), path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["model"] == embedder.model_id
    assert raw["count"] == 4
    assert "generatedAt" in raw
    entry = raw["embeddings"]["create_issue:new issue"]
    assert entry["shortcutId"] == "create_issue"
    assert entry["trigger"] == "new issue"
    assert len(entry["embedding"]) == embedder.dims

    loaded = load_snapshot(path)
    assert loaded is not None
    assert loaded.count == 4


def test_load_snapshot_missing_or_corrupt(tmp_path: Path) -> None:
    assert load_snapshot(tmp_path / "missing.json") is None

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_snapshot(bad) is None


def test_build_reuses_snapshot_vectors(embedder) -> None:  # noqa: ANN001
    snapshot = compute_snapshot(embedder, SAMPLE)
    embedder.calls.clear()

    index = EmbeddingIndex.build(SAMPLE, embedder, snapshot)

    assert len(index) == 4
    assert embedder.calls == []
    assert [e.key for e in index] == [
        "go_to_inbox:go to inbox",
        "go_to_inbox:open inbox",
        "create_issue:create issue",
        "create_issue:new issue",
    ]


def test_build_embeds_triggers_missing_from_snapshot(embedder) -> None:  # noqa: ANN001
    snapshot = compute_snapshot(embedder, SAMPLE[:1])
    embedder.calls.clear()

    index = EmbeddingIndex.build(SAMPLE, embedder, snapshot)

    assert len(index) == 4
    assert embedder.calls == ["create issue", "new issue"]


def test_build_ignores_snapshot_from_other_model(embedder) -> None:  # noqa: ANN001
    stale = compute_snapshot(embedder, SAMPLE)
    stale = EmbeddingSnapshot(model="other/model", generated_at="", embeddings=stale.embeddings)
    embedder.calls.clear()

    EmbeddingIndex.build(SAMPLE, embedder, stale)

    assert len(embedder.calls) == 4


def test_build_recomputes_wrong_dimension_entries(embedder) -> None:  # noqa: ANN001
    snapshot = compute_snapshot(embedder, SAMPLE)
    key = entry_key("create_issue", "new issue")
    broken = dict(snapshot.embeddings)
    broken[key] = TriggerEmbeddingEntry(shortcut_id="create_issue", trigger="new issue", embedding=(1.0,))
    embedder.calls.clear()

    index = EmbeddingIndex.build(
        SAMPLE, embedder, EmbeddingSnapshot(snapshot.model, snapshot.generated_at, broken)
    )

    assert embedder.calls == ["new issue"]
    assert all(len(e.embedding) == embedder.dims for e in index)
