from __future__ import annotations

from pathlib import Path

import generate_embeddings
from embedding_index import load_snapshot
from shortcuts import SHORTCUTS


class FakeLoader:
    def __init__(self, embedder, device: str = "cuda") -> None:  # noqa: ANN001
        self.embedder = embedder
        self.device = device
        self.requested: list[str] = []

    def load_embedder(self, model_id, on_progress):  # noqa: ANN001
        self.requested.append(model_id)
        on_progress(100.0, "done")
        self.embedder.model_id = model_id
        return self.embedder


def test_cli_writes_snapshot(tmp_path: Path, monkeypatch, embedder) -> None:  # noqa: ANN001
    loaders: list[FakeLoader] = []

    def make_loader(device: str = "cuda") -> FakeLoader:
        loader = FakeLoader(embedder, device)
        loaders.append(loader)
        return loader

    monkeypatch.setattr(generate_embeddings, "HuggingFaceModelLoader", make_loader)
    monkeypatch.setattr(generate_embeddings, "setup_logging", lambda debug=False: None)
    output = tmp_path / "trigger_embeddings.json"

    code = generate_embeddings.main(["--model", "emb/test", "--output", str(output), "--device", "cpu"])

    assert code == 0
    assert loaders[0].requested == ["emb/test"]
    assert loaders[0].device == "cpu"
    snapshot = load_snapshot(output)
    assert snapshot is not None
    assert snapshot.model == "emb/test"
    assert snapshot.count == sum(len(s.voice_triggers) for s in SHORTCUTS)
