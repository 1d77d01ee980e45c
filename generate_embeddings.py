"""Pre-compute trigger embeddings so the first load skips the live pass.

Usage::

    voice-commands-embeddings [--model MODEL] [--output PATH]
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

from config import DEFAULT_SNAPSHOT_PATH, EMBEDDING_MODEL, is_debug
from embedding_index import compute_snapshot, write_snapshot
from logging_setup import setup_logging
from model_loader import HuggingFaceModelLoader
from shortcuts import SHORTCUTS

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the trigger embedding snapshot.")
    parser.add_argument("--model", default=EMBEDDING_MODEL, help="embedding model id")
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_SNAPSHOT_PATH,
        help="where to write the snapshot JSON",
    )
    parser.add_argument(
        "--device", default="cuda", help="torch device for the embedding model"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(debug=is_debug())

    loader = HuggingFaceModelLoader(device=args.device)
    logger.info("Loading embedding model %s", args.model)
    embedder = loader.load_embedder(
        args.model, lambda pct, status: logger.debug("%.0f%% %s", pct, status)
    )

    start = time.perf_counter()
    snapshot = compute_snapshot(embedder, SHORTCUTS)
    write_snapshot(snapshot, args.output)
    logger.info(
        "Wrote %d embeddings to %s in %.1fs",
        snapshot.count,
        args.output,
        time.perf_counter() - start,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
