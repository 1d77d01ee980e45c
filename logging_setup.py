"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_DIR = Path.home() / ".local" / "state" / "voice_commands"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(threadName)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False, log_dir: Path | None = None) -> Path:
    """Set up file + stdout handlers on the root logger; returns the log file path."""
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d")
    log_path = log_dir / f"voice_commands-{ts}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.DEBUG if debug else logging.INFO)

    fmt = logging.Formatter(LOG_FORMAT)
    fh.setFormatter(fmt)
    ch.setFormatter(fmt)

    root.addHandler(fh)
    root.addHandler(ch)

    # Model download libraries are chatty at DEBUG.
    for name in ("urllib3", "filelock", "huggingface_hub", "faster_whisper"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_path
