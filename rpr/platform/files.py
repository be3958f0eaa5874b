"""Filesystem helpers."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

__all__ = ["atomic_write_json", "read_json"]


def read_json(path: Path) -> object | None:
    """Parse ``path`` as JSON, or return None when the file does not exist.

    Raises:
        OSError: The file exists but cannot be read.
        json.JSONDecodeError: The content is not valid JSON.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    return json.loads(text)


def atomic_write_json(path: Path, data: object) -> None:
    """Write ``data`` as pretty JSON through a sibling temp file.

    The target is swapped in with ``os.replace`` so an interrupted write
    never leaves a truncated history file behind.
    """
    payload = json.dumps(data, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
