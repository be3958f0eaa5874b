from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from rpr.platform.files import atomic_write_json, read_json


def test_read_json_missing_file(tmp_path: Path) -> None:
    assert read_json(tmp_path / "absent.json") is None


def test_read_json_invalid(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        read_json(path)


def test_atomic_write_json_pretty_prints(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    atomic_write_json(path, {"repoHistory": ["a/b"]})

    assert path.read_text(encoding="utf-8") == '{\n  "repoHistory": [\n    "a/b"\n  ]\n}\n'
    assert read_json(path) == {"repoHistory": ["a/b"]}


def test_atomic_write_json_cleans_temp_file_on_replace_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "state.json"
    path.write_text("old", encoding="utf-8")

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_json(path, {"x": 1})

    assert path.read_text(encoding="utf-8") == "old"
    assert list(tmp_path.glob(f".{path.name}.*.tmp")) == []
