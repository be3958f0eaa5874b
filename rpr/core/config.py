"""Repository selection history, persisted as a small JSON document.

The file holds ``{"repoHistory": ["owner/repo", ...]}``, most recent
first. Loading tolerates a missing file and any subset of known keys;
updating prepends new entries onto whatever is already stored.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from rpr.platform.files import atomic_write_json, read_json

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str_list

__all__ = [
    "REPO_HISTORY_KEY",
    "Config",
    "ConfigError",
    "default_document",
    "merge",
    "load_config",
    "update_config",
]

REPO_HISTORY_KEY = "repoHistory"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be read, parsed or written."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Typed view of the history document."""

    repo_history: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        return cls(repo_history=tuple(get_str_list(data, REPO_HISTORY_KEY) or ()))

    def to_dict(self) -> StrDict:
        return {REPO_HISTORY_KEY: list(self.repo_history)}


def default_document() -> StrDict:
    return Config().to_dict()


def merge(
    target: MutableMapping[str, object], source: Mapping[str, object] | None
) -> MutableMapping[str, object]:
    """Merge ``source`` into ``target`` in place and return ``target``.

    List values in ``target`` get ``source``'s items prepended (source order
    first, then the previous contents); a ``None`` source value leaves such a
    list untouched. Any other value is overwritten.
    """
    if not source:
        return target
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, list):
            if value is None:
                continue
            incoming = list(value) if isinstance(value, (list, tuple)) else [value]
            existing[:0] = incoming
        else:
            target[key] = value
    return target


def _read_document(path: Path) -> Result[StrDict | None, ConfigError]:
    try:
        raw = read_json(path)
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except json.JSONDecodeError as e:
        return Err(ConfigError(f"Invalid JSON in config: {e}", path=path))

    if raw is None:
        return Ok(None)
    data = as_str_dict(raw)
    if data is None:
        return Err(ConfigError("Config root must be a JSON object", path=path))
    return Ok(data)


def _load_document(path: Path) -> Result[StrDict, ConfigError]:
    existing = _read_document(path)
    if isinstance(existing, Err):
        return existing
    document = default_document()
    merge(document, existing.value)
    return Ok(document)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load the history document, falling back to defaults when absent.

    Args:
        path: Location of the JSON file.

    Returns:
        Ok(Config) on success, Err(ConfigError) if the file exists but is
        unreadable, not JSON, or not a JSON object.
    """
    document = _load_document(path)
    if isinstance(document, Err):
        return document
    return Ok(Config.from_dict(document.value))


def update_config(path: Path, props: Mapping[str, object]) -> Result[Config, ConfigError]:
    """Merge ``props`` over the stored document and write it back.

    ``update_config(path, {"repoHistory": ["me/tool"]})`` prepends one
    history entry. Unknown keys already in the file are preserved.
    """
    document = _load_document(path)
    if isinstance(document, Err):
        return document

    merged = merge(document.value, props)
    try:
        atomic_write_json(path, merged)
    except OSError as e:
        return Err(ConfigError(f"Error writing config: {e}", path=path))
    return Ok(Config.from_dict(merged))
