from __future__ import annotations

import re

_SUMMARY_MARKER = re.compile(r"\*+\s*summary\s*\*+", re.IGNORECASE)
_HEADING = re.compile(r"\*+.*\*+")


def has_summary_marker(text: str) -> bool:
    return _SUMMARY_MARKER.search(text) is not None


def extract_release_notes(body: str) -> str:
    """Return the section following the first ``**Summary**`` marker.

    Collection stops at the next line that is itself a ``**heading**``.
    A body without a marker is returned as-is.
    """
    if not has_summary_marker(body):
        return body

    collected: list[str] = []
    in_summary = False
    for line in (raw.rstrip() for raw in body.split("\n")):
        if not in_summary:
            in_summary = has_summary_marker(line)
            continue
        if _HEADING.fullmatch(line):
            break
        collected.append(line)
    return "\n".join(collected)
