"""Successor tag computation.

The last dot-separated part of the last path segment is bumped:
``release/v1.9`` becomes ``release/v1.10``. Non-numeric trailing parts
(``v1.2.rc``) are left alone rather than rejected.
"""

from __future__ import annotations

import re

from rpr.core.result import Err, Ok, Result
from rpr.services.release.errors import ReleaseError
from rpr.services.release.model import Release

INITIAL_TAG = "v0.1"

_INTEGER_RE = re.compile(r"^[0-9]+$")


def _increment(value: str) -> Result[str, ReleaseError]:
    if not value:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=f"unable to increment version value '{value}'",
            )
        )
    if _INTEGER_RE.match(value) is None:
        return Ok(value)
    return Ok(str(int(value) + 1))


def next_tag(last_release: Release | None) -> Result[str, ReleaseError]:
    """Compute the tag that follows ``last_release``.

    Returns ``INITIAL_TAG`` when there is no previous release.
    """
    if last_release is None:
        return Ok(INITIAL_TAG)

    last_tag = last_release.tag_name
    parts = last_tag.split("/")
    version = parts[-1]
    if not version:
        return Err(
            ReleaseError(
                kind="invalid_tag",
                message=f"tag_name on release is invalid: '{last_tag}'",
            )
        )

    sub = version.split(".")
    bumped = _increment(sub[-1])
    if isinstance(bumped, Err):
        return Err(
            ReleaseError(
                kind=bumped.error.kind,
                message=bumped.error.message,
                hint=f"last tag: {last_tag}",
            )
        )

    sub[-1] = bumped.value
    parts[-1] = ".".join(sub)
    return Ok("/".join(parts))
