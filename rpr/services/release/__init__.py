"""Drafting a GitHub release from an open pull request."""

from rpr.services.release.errors import ReleaseError
from rpr.services.release.model import (
    DraftedRelease,
    PullRequest,
    Release,
    ReleaseDraft,
    ReleaseOptions,
    RepoRef,
)
from rpr.services.release.service import ReleaseDeps, create_release

__all__ = [
    "DraftedRelease",
    "PullRequest",
    "Release",
    "ReleaseDeps",
    "ReleaseDraft",
    "ReleaseError",
    "ReleaseOptions",
    "RepoRef",
    "create_release",
]
