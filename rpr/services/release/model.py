from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PullRequest:
    number: int
    title: str
    author: str | None
    body: str | None
    head_ref: str
    html_url: str

    @property
    def label(self) -> str:
        """Display label: ``#<number> [<author>] :: <title>``."""
        return f"#{self.number} [{self.author or ''}] :: {self.title}"


@dataclass(frozen=True, slots=True)
class Release:
    tag_name: str
    draft: bool
    target_commitish: str
    name: str | None
    body: str | None
    html_url: str

    @property
    def edit_url(self) -> str:
        return self.html_url.replace("/releases/tag/", "/releases/edit/", 1)


@dataclass(frozen=True, slots=True)
class RepoRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class ReleaseDraft:
    """Payload for creating a release."""

    owner: str
    repo: str
    tag_name: str
    name: str
    body: str
    target_commitish: str
    draft: bool = True

    def to_payload(self) -> dict[str, object]:
        return {
            "tag_name": self.tag_name,
            "name": self.name,
            "body": self.body,
            "draft": self.draft,
            "target_commitish": self.target_commitish,
        }


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    """Per-run options, usually from the command line."""

    owner: str | None = None
    repo: str | None = None
    pull: int | None = None
    tag: str | None = None
    name: str | None = None
    body: str | None = None
    token: str | None = None
    open_pr: bool | None = None


@dataclass(frozen=True, slots=True)
class DraftedRelease:
    """Outcome of a successful run."""

    owner: str
    repo: str
    pull_request: PullRequest
    release: Release
    edit_url: str
