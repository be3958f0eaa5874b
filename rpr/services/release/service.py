"""End-to-end flow: pick a repo and pull request, then draft a release.

Stages run strictly in order and the first failure ends the run:

1. resolve the token (option, then environment)
2. select the repository (options, else prompt with recency history)
3. select the open pull request
4. compute the next tag and extract release notes from the PR body
5. create the draft release
6. open the draft's edit page (and the PR when asked)

Expected failures come back as ``Err(ReleaseError)``. GitHub API failures
raise ``httpx.HTTPError`` and are left to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rpr.core.result import Err, Ok, Result
from rpr.core.settings import TOKEN_ENV_VAR, RuntimeEnv
from rpr.output.console import ConsoleProtocol
from rpr.platform.opener import UrlOpener
from rpr.services.release.errors import ReleaseError
from rpr.services.release.github import GitHubClient
from rpr.services.release.model import (
    DraftedRelease,
    PullRequest,
    Release,
    ReleaseDraft,
    ReleaseOptions,
)
from rpr.services.release.notes import extract_release_notes
from rpr.services.release.prompt import PromptProtocol
from rpr.services.release.pulls import select_pull_request
from rpr.services.release.repos import select_repo, split_repo
from rpr.services.release.tags import next_tag

ClientFactory = Callable[[str], GitHubClient]


@dataclass(frozen=True, slots=True)
class ReleaseDeps:
    """Collaborators for one run; tests swap in fakes."""

    client_factory: ClientFactory
    prompt: PromptProtocol
    opener: UrlOpener
    console: ConsoleProtocol
    env: RuntimeEnv


def resolve_token(options: ReleaseOptions, env: RuntimeEnv) -> Result[str, ReleaseError]:
    token = env.token(options.token)
    if token is None:
        return Err(
            ReleaseError(
                kind="no_token",
                message="no GitHub token available",
                hint=f"set {TOKEN_ENV_VAR} or pass --token",
            )
        )
    return Ok(token)


def build_draft(
    *,
    owner: str,
    repo: str,
    pull_request: PullRequest,
    latest: Release | None,
    options: ReleaseOptions,
) -> Result[ReleaseDraft, ReleaseError]:
    """Release payload for ``pull_request``; explicit options win."""
    if options.tag:
        tag_name = options.tag
    else:
        computed = next_tag(latest)
        if isinstance(computed, Err):
            return computed
        tag_name = computed.value

    body = options.body
    if body is None:
        body = extract_release_notes(pull_request.body or "")

    return Ok(
        ReleaseDraft(
            owner=owner,
            repo=repo,
            tag_name=tag_name,
            name=options.name or pull_request.title,
            body=body,
            target_commitish=pull_request.head_ref,
        )
    )


def _open(url: str, deps: ReleaseDeps) -> None:
    opened = deps.opener(url)
    if isinstance(opened, Err):
        deps.console.warning(f"could not open browser ({opened.error}); visit {url}")


async def create_release(
    options: ReleaseOptions, deps: ReleaseDeps
) -> Result[DraftedRelease, ReleaseError]:
    token = resolve_token(options, deps.env)
    if isinstance(token, Err):
        return token

    async with deps.client_factory(token.value) as client:
        full_name = await select_repo(
            options,
            client=client,
            prompt=deps.prompt,
            console=deps.console,
            config_path=deps.env.config_path,
        )
        if isinstance(full_name, Err):
            return full_name

        split = split_repo(full_name.value)
        if isinstance(split, Err):
            return split
        owner, repo = split.value
        deps.console.print(f"repository: {owner}/{repo}")

        pr = await select_pull_request(
            client=client,
            prompt=deps.prompt,
            owner=owner,
            repo=repo,
            number=options.pull,
        )
        if isinstance(pr, Err):
            return pr
        pull_request = pr.value
        deps.console.print(f"pull request: {pull_request.label}")

        releases = await client.list_releases(owner, repo)
        latest = releases[0] if releases else None

        draft = build_draft(
            owner=owner,
            repo=repo,
            pull_request=pull_request,
            latest=latest,
            options=options,
        )
        if isinstance(draft, Err):
            return draft
        previous = latest.tag_name if latest is not None else "none"
        deps.console.info(f"tag: {draft.value.tag_name} (previous: {previous})")

        release = await client.create_release(draft.value)

    edit_url = release.edit_url
    deps.console.success(f"draft release created: {edit_url}")

    _open(edit_url, deps)
    if deps.env.open_pr(options.open_pr):
        _open(pull_request.html_url, deps)

    return Ok(
        DraftedRelease(
            owner=owner,
            repo=repo,
            pull_request=pull_request,
            release=release,
            edit_url=edit_url,
        )
    )
