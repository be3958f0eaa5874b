"""Open pull request listing and selection."""

from __future__ import annotations

from rpr.core.result import Err, Ok, Result
from rpr.services.release.errors import ReleaseError
from rpr.services.release.github import GitHubClient
from rpr.services.release.model import PullRequest
from rpr.services.release.prompt import PromptProtocol, prompt_with_choices


async def list_open_pull_requests(
    client: GitHubClient, owner: str, repo: str
) -> dict[str, PullRequest]:
    """Open pull requests keyed by display label.

    Pages are requested one at a time until an empty page comes back.
    """
    lookup: dict[str, PullRequest] = {}
    page = 0
    while True:
        batch = await client.list_pull_requests(owner, repo, page=page)
        if not batch:
            break
        for pr in batch:
            lookup[pr.label] = pr
        page += 1
    return lookup


async def select_pull_request(
    *,
    client: GitHubClient,
    prompt: PromptProtocol,
    owner: str,
    repo: str,
    number: int | None = None,
) -> Result[PullRequest, ReleaseError]:
    """Pick an open pull request, by ``number`` when given, else by prompt."""
    lookup = await list_open_pull_requests(client, owner, repo)
    if not lookup:
        return Err(
            ReleaseError(kind="not_found", message=f"no open pull requests in {owner}/{repo}")
        )

    if number is not None:
        for pr in lookup.values():
            if pr.number == number:
                return Ok(pr)
        return Err(
            ReleaseError(
                kind="not_found",
                message=f"no open pull request #{number} in {owner}/{repo}",
            )
        )

    selected = await prompt_with_choices(prompt, "Select pull request", sorted(lookup))
    if selected is None:
        return Err(ReleaseError(kind="cancelled", message="no pull request selected"))

    result = lookup.get(selected)
    if result is None:
        return Err(
            ReleaseError(
                kind="not_found",
                message=f"unable to find selected pull request '{selected}' within known list",
            )
        )
    return Ok(result)
