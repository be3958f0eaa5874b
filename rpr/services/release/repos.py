"""Repository discovery and selection."""

from __future__ import annotations

import asyncio
from pathlib import Path

from rpr.core.config import REPO_HISTORY_KEY, load_config, update_config
from rpr.core.result import Err, Ok, Result
from rpr.output.console import ConsoleProtocol, Style
from rpr.services.release.errors import ReleaseError
from rpr.services.release.github import GitHubClient
from rpr.services.release.model import ReleaseOptions
from rpr.services.release.prompt import PromptProtocol, prompt_with_choices

REPO_PAGE_SIZE = 100
PAGES_PER_ROUND = 6

RECENT_REPOS_LABEL = "Recent repos:"
OTHER_REPOS_LABEL = "Other repos:"


async def list_user_repos(client: GitHubClient) -> list[str]:
    """All ``owner/name`` repositories visible to the token, deduplicated.

    Pages are fetched in rounds of ``PAGES_PER_ROUND`` concurrent requests.
    The first round that contains an empty page is the last one.
    """
    results: list[str] = []
    offset = 0
    while True:
        pages = [offset + i for i in range(PAGES_PER_ROUND)]
        batches = await asyncio.gather(
            *(
                client.list_repos_for_authenticated_user(page=page, per_page=REPO_PAGE_SIZE)
                for page in pages
            )
        )
        for batch in batches:
            results.extend(repo.full_name for repo in batch)
        if any(not batch for batch in batches):
            break
        offset = pages[-1] + 1

    return list(dict.fromkeys(results))


def full_repo_name_from(options: ReleaseOptions) -> Result[str | None, ReleaseError]:
    """``owner/repo`` from the options, or None when nothing was given."""
    if not options.repo:
        return Ok(None)
    if len(options.repo.split("/")) == 2:
        return Ok(options.repo)
    if not options.owner:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"repository '{options.repo}' was specified without an owner",
                hint="pass --owner or use --repo owner/name",
            )
        )
    return Ok(f"{options.owner}/{options.repo}")


def split_repo(full_name: str) -> Result[tuple[str, str], ReleaseError]:
    parts = full_name.split("/")
    if len(parts) != 2 or not parts[0]:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"repository owner not specified: '{full_name}'",
            )
        )
    if not parts[1]:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"repository name not specified: '{full_name}'",
            )
        )
    return Ok((parts[0], parts[1]))


async def select_repo(
    options: ReleaseOptions,
    *,
    client: GitHubClient,
    prompt: PromptProtocol,
    console: ConsoleProtocol,
    config_path: Path,
) -> Result[str, ReleaseError]:
    """Resolve the target repository from options or an interactive pick.

    An interactive pick is recorded at the front of the history file.
    """
    provided = full_repo_name_from(options)
    if isinstance(provided, Err):
        return provided
    if provided.value is not None:
        return Ok(provided.value)

    with console.status("listing available repositories..."):
        repos = await list_user_repos(client)
    if not repos:
        return Err(
            ReleaseError(
                kind="not_found",
                message="no repositories are visible to this token",
                hint="check the token scopes",
            )
        )

    config = load_config(config_path)
    if isinstance(config, Err):
        return Err(
            ReleaseError(
                kind="invalid_config",
                message=config.error.message,
                hint=str(config_path),
            )
        )
    history = config.value.repo_history
    if history:
        console.print(f"recent repos: {', '.join(history)}", Style.DIM)

    chosen = await prompt_with_choices(
        prompt,
        "Select repository",
        repos,
        history,
        RECENT_REPOS_LABEL,
        OTHER_REPOS_LABEL,
    )
    if chosen is None:
        return Err(ReleaseError(kind="cancelled", message="no repository selected"))

    updated = update_config(config_path, {REPO_HISTORY_KEY: [chosen]})
    if isinstance(updated, Err):
        return Err(
            ReleaseError(
                kind="invalid_config",
                message=updated.error.message,
                hint=str(config_path),
            )
        )
    return Ok(chosen)
