"""GitHub REST access used by the release flow.

``GitHubClient`` is the seam the flow depends on; ``HttpGitHubClient`` is
the real implementation over ``httpx.AsyncClient``. HTTP failures are
raised as ``httpx.HTTPError`` and are not retried.
"""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Protocol, Self, TypeVar

import httpx

from rpr import __version__
from rpr.core.structured import (
    StrDict,
    as_obj_list,
    as_str_dict,
    get_bool,
    get_int,
    get_str,
    get_table,
)
from rpr.services.release.model import PullRequest, Release, ReleaseDraft, RepoRef

GITHUB_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GitHubClient(Protocol):
    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def list_pull_requests(self, owner: str, repo: str, *, page: int) -> list[PullRequest]:
        """One page of open pull requests."""
        ...

    async def list_releases(self, owner: str, repo: str) -> list[Release]:
        """Releases, most recent first."""
        ...

    async def create_release(self, draft: ReleaseDraft) -> Release: ...

    async def list_repos_for_authenticated_user(self, *, page: int, per_page: int) -> list[RepoRef]:
        ...


def parse_pull_request(obj: object) -> PullRequest | None:
    data = as_str_dict(obj)
    if data is None:
        return None

    number = get_int(data, "number")
    title = get_str(data, "title")
    html_url = get_str(data, "html_url")
    head: StrDict = get_table(data, "head") or {}
    head_ref = get_str(head, "ref")
    if number is None or title is None or html_url is None or head_ref is None:
        return None

    user = get_table(data, "user")
    author = get_str(user, "login") if user is not None else None
    return PullRequest(
        number=number,
        title=title,
        author=author,
        body=get_str(data, "body"),
        head_ref=head_ref,
        html_url=html_url,
    )


def parse_release(obj: object) -> Release | None:
    data = as_str_dict(obj)
    if data is None:
        return None

    tag_name = get_str(data, "tag_name")
    html_url = get_str(data, "html_url")
    if tag_name is None or html_url is None:
        return None

    return Release(
        tag_name=tag_name,
        draft=bool(get_bool(data, "draft")),
        target_commitish=get_str(data, "target_commitish") or "",
        name=get_str(data, "name"),
        body=get_str(data, "body"),
        html_url=html_url,
    )


def parse_repo_ref(obj: object) -> RepoRef | None:
    data = as_str_dict(obj)
    if data is None:
        return None

    name = get_str(data, "name")
    owner = get_table(data, "owner")
    login = get_str(owner, "login") if owner is not None else None
    if name is None or login is None:
        return None
    return RepoRef(owner=login, name=name)


T = TypeVar("T")


def _parse_list(payload: object, parse: Callable[[object], T | None]) -> list[T]:
    items = as_obj_list(payload) or []
    out: list[T] = []
    for item in items:
        parsed = parse(item)
        if parsed is not None:
            out.append(parsed)
    return out


class HttpGitHubClient:
    """GitHub REST client authenticated with a personal access token.

    Use as an async context manager so the connection pool is closed:

        async with HttpGitHubClient(token) as client:
            releases = await client.list_releases("octo", "tool")
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = GITHUB_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": f"release-pull-request/{__version__}",
            },
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, str | int]) -> object:
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def list_pull_requests(self, owner: str, repo: str, *, page: int) -> list[PullRequest]:
        payload = await self._get_json(
            f"/repos/{owner}/{repo}/pulls", {"state": "open", "page": page}
        )
        return _parse_list(payload, parse_pull_request)

    async def list_releases(self, owner: str, repo: str) -> list[Release]:
        payload = await self._get_json(f"/repos/{owner}/{repo}/releases", {})
        return _parse_list(payload, parse_release)

    async def create_release(self, draft: ReleaseDraft) -> Release:
        response = await self._client.post(
            f"/repos/{draft.owner}/{draft.repo}/releases", json=draft.to_payload()
        )
        response.raise_for_status()
        release = parse_release(response.json())
        if release is None:
            raise httpx.DecodingError(
                f"unexpected release payload from {response.request.url}",
                request=response.request,
            )
        return release

    async def list_repos_for_authenticated_user(self, *, page: int, per_page: int) -> list[RepoRef]:
        payload = await self._get_json("/user/repos", {"page": page, "per_page": per_page})
        return _parse_list(payload, parse_repo_ref)
