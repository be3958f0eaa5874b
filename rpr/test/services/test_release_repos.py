from __future__ import annotations

import json
from pathlib import Path

import pytest

from rpr.core.result import Err, Ok
from rpr.output.console import MockConsole
from rpr.services.release.choices import Separator
from rpr.services.release.model import ReleaseOptions
from rpr.services.release.repos import (
    PAGES_PER_ROUND,
    REPO_PAGE_SIZE,
    full_repo_name_from,
    list_user_repos,
    select_repo,
    split_repo,
)
from rpr.test.fakes import FakeGitHubClient, ScriptedPrompt, repo_pages


@pytest.mark.asyncio
async def test_single_round_when_a_page_is_empty() -> None:
    client = FakeGitHubClient(repo_pages=repo_pages(["octo/b", "octo/a"], REPO_PAGE_SIZE))

    repos = await list_user_repos(client)

    assert sorted(repos) == ["octo/a", "octo/b"]
    assert sorted(client.repo_page_calls) == list(range(PAGES_PER_ROUND))


@pytest.mark.asyncio
async def test_continues_while_every_page_is_full() -> None:
    names = [f"octo/repo{i}" for i in range(7)]
    client = FakeGitHubClient(repo_pages=repo_pages(names, 1))

    repos = await list_user_repos(client)

    assert sorted(repos) == sorted(names)
    # pages 0-5 are all full, so a second round (6-11) is issued and stops
    assert sorted(client.repo_page_calls) == list(range(2 * PAGES_PER_ROUND))


@pytest.mark.asyncio
async def test_overlapping_pages_are_deduplicated() -> None:
    client = FakeGitHubClient(
        repo_pages=repo_pages(["octo/a", "octo/b", "octo/a", "octo/c", "octo/b"], 2)
    )

    repos = await list_user_repos(client)

    assert sorted(repos) == ["octo/a", "octo/b", "octo/c"]
    assert len(repos) == len(set(repos))


class TestFullRepoName:
    def test_nothing_given(self) -> None:
        assert full_repo_name_from(ReleaseOptions()) == Ok(None)
        assert full_repo_name_from(ReleaseOptions(owner="octo")) == Ok(None)

    def test_combined_repo(self) -> None:
        assert full_repo_name_from(ReleaseOptions(repo="octo/tool")) == Ok("octo/tool")

    def test_owner_and_repo(self) -> None:
        options = ReleaseOptions(owner="octo", repo="tool")
        assert full_repo_name_from(options) == Ok("octo/tool")

    def test_bare_repo_without_owner_fails(self) -> None:
        result = full_repo_name_from(ReleaseOptions(repo="tool"))
        assert isinstance(result, Err)
        assert result.error.kind == "invalid_input"


class TestSplitRepo:
    def test_valid(self) -> None:
        assert split_repo("octo/tool") == Ok(("octo", "tool"))

    @pytest.mark.parametrize("value", ["/tool", "octo/", "tool", "a/b/c"])
    def test_invalid(self, value: str) -> None:
        result = split_repo(value)
        assert isinstance(result, Err)
        assert result.error.kind == "invalid_input"


@pytest.mark.asyncio
async def test_select_repo_uses_options_without_listing(tmp_path: Path) -> None:
    client = FakeGitHubClient()
    prompt = ScriptedPrompt()

    result = await select_repo(
        ReleaseOptions(owner="octo", repo="tool"),
        client=client,
        prompt=prompt,
        console=MockConsole(),
        config_path=tmp_path / "history.json",
    )

    assert result == Ok("octo/tool")
    assert client.repo_page_calls == []
    assert prompt.offered == []
    assert not (tmp_path / "history.json").exists()


@pytest.mark.asyncio
async def test_select_repo_prompts_with_history_and_records_choice(tmp_path: Path) -> None:
    config_path = tmp_path / "history.json"
    config_path.write_text(json.dumps({"repoHistory": ["octo/zeta", "gone/old"]}), encoding="utf-8")
    client = FakeGitHubClient(
        repo_pages=repo_pages(["octo/alpha", "octo/zeta", "octo/beta"], REPO_PAGE_SIZE)
    )
    prompt = ScriptedPrompt(answers=["octo/beta"])
    console = MockConsole()

    result = await select_repo(
        ReleaseOptions(),
        client=client,
        prompt=prompt,
        console=console,
        config_path=config_path,
    )

    assert result == Ok("octo/beta")
    offered = prompt.offered[0]
    assert offered[0] == Separator("Recent repos:")
    assert prompt.values() == ["octo/zeta", "octo/alpha", "octo/beta"]
    assert prompt.defaults == ["octo/zeta"]
    assert console.find("listing available repositories...")

    stored = json.loads(config_path.read_text(encoding="utf-8"))
    assert stored["repoHistory"] == ["octo/beta", "octo/zeta", "gone/old"]


@pytest.mark.asyncio
async def test_select_repo_cancelled(tmp_path: Path) -> None:
    client = FakeGitHubClient(repo_pages=repo_pages(["octo/alpha"], REPO_PAGE_SIZE))

    result = await select_repo(
        ReleaseOptions(),
        client=client,
        prompt=ScriptedPrompt(answers=[None]),
        console=MockConsole(),
        config_path=tmp_path / "history.json",
    )

    assert isinstance(result, Err)
    assert result.error.kind == "cancelled"
    assert not (tmp_path / "history.json").exists()


@pytest.mark.asyncio
async def test_select_repo_rejects_non_object_config(tmp_path: Path) -> None:
    config_path = tmp_path / "history.json"
    config_path.write_text("[1, 2]", encoding="utf-8")
    client = FakeGitHubClient(repo_pages=repo_pages(["octo/alpha"], REPO_PAGE_SIZE))

    result = await select_repo(
        ReleaseOptions(),
        client=client,
        prompt=ScriptedPrompt(answers=["octo/alpha"]),
        console=MockConsole(),
        config_path=config_path,
    )

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_config"
    assert result.error.hint == str(config_path)
