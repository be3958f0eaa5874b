from __future__ import annotations

from pathlib import Path

import pytest

from rpr.core.settings import (
    CONFIG_ENV_VAR,
    OPEN_PR_ENV_VAR,
    TOKEN_ENV_VAR,
    RuntimeEnv,
    parse_bool,
)


@pytest.mark.parametrize("value", ["1", "true", "yes"])
def test_parse_bool_truthy(value: str) -> None:
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", [None, "", "0", "TRUE", "Yes", "on", "false"])
def test_parse_bool_falsy(value: str | None) -> None:
    assert parse_bool(value) is False


def test_token_lookup_order() -> None:
    env = RuntimeEnv(environ={TOKEN_ENV_VAR: "from-env"}, config_path=Path("x"))
    assert env.token("explicit") == "explicit"
    assert env.token(None) == "from-env"
    assert RuntimeEnv(environ={TOKEN_ENV_VAR: ""}, config_path=Path("x")).token() is None


def test_open_pr_option_overrides_environment() -> None:
    env = RuntimeEnv(environ={OPEN_PR_ENV_VAR: "1"}, config_path=Path("x"))
    assert env.open_pr(None) is True
    assert env.open_pr(False) is False
    assert RuntimeEnv(environ={}, config_path=Path("x")).open_pr(None) is False


def test_from_process_reads_config_override(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
    monkeypatch.setenv(TOKEN_ENV_VAR, "abc")

    env = RuntimeEnv.from_process()

    assert env.config_path == target
    assert env.token() == "abc"


def test_from_process_defaults_to_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    from rpr.platform import paths

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    paths.clear_caches()
    try:
        env = RuntimeEnv.from_process()
    finally:
        paths.clear_caches()

    assert env.config_path == tmp_path / ".release-pull-request"
