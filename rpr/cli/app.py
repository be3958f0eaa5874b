from __future__ import annotations

import asyncio
from typing import NoReturn

import httpx
import typer

from rpr import __version__
from rpr.cli import context
from rpr.core.errors import ErrorCode
from rpr.core.result import Err
from rpr.core.settings import TOKEN_ENV_VAR
from rpr.services.release.errors import ReleaseError
from rpr.services.release.model import ReleaseOptions
from rpr.services.release.service import create_release

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Draft a GitHub release from an open pull request.\n\n"
    "Negate any boolean option by prepending --no-.",
)

NO_TOKEN_HELP = f"""\
Please set up a GitHub token that can read pull requests and create releases
on the target repositories (classic token: "repo" scope; fine-grained token:
"Contents: read and write" and "Pull requests: read").
Once that is done, set the environment variable
  {TOKEN_ENV_VAR}
to the value of that token, or pass the token with --token."""


def release_error_code(kind: str) -> ErrorCode:
    if kind == "no_token":
        return ErrorCode.NO_TOKEN
    if kind in {"invalid_tag", "invalid_version", "not_found"}:
        return ErrorCode.DATA_ERROR
    if kind == "invalid_config":
        return ErrorCode.IO_ERROR
    return ErrorCode.USER_ERROR


def _exit(err: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=int(code))


def _exit_release(error: ReleaseError) -> NoReturn:
    if error.kind == "no_token":
        typer.echo(NO_TOKEN_HELP, err=True)
        raise typer.Exit(code=int(ErrorCode.NO_TOKEN))
    _exit(error.pretty(), code=release_error_code(error.kind))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def release(
    owner: str | None = typer.Option(None, "--owner", help="Repository owner (user or org)."),
    repo: str | None = typer.Option(
        None, "--repo", help="Repository name, or owner/name when --owner is omitted."
    ),
    pull: int | None = typer.Option(None, "--pull", help="Open pull request number to release."),
    tag: str | None = typer.Option(None, "--tag", help="Tag name (default: last tag + 1)."),
    name: str | None = typer.Option(None, "--name", help="Release name (default: PR title)."),
    body: str | None = typer.Option(
        None, "--body", help="Release notes (default: the PR's Summary section)."
    ),
    token: str | None = typer.Option(
        None, "--token", help=f"GitHub token (default: ${TOKEN_ENV_VAR})."
    ),
    open_pr: bool | None = typer.Option(
        None,
        "--open-pr/--no-open-pr",
        help="Also open the pull request in the browser.",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    del version
    options = ReleaseOptions(
        owner=owner,
        repo=repo,
        pull=pull,
        tag=tag,
        name=name,
        body=body,
        token=token,
        open_pr=open_pr,
    )
    deps = context.build_deps()

    try:
        result = asyncio.run(create_release(options, deps))
    except httpx.HTTPStatusError as e:
        _exit(
            f"GitHub API request failed: {e.response.status_code} {e.request.url}",
            code=ErrorCode.NETWORK_ERROR,
        )
    except httpx.HTTPError as e:
        _exit(f"GitHub API request failed: {e}", code=ErrorCode.NETWORK_ERROR)

    if isinstance(result, Err):
        _exit_release(result.error)


def main() -> None:
    app()
