from __future__ import annotations

from rpr.cli.prompt import QuestionaryPrompt
from rpr.core.settings import RuntimeEnv
from rpr.output.console import RichConsole
from rpr.platform.opener import open_with_system
from rpr.services.release.github import HttpGitHubClient
from rpr.services.release.service import ReleaseDeps


def build_deps(env: RuntimeEnv | None = None) -> ReleaseDeps:
    return ReleaseDeps(
        client_factory=HttpGitHubClient,
        prompt=QuestionaryPrompt(),
        opener=open_with_system,
        console=RichConsole(),
        env=env or RuntimeEnv.from_process(),
    )
