"""Launching external commands with Result-based error handling.

Used for the URL opener: the command is fire-and-forget, so only a failure
to launch is reported, as a value rather than an exception.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from rpr.core.result import Err, Ok, Result

__all__ = ["ProcessError", "spawn_detached"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a command that could not be started.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 when the process never started.
        stderr: Error details.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def spawn_detached(cmd: list[str], *, verbatim: bool = False) -> Result[None, ProcessError]:
    """Start a command in its own session and return without waiting.

    Args:
        cmd: Command and arguments to execute.
        verbatim: Pass the space-joined command line unchanged instead of
            letting subprocess re-quote each argument. Arguments must
            already be quoted where needed.

    Returns:
        Ok(None) once the process is started, Err(ProcessError) if it
        could not be started.
    """
    args: list[str] | str = " ".join(cmd) if verbatim else cmd
    try:
        subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))
    return Ok(None)
