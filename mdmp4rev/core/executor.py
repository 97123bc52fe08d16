from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from .types import CommandInvocation, CommandResult

logger = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    """Runs one external program and reports how it exited.

    Implementations raise ``OSError`` (``FileNotFoundError`` when the program
    is not on the search path) if the process cannot be spawned, and
    ``subprocess.TimeoutExpired`` when ``timeout`` elapses.
    """

    def execute(self, invocation: CommandInvocation, *, timeout: float | None = None) -> CommandResult:
        ...


class SubprocessExecutor:
    """Executes invocations with :func:`subprocess.run`, capturing both streams."""

    def execute(self, invocation: CommandInvocation, *, timeout: float | None = None) -> CommandResult:
        command = invocation.argv
        logger.debug("Running %s", invocation.stringify())
        completed = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
        logger.debug("%s exited with code %s", invocation.program, completed.returncode)
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            command=command,
        )
