from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from mdmp4rev.core.types import CommandInvocation, CommandResult

Behaviour = Callable[[CommandInvocation], CommandResult]


def make_result(invocation: CommandInvocation, returncode: int = 0, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(returncode=returncode, stdout=stdout, stderr=stderr, command=invocation.argv)


class RecordingExecutor:
    """Stand-in executor that records every invocation and returns canned results."""

    def __init__(self, behaviour: Behaviour | None = None) -> None:
        self.calls: List[CommandInvocation] = []
        self.timeouts: List[float | None] = []
        self.behaviour = behaviour or (lambda invocation: make_result(invocation))

    def execute(self, invocation: CommandInvocation, *, timeout: float | None = None) -> CommandResult:
        self.calls.append(invocation)
        self.timeouts.append(timeout)
        return self.behaviour(invocation)


def is_probe(invocation: CommandInvocation) -> bool:
    return invocation.args == ("-version",)


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def clip(tmp_path: Path) -> Path:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"not really a video")
    return path
