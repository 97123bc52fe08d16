from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple


@dataclass(frozen=True, slots=True)
class InputSpec:
    """A validated source video: existing regular file with an MP4 extension."""

    path: Path


@dataclass(frozen=True, slots=True)
class OutputSpec:
    """Destination of the reversed video, always a sibling of the input."""

    path: Path


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, program: str, *args: object) -> CommandInvocation:
        return cls(program, tuple(str(arg) for arg in args))

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def stringify(self) -> str:
        """Return a shell-safe string for logging or debugging."""
        return stringify(self.argv)


@dataclass(slots=True)
class CommandResult:
    """Thin wrapper around subprocess output for downstream consumers."""

    returncode: int
    stdout: str
    stderr: str
    command: List[str]

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def stringify(command: Iterable[str]) -> str:
    return " ".join(shlex.quote(str(part)) for part in command)
