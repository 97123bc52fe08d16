from __future__ import annotations

import sys

import pytest

from mdmp4rev.core.executor import SubprocessExecutor
from mdmp4rev.core.types import CommandInvocation


def test_runs_real_process_and_captures_streams() -> None:
    invocation = CommandInvocation.of(
        sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr); sys.exit(3)"
    )
    result = SubprocessExecutor().execute(invocation)

    assert result.returncode == 3
    assert not result.ok
    assert result.stdout.strip() == "out"
    assert result.stderr.strip() == "err"
    assert result.command == invocation.argv


def test_missing_program_raises_file_not_found(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        SubprocessExecutor().execute(CommandInvocation.of(str(tmp_path / "no-such-ffmpeg"), "-version"))


def test_invocation_stringify_quotes_arguments() -> None:
    invocation = CommandInvocation.of("ffmpeg", "-i", "my clip.mp4")
    assert invocation.stringify() == "ffmpeg -i 'my clip.mp4'"
