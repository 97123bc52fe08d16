from __future__ import annotations

import pytest
from conftest import RecordingExecutor, make_result

from mdmp4rev.core.dependency import check_available
from mdmp4rev.core.errors import DependencyMissingError, VideoIOError
from mdmp4rev.core.types import CommandInvocation


def test_probe_runs_version_query(executor: RecordingExecutor) -> None:
    check_available(executor)
    assert executor.calls == [CommandInvocation("ffmpeg", ("-version",))]


def test_probe_returns_banner_line() -> None:
    executor = RecordingExecutor(
        lambda invocation: make_result(invocation, stdout="\nffmpeg version 6.1 Copyright\nbuilt with gcc\n")
    )
    assert check_available(executor) == "ffmpeg version 6.1 Copyright"


def test_missing_program_is_dependency_missing() -> None:
    def not_found(invocation: CommandInvocation):
        raise FileNotFoundError(2, "No such file or directory", invocation.program)

    executor = RecordingExecutor(not_found)
    with pytest.raises(DependencyMissingError) as excinfo:
        check_available(executor, "/opt/ffmpeg/bin/ffmpeg")

    assert excinfo.value.program == "/opt/ffmpeg/bin/ffmpeg"
    assert "install FFmpeg" in str(excinfo.value)
    assert len(executor.calls) == 1


def test_permission_denied_is_io_error() -> None:
    def denied(invocation: CommandInvocation):
        raise PermissionError(13, "Permission denied", invocation.program)

    with pytest.raises(VideoIOError, match="Permission denied"):
        check_available(RecordingExecutor(denied))


def test_non_zero_exit_still_counts_as_available() -> None:
    executor = RecordingExecutor(lambda invocation: make_result(invocation, returncode=1, stderr="usage"))
    assert check_available(executor) == ""


def test_other_spawn_failure_is_io_error() -> None:
    def broken(invocation: CommandInvocation):
        raise OSError(7, "Argument list too long")

    with pytest.raises(VideoIOError, match="Argument list too long"):
        check_available(RecordingExecutor(broken))
