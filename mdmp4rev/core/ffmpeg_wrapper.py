from __future__ import annotations

import logging
import re
import subprocess

from .errors import DependencyMissingError, ProcessingError, VideoIOError
from .executor import CommandExecutor, SubprocessExecutor
from .types import CommandInvocation, CommandResult, InputSpec, OutputSpec

logger = logging.getLogger(__name__)

VIDEO_REVERSE_FILTER = "reverse"
AUDIO_REVERSE_FILTER = "areverse"
STDERR_TAIL_LINES = 20

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def sanitize_stderr(stderr: str, max_lines: int = STDERR_TAIL_LINES) -> str:
    """Strip terminal escapes and keep the last ``max_lines`` non-empty lines.

    FFmpeg writes the actual failure reason at the end of its log.
    """
    cleaned = ANSI_ESCAPE_RE.sub("", stderr).replace("\r", "\n")
    lines = [line.rstrip() for line in cleaned.splitlines() if line.strip()]
    return "\n".join(lines[-max_lines:])


class FFmpegWrapper:
    """Builds the reversal command and runs it through an executor."""

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        ffmpeg_path: str = "ffmpeg",
        *,
        overwrite: bool = True,
        timeout: float | None = None,
    ) -> None:
        self.executor = SubprocessExecutor() if executor is None else executor
        self.ffmpeg_path = ffmpeg_path
        self.overwrite = overwrite
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def build_reverse_command(self, input_spec: InputSpec, output_spec: OutputSpec) -> CommandInvocation:
        return CommandInvocation.of(
            self.ffmpeg_path,
            "-y" if self.overwrite else "-n",
            "-i",
            input_spec.path,
            "-vf",
            VIDEO_REVERSE_FILTER,
            "-af",
            AUDIO_REVERSE_FILTER,
            output_spec.path,
        )

    def reverse(self, input_spec: InputSpec, output_spec: OutputSpec) -> OutputSpec:
        invocation = self.build_reverse_command(input_spec, output_spec)
        if self.overwrite and output_spec.path.exists():
            logger.warning("Overwriting existing %s", output_spec.path)
        logger.info("Reversing %s -> %s", input_spec.path, output_spec.path)
        result = self._execute(invocation)

        if not result.ok:
            detail = sanitize_stderr(result.stderr) or f"FFmpeg exited with code {result.returncode}"
            raise ProcessingError(detail, returncode=result.returncode)
        return output_spec

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _execute(self, invocation: CommandInvocation) -> CommandResult:
        try:
            return self.executor.execute(invocation, timeout=self.timeout)
        except FileNotFoundError as exc:
            raise DependencyMissingError(invocation.program) from exc
        except subprocess.TimeoutExpired as exc:
            raise ProcessingError(f"FFmpeg timed out after {exc.timeout:g} seconds") from exc
        except OSError as exc:
            raise VideoIOError(exc.strerror or str(exc)) from exc


def reverse(
    input_spec: InputSpec,
    output_spec: OutputSpec,
    executor: CommandExecutor,
    *,
    program: str = "ffmpeg",
    overwrite: bool = True,
    timeout: float | None = None,
) -> OutputSpec:
    wrapper = FFmpegWrapper(executor, program, overwrite=overwrite, timeout=timeout)
    return wrapper.reverse(input_spec, output_spec)
