from __future__ import annotations

import logging
from pathlib import Path

from ..config import ReverseConfig
from .dependency import check_available
from .executor import CommandExecutor, SubprocessExecutor
from .ffmpeg_wrapper import FFmpegWrapper
from .types import OutputSpec
from .validator import validate

logger = logging.getLogger(__name__)


class ReverseService:
    """High-level façade: validate the input, confirm FFmpeg, then reverse."""

    def __init__(self, config: ReverseConfig | None = None, executor: CommandExecutor | None = None) -> None:
        self.config = config or ReverseConfig()
        self.executor = SubprocessExecutor() if executor is None else executor
        self.wrapper = FFmpegWrapper(
            self.executor,
            self.config.ffmpeg_path,
            overwrite=self.config.overwrite,
            timeout=self.config.timeout,
        )

    def reverse_file(self, path: str | Path) -> OutputSpec:
        input_spec, output_spec = validate(path)

        check_available(self.executor, self.config.ffmpeg_path)
        logger.debug("Dependency %s confirmed", self.config.ffmpeg_path)

        result = self.wrapper.reverse(input_spec, output_spec)
        logger.info("Wrote %s", result.path)
        return result
