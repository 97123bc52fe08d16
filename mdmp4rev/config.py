from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

FFMPEG_ENV_VAR = "MDMP4REV_FFMPEG"
DEFAULT_FFMPEG = "ffmpeg"


@dataclass(frozen=True, slots=True)
class ReverseConfig:
    """Run settings.

    ``overwrite`` defaults to True: an existing ``*-rev.mp4`` is replaced
    (FFmpeg ``-y``). ``timeout`` of None waits for FFmpeg indefinitely.
    """

    ffmpeg_path: str = DEFAULT_FFMPEG
    overwrite: bool = True
    timeout: float | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ReverseConfig:
        environ = os.environ if environ is None else environ
        values: dict = {"ffmpeg_path": environ.get(FFMPEG_ENV_VAR) or DEFAULT_FFMPEG}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
