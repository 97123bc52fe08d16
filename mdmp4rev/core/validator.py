from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Tuple

from .errors import InvalidFormatError, NotFoundError, VideoIOError
from .types import InputSpec, OutputSpec

logger = logging.getLogger(__name__)

EXPECTED_EXTENSION = ".mp4"
OUTPUT_SUFFIX = "-rev"


def derive_output_path(input_path: str | Path, suffix: str = OUTPUT_SUFFIX) -> Path:
    """Insert ``suffix`` before the last extension: ``/a/video.mp4`` -> ``/a/video-rev.mp4``."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def validate(path: str | Path) -> Tuple[InputSpec, OutputSpec]:
    input_path = Path(path).expanduser().absolute()

    try:
        mode = input_path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(input_path) from exc
    except OSError as exc:
        raise VideoIOError(f"{input_path}: {exc.strerror or exc}") from exc

    if not stat.S_ISREG(mode):
        raise NotFoundError(input_path, not_a_file=True)
    if input_path.suffix.lower() != EXPECTED_EXTENSION:
        raise InvalidFormatError(input_path, EXPECTED_EXTENSION)

    output_path = derive_output_path(input_path)
    logger.debug("Validated %s, output will be %s", input_path, output_path)
    return InputSpec(input_path), OutputSpec(output_path)
