from __future__ import annotations

import logging

from .errors import DependencyMissingError, VideoIOError
from .executor import CommandExecutor
from .types import CommandInvocation

logger = logging.getLogger(__name__)

VERSION_PROBE_ARG = "-version"


def check_available(executor: CommandExecutor, program: str = "ffmpeg") -> str:
    """Probe ``program -version`` and return the first banner line.

    Only a program that cannot be found counts as missing; a non-zero exit still means the
    binary is invocable.
    """
    probe = CommandInvocation.of(program, VERSION_PROBE_ARG)
    try:
        result = executor.execute(probe)
    except FileNotFoundError as exc:
        raise DependencyMissingError(program) from exc
    except OSError as exc:
        raise VideoIOError(exc.strerror or str(exc)) from exc

    if not result.ok:
        logger.debug("%s %s exited with code %s, treating as available", program, VERSION_PROBE_ARG, result.returncode)

    banner = next((line.strip() for line in result.stdout.splitlines() if line.strip()), "")
    logger.debug("Found %s: %s", program, banner or "<no version banner>")
    return banner
