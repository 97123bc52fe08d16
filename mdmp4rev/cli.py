from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Sequence, TextIO

import colorama

from . import __version__
from .config import ReverseConfig
from .core.errors import VideoError
from .core.executor import CommandExecutor
from .core.ffmpeg_service import ReverseService

PROG = "mdmp4rev"
USAGE = f"Usage: {PROG} <input_mp4_file>"
LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Write a time-reversed copy (video and audio) of an MP4 file next to the original, "
        "named <name>-rev.mp4. Requires FFmpeg.",
    )
    parser.add_argument("input", nargs="?", metavar="INPUT", help="MP4 file to reverse")
    parser.add_argument(
        "--ffmpeg",
        dest="ffmpeg_path",
        metavar="PATH",
        help="FFmpeg executable (default: $MDMP4REV_FFMPEG or 'ffmpeg')",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        help="Fail instead of replacing an existing <name>-rev.mp4 (default: overwrite)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Abort FFmpeg after this many seconds (default: wait until it finishes)",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0, help="-v info, -vv debug")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _paint(stream: TextIO, color: str, message: str) -> str:
    if hasattr(stream, "isatty") and stream.isatty():
        return f"{color}{message}{colorama.Style.RESET_ALL}"
    return message


def main(argv: Sequence[str] | None = None, *, executor: CommandExecutor | None = None) -> int:
    colorama.just_fix_windows_console()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        print(USAGE, file=sys.stderr)
        return 1

    configure_logging(args.verbose)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")

    config = ReverseConfig.from_env(
        ffmpeg_path=args.ffmpeg_path,
        overwrite=args.overwrite,
        timeout=args.timeout,
    )
    service = ReverseService(config, executor)

    try:
        output = service.reverse_file(args.input)
    except VideoError as exc:
        logger.debug("%s failure", exc.kind, exc_info=True)
        print(_paint(sys.stderr, colorama.Fore.RED, f"Error: {exc}"), file=sys.stderr)
        return exc.exit_code

    print(_paint(sys.stdout, colorama.Fore.GREEN, f"Successfully created reversed video: {output.path}"))
    return 0


def run(argv: List[str] | None = None) -> None:
    sys.exit(main(argv))


if __name__ == "__main__":
    run()
