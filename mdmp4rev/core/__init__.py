from .errors import (
    DependencyMissingError,
    InvalidFormatError,
    NotFoundError,
    ProcessingError,
    VideoError,
    VideoIOError,
)
from .executor import CommandExecutor, SubprocessExecutor
from .dependency import check_available
from .ffmpeg_service import ReverseService
from .ffmpeg_wrapper import FFmpegWrapper, reverse
from .types import CommandInvocation, CommandResult, InputSpec, OutputSpec
from .validator import derive_output_path, validate

__all__ = [
    "CommandExecutor",
    "CommandInvocation",
    "CommandResult",
    "DependencyMissingError",
    "FFmpegWrapper",
    "InputSpec",
    "InvalidFormatError",
    "NotFoundError",
    "OutputSpec",
    "ProcessingError",
    "ReverseService",
    "SubprocessExecutor",
    "VideoError",
    "VideoIOError",
    "check_available",
    "derive_output_path",
    "reverse",
    "validate",
]
