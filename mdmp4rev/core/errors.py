from __future__ import annotations

from pathlib import Path


class VideoError(RuntimeError):
    """Base class for every failure the reverser reports to the user."""

    kind = "VideoError"
    exit_code = 1


class NotFoundError(VideoError):
    kind = "NotFound"

    def __init__(self, path: str | Path, *, not_a_file: bool = False) -> None:
        self.path = Path(path)
        if not_a_file:
            message = f"Input path is not a regular file: {path}"
        else:
            message = f"Input file does not exist: {path}"
        super().__init__(message)


class InvalidFormatError(VideoError):
    kind = "InvalidFormat"

    def __init__(self, path: str | Path, expected: str = ".mp4") -> None:
        self.path = Path(path)
        self.expected = expected
        super().__init__(f"Input file must be an {expected.lstrip('.').upper()}: {path}")


class DependencyMissingError(VideoError):
    kind = "DependencyMissing"

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"FFmpeg is not installed or not accessible ({program}); install FFmpeg and make sure it is on PATH")


class ProcessingError(VideoError):
    """Raised when FFmpeg ran but did not finish successfully."""

    kind = "ProcessingError"

    def __init__(self, detail: str, *, returncode: int | None = None) -> None:
        self.detail = detail
        self.returncode = returncode
        super().__init__(f"Failed to process video: {detail}")


class VideoIOError(VideoError):
    kind = "Io"

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"IO error: {description}")
