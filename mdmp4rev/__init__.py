"""Reverse the video and audio of an MP4 file with FFmpeg."""

__version__ = "0.1.0"
