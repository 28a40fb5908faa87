"""Exceptions raised by next-unused."""

from __future__ import annotations

from pathlib import Path


class NextUnusedError(Exception):
    """Base class for all next-unused errors."""


class ConfigurationError(NextUnusedError):
    """Fatal: the run cannot start (bad project root, no entry points)."""


class FileError(NextUnusedError):
    """A single source file could not be analyzed."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class FileReadError(FileError):
    """The file could not be read from disk."""


class ParseError(FileError):
    """The parser rejected the file's syntax."""
