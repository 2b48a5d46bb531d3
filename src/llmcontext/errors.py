# src/llmcontext/errors.py
from pathlib import Path
from typing import Optional, Union


class AggregatorError(Exception):
    """Base class for every failure surfaced to the operator."""

    def __init__(self, message: str, path: Optional[Union[str, bytes, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class FilesystemError(AggregatorError):
    """Root directory is missing or is not a directory."""


class ReadError(AggregatorError):
    """A discovered document could not be read or decoded as UTF-8."""


class WriteError(AggregatorError):
    """The output file could not be written."""
