"""
Custom exceptions for pdfstitchx.

Validation errors are raised while inputs are added, builder and runner
errors while saving.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PdfStitchError(Exception):
    """Base exception for all pdfstitchx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF stitching error occurred."


class PdfNotFoundError(PdfStitchError, FileNotFoundError):
    """Raised when an input file does not exist or cannot be read."""

    def __init__(self, path: Path | str, message: str = "") -> None:
        self.path = Path(path)
        super().__init__(
            message or f"Specified file does not exist or can not be read: {path}"
        )

    @property
    def default_message(self) -> str:
        return "Specified file does not exist or can not be read."


class InvalidFormatError(PdfStitchError, ValueError):
    """Raised when an input file's content is not a PDF."""

    def __init__(self, path: Path | str, mime_type: Optional[str] = None) -> None:
        self.path = Path(path)
        self.mime_type = mime_type
        detail = f" (detected {mime_type})" if mime_type else ""
        super().__init__(f"Specified file is not a PDF: {path}{detail}")

    @property
    def default_message(self) -> str:
        return "Specified file is not a PDF."


class InvalidPageIndexError(PdfStitchError, ValueError):
    """Raised when a page index is not a non-negative integer."""

    def __init__(self, value: object, position: int) -> None:
        self.value = value
        self.position = position
        super().__init__(
            f"Invalid page index {value!r} at position {position}: "
            "page indices must be non-negative integers"
        )

    @property
    def default_message(self) -> str:
        return "Invalid page index."


class PageOrderError(PdfStitchError, ValueError):
    """Raised when page indices are duplicated or not in ascending order."""

    def __init__(self, previous: int, current: int, position: int) -> None:
        self.previous = previous
        self.current = current
        self.position = position
        problem = "duplicate" if previous == current else "out of order"
        super().__init__(
            f"Page index {current} at position {position} is {problem} "
            f"(previous index was {previous}); page indices must be strictly ascending"
        )

    @property
    def default_message(self) -> str:
        return "Page indices must be strictly ascending without duplicates."


class OutputDirectoryMissingError(PdfStitchError):
    """Raised when the directory of the output file does not exist."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        super().__init__(f"Output directory does not exist: {directory}")

    @property
    def default_message(self) -> str:
        return "Output directory does not exist."


class ToolNotInstalledError(PdfStitchError):
    """Raised when no Ghostscript executable can be found."""

    @property
    def default_message(self) -> str:
        return "Ghostscript (`gs`) is not installed. Please install it."


class ProcessLaunchError(PdfStitchError):
    """Raised when the Ghostscript process cannot be started at all."""

    def __init__(self, command: str, reason: str = "") -> None:
        self.command = command
        suffix = f": {reason}" if reason else ""
        super().__init__(f"Failed to launch command `{command}`{suffix}")

    @property
    def default_message(self) -> str:
        return "Failed to launch the external PDF tool."


class ProcessExecutionError(PdfStitchError):
    """Raised when Ghostscript exits non-zero or writes to standard error."""

    def __init__(self, command: str, exit_code: int, stdout: str, stderr: str) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Command `{command}` failed with exit code {exit_code}\n"
            f"stdout: {stdout.strip()}\n"
            f"stderr: {stderr.strip()}"
        )

    @property
    def default_message(self) -> str:
        return "The external PDF tool reported a failure."


class NoInputError(PdfStitchError):
    """Raised when saving before any PDF has been added."""

    @property
    def default_message(self) -> str:
        return "No input PDFs provided."


__all__ = [
    "PdfStitchError",
    "PdfNotFoundError",
    "InvalidFormatError",
    "InvalidPageIndexError",
    "PageOrderError",
    "OutputDirectoryMissingError",
    "ToolNotInstalledError",
    "ProcessLaunchError",
    "ProcessExecutionError",
    "NoInputError",
]
