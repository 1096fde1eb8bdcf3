"""
Type definitions and dataclasses for pdfstitchx.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from .utils import quote

EXECUTABLE_ENV_VAR = "PDFSTITCHX_GS"
EXTRA_ARGUMENTS_ENV_VAR = "PDFSTITCHX_EXTRA_ARGS"


class StitcherState(str, Enum):
    """Lifecycle of a :class:`~pdfstitchx.stitcher.PdfStitcher`."""

    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    SAVED = "saved"


@dataclass(frozen=True)
class PdfInput:
    """
    A validated input document.

    Attributes:
        path: Resolved path of the PDF file
        page_indices: Zero-based, strictly ascending page indices to include.
            ``None`` selects every page, an empty tuple selects nothing.
    """

    path: Path
    page_indices: Optional[Tuple[int, ...]] = None

    @property
    def selects_all_pages(self) -> bool:
        return self.page_indices is None

    @property
    def is_empty_selection(self) -> bool:
        return self.page_indices is not None and len(self.page_indices) == 0


@dataclass(frozen=True)
class StitcherConfig:
    """
    Construction-time settings for the Ghostscript invocation.

    Attributes:
        executable_path: Ghostscript binary to use instead of searching ``PATH``
        extra_arguments: Raw argument string inserted verbatim after the
            executable. It is never escaped.
    """

    executable_path: Optional[str] = None
    extra_arguments: Optional[str] = None

    @classmethod
    def from_env(cls) -> "StitcherConfig":
        """Build a config from ``PDFSTITCHX_GS`` and ``PDFSTITCHX_EXTRA_ARGS``."""

        def _read(name: str) -> Optional[str]:
            value = os.getenv(name)
            if value is None or not value.strip():
                return None
            return value.strip()

        return cls(
            executable_path=_read(EXECUTABLE_ENV_VAR),
            extra_arguments=_read(EXTRA_ARGUMENTS_ENV_VAR),
        )

    @property
    def extra_argument_tokens(self) -> Tuple[str, ...]:
        if not self.extra_arguments:
            return ()
        return tuple(shlex.split(self.extra_arguments))


@dataclass(frozen=True)
class CommandSpec:
    """
    A finalized Ghostscript command line.

    ``raw_tokens`` marks the slice of ``tokens`` that came from
    :attr:`StitcherConfig.extra_arguments`; those are rendered unquoted.
    """

    tokens: Tuple[str, ...]
    output_path: Path
    raw_tokens: Tuple[int, int] = (0, 0)

    @property
    def executable(self) -> str:
        return self.tokens[0]

    @property
    def argv(self) -> list[str]:
        return list(self.tokens)

    def __str__(self) -> str:
        start, end = self.raw_tokens
        rendered = []
        for index, token in enumerate(self.tokens):
            rendered.append(token if start <= index < end else quote(token))
        return " ".join(rendered)


@dataclass
class ExecutionResult:
    """
    Outcome of one Ghostscript run.

    Attributes:
        command: The command that was executed
        exit_code: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    command: CommandSpec
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0 and not self.stderr

    def __str__(self) -> str:
        return f"ExecutionResult(exit_code={self.exit_code}, succeeded={self.succeeded})"


__all__ = [
    "StitcherState",
    "PdfInput",
    "StitcherConfig",
    "CommandSpec",
    "ExecutionResult",
    "EXECUTABLE_ENV_VAR",
    "EXTRA_ARGUMENTS_ENV_VAR",
]
