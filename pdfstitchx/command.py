"""Ghostscript command construction for :mod:`pdfstitchx`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .exceptions import OutputDirectoryMissingError, ToolNotInstalledError
from .types import CommandSpec, PdfInput, StitcherConfig
from .utils import PathLike, ensure_path, which

LOGGER = logging.getLogger("pdfstitchx")

GHOSTSCRIPT_EXECUTABLES: Tuple[str, ...] = ("gs", "gswin64c", "gswin32c")

FIXED_FLAGS: Tuple[str, ...] = (
    "-q",
    "-dNOPAUSE",
    "-dBATCH",
    "-sDEVICE=pdfwrite",
)

ALL_PAGES = "1-"


def page_list_token(page_indices: Optional[Sequence[int]]) -> str:
    """Return the ``-sPageList`` selector for zero-based *page_indices*.

    ``None`` selects page 1 through the end of the document.
    """

    if page_indices is None:
        return f"-sPageList={ALL_PAGES}"
    return "-sPageList=" + ",".join(str(index + 1) for index in page_indices)


def output_file_token(output_path: Path) -> str:
    """Return the ``-sOutputFile`` flag for *output_path*.

    Ghostscript expands ``%d`` in the output name to a page number, so every
    ``%`` is doubled to keep the path literal.
    """

    return "-sOutputFile=" + str(output_path).replace("%", "%%")


def resolve_executable(config: StitcherConfig) -> str:
    """Return the Ghostscript executable named by *config* or found on ``PATH``."""

    if config.executable_path:
        LOGGER.debug("Using configured Ghostscript executable %s", config.executable_path)
        return config.executable_path

    executable = which(GHOSTSCRIPT_EXECUTABLES)
    if not executable:
        raise ToolNotInstalledError()
    return executable


class CommandBuilder:
    """Accumulates input tokens and assembles the final Ghostscript command."""

    def __init__(self) -> None:
        self._inputs: list[PdfInput] = []
        self._tokens: list[str] = []

    @property
    def inputs(self) -> Tuple[PdfInput, ...]:
        return tuple(self._inputs)

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Input tokens accumulated so far, in insertion order."""
        return tuple(self._tokens)

    def add_input(self, pdf_input: PdfInput) -> "CommandBuilder":
        self._inputs.append(pdf_input)
        if pdf_input.is_empty_selection:
            LOGGER.debug("Input %s selects no pages; emitting nothing", pdf_input.path)
            return self

        selector = page_list_token(pdf_input.page_indices)
        LOGGER.debug("Appending %s %s", selector, pdf_input.path)
        self._tokens.extend([selector, str(pdf_input.path)])
        return self

    def finalize(
        self,
        output_path: PathLike,
        config: Optional[StitcherConfig] = None,
    ) -> CommandSpec:
        """Return the complete command writing to *output_path*.

        Raises:
            OutputDirectoryMissingError: The output's parent directory is missing.
            ToolNotInstalledError: No executable configured and none on ``PATH``.
        """

        config = config or StitcherConfig()
        destination = ensure_path(output_path)
        if not destination.parent.is_dir():
            raise OutputDirectoryMissingError(destination.parent)

        executable = resolve_executable(config)
        extra = config.extra_argument_tokens

        tokens = [executable, *extra, *FIXED_FLAGS, output_file_token(destination)]
        tokens.extend(self._tokens)

        command = CommandSpec(
            tokens=tuple(tokens),
            output_path=destination,
            raw_tokens=(1, 1 + len(extra)),
        )
        LOGGER.debug("Built command: %s", command)
        return command


__all__ = [
    "GHOSTSCRIPT_EXECUTABLES",
    "FIXED_FLAGS",
    "CommandBuilder",
    "page_list_token",
    "output_file_token",
    "resolve_executable",
]
