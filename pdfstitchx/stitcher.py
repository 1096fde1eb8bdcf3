"""The :class:`PdfStitcher` facade."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from .command import CommandBuilder
from .exceptions import NoInputError
from .runner import execute
from .types import CommandSpec, ExecutionResult, PdfInput, StitcherConfig, StitcherState
from .utils import PathLike
from .validators import PageIndex, validate_input

LOGGER = logging.getLogger("pdfstitchx")

InputSpec = Union[PathLike, Tuple[PathLike, Optional[Sequence[PageIndex]]]]


class PdfStitcher:
    """
    Concatenates PDF files into one document using Ghostscript.

    Inputs are validated as they are added; the command is only built and
    run by :meth:`save`.

    Example:
        >>> stitcher = PdfStitcher().add_pdf("cover.pdf").add_pdf("report.pdf", [0, 2])
        >>> output = stitcher.save("combined.pdf")
    """

    def __init__(
        self,
        config: Optional[StitcherConfig] = None,
        *,
        executable_path: Optional[str] = None,
        extra_arguments: Optional[str] = None,
    ) -> None:
        base = config or StitcherConfig()
        self._config = StitcherConfig(
            executable_path=executable_path or base.executable_path,
            extra_arguments=extra_arguments or base.extra_arguments,
        )
        self._builder = CommandBuilder()
        self._state = StitcherState.EMPTY
        self._last_result: Optional[ExecutionResult] = None

    @property
    def config(self) -> StitcherConfig:
        return self._config

    @property
    def state(self) -> StitcherState:
        return self._state

    @property
    def inputs(self) -> Tuple[PdfInput, ...]:
        return self._builder.inputs

    @property
    def last_result(self) -> Optional[ExecutionResult]:
        return self._last_result

    def add_pdf(
        self,
        path: PathLike,
        page_indices: Optional[Sequence[PageIndex]] = None,
    ) -> "PdfStitcher":
        """Validate and queue *path*.

        Args:
            path: PDF file to append.
            page_indices: Zero-based page indices to include, strictly
                ascending. ``None`` includes every page; an empty sequence
                includes nothing.
        """

        pdf_input = validate_input(path, page_indices)
        self._builder.add_input(pdf_input)
        self._state = StitcherState.ACCUMULATING
        return self

    def add_pdfs(self, paths: Iterable[PathLike]) -> "PdfStitcher":
        """Add every path in *paths*, stopping at the first invalid one."""

        for path in paths:
            self.add_pdf(path)
        return self

    def build_command(self, output_path: PathLike) -> CommandSpec:
        """Return the command :meth:`save` would run, without running it.

        Raises :class:`NoInputError` only when no PDF was ever added. Inputs
        added with an empty page selection count as added, so a stitcher
        holding nothing else still builds a command without input files.
        """

        if self._state is StitcherState.EMPTY:
            raise NoInputError()
        return self._builder.finalize(output_path, self._config)

    def save(self, output_path: PathLike) -> Path:
        """Write the stitched document to *output_path* and return its path.

        Errors from validation, command construction and execution
        propagate unchanged; the stitcher stays usable after a failure.
        :class:`NoInputError` is raised before anything runs if no PDF was
        added. If every added PDF has an empty page selection, Ghostscript
        still runs, with no input files.
        """

        command = self.build_command(output_path)
        LOGGER.info(
            "Stitching %d PDF(s) into %s", len(self._builder.inputs), command.output_path
        )
        self._last_result = execute(command)
        self._state = StitcherState.SAVED
        return command.output_path


def stitch_pdfs(
    inputs: Iterable[InputSpec],
    output: PathLike,
    *,
    config: Optional[StitcherConfig] = None,
) -> Path:
    """Stitch *inputs* into *output* in one call.

    Each input is either a path or a ``(path, page_indices)`` pair.
    """

    stitcher = PdfStitcher(config)
    for item in inputs:
        if isinstance(item, tuple):
            path, page_indices = item
            stitcher.add_pdf(path, page_indices)
        else:
            stitcher.add_pdf(item)
    return stitcher.save(output)


__all__ = ["PdfStitcher", "stitch_pdfs", "InputSpec"]
