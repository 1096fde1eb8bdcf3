"""Validation utilities for :mod:`pdfstitchx`."""

from __future__ import annotations

import logging
import os
import re
from typing import Optional, Sequence, Tuple, Union

from .exceptions import (
    InvalidFormatError,
    InvalidPageIndexError,
    PageOrderError,
    PdfNotFoundError,
)
from .types import PdfInput
from .utils import PDF_MIME_TYPE, PathLike, ensure_path, sniff_mime_type

LOGGER = logging.getLogger("pdfstitchx")

PageIndex = Union[int, str]

_DIGITS = re.compile(r"[0-9]+")


def _coerce_page_index(value: object, position: int) -> int:
    if isinstance(value, bool):
        raise InvalidPageIndexError(value, position)
    if isinstance(value, int):
        if value < 0:
            raise InvalidPageIndexError(value, position)
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise InvalidPageIndexError(value, position)


def validate_page_indices(page_indices: Sequence[PageIndex]) -> Tuple[int, ...]:
    """Return *page_indices* as a tuple of ints.

    Elements are checked in order and the first problem found is raised:
    :class:`InvalidPageIndexError` for anything that is not a non-negative
    integer (or a string of digits), :class:`PageOrderError` for an index
    that is not greater than the one before it.
    """

    if isinstance(page_indices, (str, bytes)):
        raise InvalidPageIndexError(page_indices, 0)

    validated: list[int] = []
    for position, value in enumerate(page_indices):
        index = _coerce_page_index(value, position)
        if validated and index <= validated[-1]:
            raise PageOrderError(validated[-1], index, position)
        validated.append(index)
    return tuple(validated)


def validate_input(
    path: PathLike,
    page_indices: Optional[Sequence[PageIndex]] = None,
) -> PdfInput:
    """Validate *path* and *page_indices* and return a :class:`PdfInput`.

    Raises:
        PdfNotFoundError: The file is missing, not a regular file or unreadable.
        InvalidFormatError: The file content is not a PDF.
        InvalidPageIndexError: A page index is not a non-negative integer.
        PageOrderError: Page indices are duplicated or descending.
    """

    pdf_path = ensure_path(path)
    LOGGER.debug("Validating input PDF %s", pdf_path)

    if not pdf_path.is_file() or not os.access(pdf_path, os.R_OK):
        LOGGER.debug("Input %s is missing or unreadable", pdf_path)
        raise PdfNotFoundError(pdf_path)

    try:
        mime_type = sniff_mime_type(pdf_path)
    except OSError as exc:
        raise PdfNotFoundError(pdf_path) from exc

    if mime_type != PDF_MIME_TYPE:
        LOGGER.debug("Input %s sniffed as %s", pdf_path, mime_type)
        raise InvalidFormatError(pdf_path, mime_type)

    selection: Optional[Tuple[int, ...]] = None
    if page_indices is not None:
        selection = validate_page_indices(page_indices)

    LOGGER.info("Validated input PDF %s (pages: %s)", pdf_path, _describe(selection))
    return PdfInput(path=pdf_path, page_indices=selection)


def _describe(selection: Optional[Tuple[int, ...]]) -> str:
    if selection is None:
        return "all"
    if not selection:
        return "none"
    return ",".join(str(index) for index in selection)


__all__ = ["PageIndex", "validate_input", "validate_page_indices"]
