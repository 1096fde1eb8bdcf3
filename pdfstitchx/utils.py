"""Utility helpers for :mod:`pdfstitchx`."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
from pathlib import Path
from typing import Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

LOGGER = logging.getLogger("pdfstitchx")

PDF_MIME_TYPE = "application/pdf"
SNIFF_SIZE = 1024

_SIGNATURES: dict[str, tuple[bytes, ...]] = {
    PDF_MIME_TYPE: (b"%PDF-",),
    "application/postscript": (b"%!PS",),
    "image/png": (b"\x89PNG\r\n\x1a\n",),
    "image/jpeg": (b"\xff\xd8\xff",),
    "image/tiff": (b"II*\x00", b"MM\x00*"),
    "application/zip": (b"PK\x03\x04",),
}


def quote(value: str) -> str:
    """Return *value* quoted for safe inclusion in a POSIX shell command line."""

    return shlex.quote(value)


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*.

    User-home references are expanded and relative paths are resolved
    against the current working directory.
    """

    resolved = Path(path).expanduser()
    return resolved.resolve(strict=False)


def which(executables: Sequence[str]) -> Optional[str]:
    """Return the first executable from *executables* found on ``PATH``."""

    for candidate in executables:
        found = shutil.which(candidate)
        if found:
            LOGGER.debug("Detected external tool: %s -> %s", candidate, found)
            return found
    return None


def _looks_like_text(sample: bytes) -> bool:
    if b"\x00" in sample:
        return False
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte character may be cut off at the end of the sample.
        return exc.start >= len(sample) - 3
    return True


def sniff_mime_type(path: PathLike) -> str:
    """Detect the MIME type of *path* from its leading bytes.

    The file extension is never consulted.
    """

    with open(path, "rb") as handle:
        sample = handle.read(SNIFF_SIZE)

    if not sample:
        return "inode/x-empty"
    for mime_type, signatures in _SIGNATURES.items():
        if any(sample.startswith(signature) for signature in signatures):
            return mime_type
    if _looks_like_text(sample):
        return "text/plain"
    return "application/octet-stream"


__all__ = [
    "PathLike",
    "PDF_MIME_TYPE",
    "quote",
    "ensure_path",
    "which",
    "sniff_mime_type",
]
