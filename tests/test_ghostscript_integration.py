from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfReader

from pdfstitchx import PdfStitcher

pytestmark = [
    pytest.mark.ghostscript,
    pytest.mark.skipif(
        shutil.which("gs") is None,
        reason="Ghostscript (gs) is not installed; per-file -sPageList handling is unverified",
    ),
]


def test_stitch_with_ghostscript(
    tmp_path: Path, pdf_factory: Callable[..., Path]
) -> None:
    first = pdf_factory("first.pdf", pages=2)
    second = pdf_factory("second.pdf", pages=4)
    output = tmp_path / "merged.pdf"

    PdfStitcher().add_pdf(first).add_pdf(second, [1, 3]).save(output)

    assert len(PdfReader(str(output)).pages) == 4
