from __future__ import annotations

from pathlib import Path

import pytest

from pdfstitchx import quote, sniff_mime_type
from pdfstitchx import utils


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain.pdf", "plain.pdf"),
        ("with space.pdf", "'with space.pdf'"),
        ("it's.pdf", "'it'\"'\"'s.pdf'"),
        ("", "''"),
        ("$(rm -rf ~).pdf", "'$(rm -rf ~).pdf'"),
    ],
)
def test_quote(value: str, expected: str) -> None:
    assert quote(value) == expected


def test_sniff_pdf(sample_pdfs: list[Path]) -> None:
    assert sniff_mime_type(sample_pdfs[0]) == "application/pdf"


@pytest.mark.parametrize(
    "content, expected",
    [
        (b"", "inode/x-empty"),
        (b"hello world\n", "text/plain"),
        (b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, "image/png"),
        (b"%!PS-Adobe-3.0\n", "application/postscript"),
        (b"\x00\x01\x02\xff\xfe", "application/octet-stream"),
        (b"garbage before %PDF-1.4", "text/plain"),
    ],
)
def test_sniff_other_content(tmp_path: Path, content: bytes, expected: str) -> None:
    path = tmp_path / "sample.pdf"
    path.write_bytes(content)
    assert sniff_mime_type(path) == expected


def test_sniff_text_cut_mid_character(tmp_path: Path) -> None:
    path = tmp_path / "utf8.txt"
    path.write_bytes(b"a" * (utils.SNIFF_SIZE - 1) + "é".encode("utf-8"))
    assert sniff_mime_type(path) == "text/plain"


def test_which_returns_first_match(monkeypatch: pytest.MonkeyPatch) -> None:
    found = {"gswin64c": "C:/gs/gswin64c.exe"}
    monkeypatch.setattr(utils.shutil, "which", lambda name: found.get(name))

    assert utils.which(("gs", "gswin64c", "gswin32c")) == "C:/gs/gswin64c.exe"
    assert utils.which(("gs",)) is None


def test_ensure_path_expands_user() -> None:
    resolved = utils.ensure_path("~/file.pdf")
    assert resolved.is_absolute()
    assert "~" not in str(resolved)
