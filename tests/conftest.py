from __future__ import annotations

from pathlib import Path
from typing import Callable
import json
import sys
import textwrap

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfstitchx import StitcherConfig, quote  # noqa: E402

FAKE_GS_SOURCE = textwrap.dedent(
    """
    import json
    import os
    import sys

    args = sys.argv[1:]
    record = os.environ.get("FAKE_GS_RECORD")
    if record:
        with open(record, "w") as handle:
            json.dump(args, handle)

    output = None
    inputs = []
    for arg in args:
        if arg.startswith("-sOutputFile="):
            output = arg[len("-sOutputFile="):]
        elif not arg.startswith("-"):
            inputs.append(arg)

    if output and os.environ.get("FAKE_GS_WRITE", "1") == "1":
        with open(output, "wb") as target:
            for path in inputs:
                with open(path, "rb") as source:
                    target.write(source.read())

    sys.stdout.write(os.environ.get("FAKE_GS_STDOUT", ""))
    sys.stderr.write(os.environ.get("FAKE_GS_STDERR", ""))
    sys.exit(int(os.environ.get("FAKE_GS_EXIT", "0")))
    """
)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "ghostscript: needs a real Ghostscript (gs) on PATH"
    )
    config.addinivalue_line(
        "markers", "permissions: needs enforced file permission bits (non-root, POSIX)"
    )


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, title: str | None = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=72, height=72)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", title="Document One")
    pdf2 = pdf_factory("two.pdf")
    return [pdf1, pdf2]


@pytest.fixture()
def multipage_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("multi.pdf", pages=5)


@pytest.fixture()
def text_as_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "notes.pdf"
    path.write_text("just some notes, not a PDF\n")
    return path


@pytest.fixture()
def fake_gs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StitcherConfig:
    """A config that runs a Python stand-in for Ghostscript.

    The script records its arguments to ``argv.json`` and can be steered
    through ``FAKE_GS_*`` environment variables.
    """

    script = tmp_path / "fake_gs.py"
    script.write_text(FAKE_GS_SOURCE)
    monkeypatch.setenv("FAKE_GS_RECORD", str(tmp_path / "argv.json"))
    for name in ("FAKE_GS_STDOUT", "FAKE_GS_STDERR", "FAKE_GS_EXIT", "FAKE_GS_WRITE"):
        monkeypatch.delenv(name, raising=False)
    return StitcherConfig(executable_path=sys.executable, extra_arguments=quote(str(script)))


@pytest.fixture()
def recorded_argv(tmp_path: Path) -> Callable[[], list[str]]:
    def _read() -> list[str]:
        return json.loads((tmp_path / "argv.json").read_text())

    return _read
