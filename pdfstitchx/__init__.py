"""
pdfstitchx - concatenate PDF files with Ghostscript.

Quick Start:
    >>> from pdfstitchx import PdfStitcher
    >>> stitcher = PdfStitcher().add_pdfs(["a.pdf", "b.pdf"])
    >>> output = stitcher.save("combined.pdf")

Page selection uses zero-based indices in ascending order:
    >>> stitcher = PdfStitcher().add_pdf("report.pdf", [0, 3, 4])

For CLI usage, use the 'pdf-stitcher' command after installation.
"""

# Core classes
from pdfstitchx.stitcher import PdfStitcher, stitch_pdfs
from pdfstitchx.command import CommandBuilder
from pdfstitchx.runner import execute

# Data types
from pdfstitchx.types import (
    CommandSpec,
    ExecutionResult,
    PdfInput,
    StitcherConfig,
    StitcherState,
)

# Exceptions
from pdfstitchx.exceptions import (
    PdfStitchError,
    PdfNotFoundError,
    InvalidFormatError,
    InvalidPageIndexError,
    PageOrderError,
    OutputDirectoryMissingError,
    ToolNotInstalledError,
    ProcessLaunchError,
    ProcessExecutionError,
    NoInputError,
)

# Utility functions
from pdfstitchx.utils import quote, sniff_mime_type
from pdfstitchx.validators import validate_input, validate_page_indices

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PdfStitcher",
    "CommandBuilder",
    "stitch_pdfs",
    "execute",
    # Data types
    "CommandSpec",
    "ExecutionResult",
    "PdfInput",
    "StitcherConfig",
    "StitcherState",
    # Exceptions
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
    # Utility functions
    "quote",
    "sniff_mime_type",
    "validate_input",
    "validate_page_indices",
    # Version info
    "__version__",
]
