"""
Command-line interface for pdfstitchx.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pdfstitchx import __version__
from pdfstitchx.exceptions import PdfStitchError
from pdfstitchx.stitcher import PdfStitcher
from pdfstitchx.types import EXECUTABLE_ENV_VAR, EXTRA_ARGUMENTS_ENV_VAR

console = Console()


def parse_input_spec(spec):
    """
    Split an ``INPUT`` argument into a path and optional page indices.

    ``report.pdf`` selects every page, ``report.pdf:0,2`` selects the first
    and third page and ``report.pdf:`` selects nothing. An existing file is
    always taken as a plain path, even when its name contains a colon.
    """
    if os.path.exists(spec) or ":" not in spec:
        return spec, None

    path, _, pages = spec.rpartition(":")
    # "C:" on its own is a drive letter, not a page selection
    if not path or len(path) == 1 or "/" in pages or "\\" in pages:
        return spec, None

    if not pages.strip():
        return path, []
    return path, [token.strip() for token in pages.split(",")]


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.command()
@click.version_option(version=__version__)
@click.argument('output', type=click.Path(dir_okay=False))
@click.argument('inputs', nargs=-1, required=True)
@click.option(
    '--gs', 'executable_path',
    envvar=EXECUTABLE_ENV_VAR,
    default=None,
    help='Ghostscript executable to use instead of searching PATH',
    type=str
)
@click.option(
    '--extra-args', 'extra_arguments',
    envvar=EXTRA_ARGUMENTS_ENV_VAR,
    default=None,
    help='Raw arguments passed to Ghostscript unescaped',
    type=str
)
@click.option('--dry-run', is_flag=True, help='Print the Ghostscript command without running it')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(output, inputs, executable_path, extra_arguments, dry_run, verbose):
    """
    Stitch INPUT PDFs into OUTPUT using Ghostscript.

    Each INPUT is a path, optionally followed by a colon and zero-based
    page indices in ascending order.

    Examples:

        pdf-stitcher combined.pdf cover.pdf report.pdf

        pdf-stitcher combined.pdf cover.pdf report.pdf:0,2,5

        pdf-stitcher --dry-run combined.pdf a.pdf b.pdf
    """
    _configure_logging(verbose)

    try:
        stitcher = PdfStitcher(
            executable_path=executable_path,
            extra_arguments=extra_arguments,
        )

        console.print("\n[bold cyan]Validating inputs...[/bold cyan]")
        for spec in inputs:
            path, page_indices = parse_input_spec(spec)
            stitcher.add_pdf(path, page_indices)

        if dry_run:
            command = stitcher.build_command(output)
            console.print(str(command), markup=False, highlight=False, soft_wrap=True)
            return

        console.print(f"[bold cyan]Stitching {len(stitcher.inputs)} PDF(s)...[/bold cyan]")
        output_path = stitcher.save(output)

        table = Table(title="Stitched Inputs")
        table.add_column("#", style="dim", justify="right")
        table.add_column("File", style="cyan")
        table.add_column("Pages", style="green")
        for position, pdf_input in enumerate(stitcher.inputs, 1):
            if pdf_input.page_indices is None:
                pages = "all"
            elif not pdf_input.page_indices:
                pages = "none"
            else:
                pages = ", ".join(str(index + 1) for index in pdf_input.page_indices)
            table.add_row(str(position), os.path.basename(pdf_input.path), pages)

        console.print(table)
        console.print(f"\n[bold green]✓ Successfully wrote {output_path}[/bold green]\n")

    except PdfStitchError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)


if __name__ == '__main__':
    cli()
