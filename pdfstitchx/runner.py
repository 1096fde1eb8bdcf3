"""Subprocess execution for :mod:`pdfstitchx`."""

from __future__ import annotations

import logging
import subprocess

from .exceptions import ProcessExecutionError, ProcessLaunchError
from .types import CommandSpec, ExecutionResult

LOGGER = logging.getLogger("pdfstitchx")


def execute(command: CommandSpec) -> ExecutionResult:
    """Run *command* and return its captured output.

    Standard input is closed immediately. The run counts as failed when the
    exit status is non-zero or anything at all was written to standard
    error, even with exit status 0.

    Raises:
        ProcessLaunchError: The process could not be started.
        ProcessExecutionError: The process failed as described above.
    """

    rendered = str(command)
    LOGGER.debug("Executing command: %s", rendered)
    try:
        process = subprocess.Popen(
            command.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        LOGGER.error("Failed to launch %s: %s", command.executable, exc)
        raise ProcessLaunchError(rendered, str(exc)) from exc

    with process:
        stdout, stderr = process.communicate()
    exit_code = process.returncode

    LOGGER.debug(
        "Command finished with exit code %s\nstdout: %s\nstderr: %s",
        exit_code,
        stdout,
        stderr,
    )

    if exit_code != 0 or stderr:
        LOGGER.error("Command failed with code %s: %s", exit_code, stderr.strip())
        raise ProcessExecutionError(rendered, exit_code, stdout, stderr)

    LOGGER.info("Wrote %s", command.output_path)
    return ExecutionResult(command=command, exit_code=exit_code, stdout=stdout, stderr=stderr)


__all__ = ["execute"]
