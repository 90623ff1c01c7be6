"""
External process invocation.

Runs the text-generation and publication commands. Payloads too large or
unsafe for command-line quoting travel through a temporary file that lives
only as long as the call that needs it.
"""

import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .errors import ProcessError

logger = logging.getLogger("tenex_tasks.process")

# Exit status reported when the executable cannot be found
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Captured output of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@contextmanager
def payload_file(text: str, prefix: str = "temp_prompt_", suffix: str = ".txt") -> Iterator[str]:
    """
    Write text to a uniquely named temporary file for the duration of a block.

    The file is removed on every exit path. A failed removal is logged and
    never raised, so it cannot mask the error that ended the block.

    Yields:
        Path of the temporary file
    """
    with tempfile.NamedTemporaryFile(
        mode="w", prefix=prefix, suffix=suffix, encoding="utf-8", delete=False
    ) as f:
        f.write(text)
        temp_path = f.name

    try:
        yield temp_path
    finally:
        try:
            os.unlink(temp_path)
        except OSError as e:
            logger.warning("Could not delete temporary file %s: %s", temp_path, e)


def run_command(
    command: str,
    args: Sequence[str] = (),
    payload: Optional[str] = None,
) -> CommandResult:
    """
    Run a command and capture its output.

    Args:
        command: Executable name or path
        args: Arguments passed after the command
        payload: Optional text piped to the command's stdin via a temporary file

    Returns:
        CommandResult with stdout trimmed
    """
    cmd = [command, *args]

    try:
        if payload is None:
            proc = subprocess.run(
                cmd, capture_output=True, text=True, encoding="utf-8", errors="replace",
                stdin=subprocess.DEVNULL,
            )
        else:
            with payload_file(payload) as path, open(path, encoding="utf-8") as stdin:
                proc = subprocess.run(
                    cmd, capture_output=True, text=True, encoding="utf-8", errors="replace",
                    stdin=stdin,
                )
    except FileNotFoundError as e:
        raise ProcessError(f"Command not found: {command}") from e

    stderr = proc.stderr or ""
    if stderr.strip():
        logger.warning("%s stderr: %s", command, stderr.strip())

    return CommandResult(
        stdout=(proc.stdout or "").strip(),
        stderr=stderr,
        returncode=proc.returncode,
    )


def run_passthrough(command: str, args: Sequence[str] = ()) -> int:
    """
    Run a command with stdio inherited from this process.

    Returns:
        The exit status; COMMAND_NOT_FOUND if the executable is missing
    """
    try:
        proc = subprocess.run([command, *args])
    except FileNotFoundError:
        logger.error("Command not found: %s", command)
        return COMMAND_NOT_FOUND

    return proc.returncode
