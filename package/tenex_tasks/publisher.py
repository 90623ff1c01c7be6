"""
Task publication.

Publishes a generated task as a Nostr event through the `nak` CLI, tagged
with the project's parent event and the task title.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from .config import TASK_EVENT_KIND
from .process import payload_file, run_passthrough
from .synthesizer import GeneratedTask

logger = logging.getLogger("tenex_tasks.publisher")


@dataclass
class PublicationResult:
    """Outcome of one publication attempt."""

    success: bool
    exit_code: int


class Publisher(Protocol):
    """Anything that can sign and broadcast a task."""

    def publish(self, nsec: str, event_id: str, task: GeneratedTask) -> PublicationResult:
        ...


def build_nak_args(
    nsec: str,
    event_id: str,
    title: str,
    content_arg: str,
    relays: Sequence[str],
) -> list[str]:
    """Arguments for `nak event`; content_arg may be "@<path>" to read a file."""
    return [
        "event",
        "--sec", nsec,
        "-k", str(TASK_EVENT_KIND),
        "-t", f"a={event_id}",
        "-t", f"title={title}",
        "-c", content_arg,
        *relays,
    ]


class NakPublisher:
    """Signs and broadcasts tasks with `nak event`."""

    def __init__(self, relays: Sequence[str], nak_bin: str = "nak"):
        self.relays = list(relays)
        self.nak_bin = nak_bin

    def publish(self, nsec: str, event_id: str, task: GeneratedTask) -> PublicationResult:
        logger.info("Publishing Nostr event to %d relays...", len(self.relays))

        with payload_file(task.body, prefix="temp_task_", suffix=".md") as task_path:
            logger.info("Wrote task content to temporary file: %s", task_path)
            args = build_nak_args(nsec, event_id, task.title, f"@{task_path}", self.relays)
            exit_code = run_passthrough(self.nak_bin, args)

        if exit_code != 0:
            logger.error("Error publishing Nostr event, exit code: %d", exit_code)
            return PublicationResult(success=False, exit_code=exit_code)

        logger.info("Successfully published Nostr event")
        return PublicationResult(success=True, exit_code=0)
