"""
TENEX Tasks pipeline.

Runs the four stages in order: inventory, resolution, context, then
synthesis and publication. Each stage waits on the one before it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .context import load_project_context
from .errors import PublicationError, ResolutionError, UsageError, WorkspaceError
from .generation import TextGenerator, build_generator
from .inventory import list_projects
from .publisher import NakPublisher, PublicationResult, Publisher
from .resolver import match_project, resolve_project
from .synthesizer import GeneratedTask, synthesize_task

logger = logging.getLogger("tenex_tasks.pipeline")


@dataclass
class PipelineResult:
    """What a run produced."""

    project: str
    task: GeneratedTask
    publication: Optional[PublicationResult] = None


def read_transcript(path: Union[str, Path]) -> str:
    """
    Read the transcript file.

    Raises:
        UsageError: the file does not exist or cannot be read
    """
    transcript_path = Path(path).resolve()
    if not transcript_path.is_file():
        raise UsageError(f"Transcript file not found: {transcript_path}")

    try:
        content = transcript_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UsageError(f"Could not read transcript file {transcript_path}: {e}") from e

    logger.info("Read transcript content (%d chars)", len(content))
    return content


def check_workspace(root: Path) -> None:
    """Abort early when the workspace root is unusable."""
    if not root.is_dir():
        raise WorkspaceError(
            f"Directory {root} does not exist or is not accessible. "
            "Set TENEX_PROJECTS_DIR to a valid directory."
        )


def run_pipeline(
    transcript: str,
    settings: Settings,
    generator: Optional[TextGenerator] = None,
    publisher: Optional[Publisher] = None,
    project: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """
    Turn a transcript into a published task.

    Args:
        transcript: Raw transcript text
        settings: Run configuration
        generator: Text-generation backend (default from settings)
        publisher: Publication backend (default: nak)
        project: Project name to use instead of asking the generator
        dry_run: Stop after synthesis without publishing

    Returns:
        PipelineResult for the run

    Raises:
        TenexTaskError subclasses for every fatal condition
    """
    root = settings.projects_dir
    check_workspace(root)

    projects = list_projects(root)
    if not projects:
        raise WorkspaceError(f"No project directories found in {root}")

    if generator is None:
        generator = build_generator(settings)

    if project:
        matched = match_project(project, projects)
        if matched is None:
            raise ResolutionError(project, len(projects))
        logger.info("Using project directory: %s", matched)
    else:
        matched = resolve_project(transcript, projects, generator, settings.find_project_model)

    context = load_project_context(root, matched)
    task = synthesize_task(transcript, context, generator, settings.task_model)

    result = PipelineResult(project=matched, task=task)
    if dry_run:
        logger.info("Dry run, skipping publication")
        return result

    if publisher is None:
        publisher = NakPublisher(settings.relays, settings.nak_bin)

    result.publication = publisher.publish(context.config.nsec, context.config.event_id, task)
    if not result.publication.success:
        raise PublicationError(result.publication.exit_code)

    logger.info("Task successfully published as Nostr event")
    return result
