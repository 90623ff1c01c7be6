"""
Project resolution.

Maps a transcript to exactly one project directory. The generation service
names the project; match_project then finds the directory it meant, since
directory names carry random suffixes the service cannot reproduce.
"""

import logging
from typing import Optional, Sequence

from .errors import ResolutionError
from .generation import TextGenerator

logger = logging.getLogger("tenex_tasks.resolver")

PROMPT_TEMPLATE = """
You are tasked with identifying the name of a project mentioned in the following transcript.
The project name should match one of the directories in the list provided below.
Note that the directory names may have a random string suffix that is not part of the actual project name.
For example, the project "Shipyard" might be in a directory called "Shipyard-rux5kf".

Available project directories:
{projects}

Transcript:
{transcript}

Based on the transcript, which project directory is being referred to?
Respond with ONLY the exact directory name from the list above, nothing else.
"""


def build_project_prompt(transcript: str, projects: Sequence[str]) -> str:
    """Build the prompt asking which directory the transcript refers to."""
    return PROMPT_TEMPLATE.format(projects="\n".join(projects), transcript=transcript)


def _clean_response(response: str) -> str:
    return response.strip().strip("`'\"").strip()


def match_project(response: str, projects: Sequence[str]) -> Optional[str]:
    """
    Find the project directory a generation response refers to.

    Rules are tried in order over the whole list, first hit wins:
    1. exact match
    2. case-insensitive match
    3. directory starts with the response
    4. directory's leading segment (before the first "-") starts the response

    Rules 3 and 4 ignore case.

    Returns:
        The matching directory name, or None
    """
    cleaned = _clean_response(response)
    if not cleaned:
        return None

    lowered = cleaned.lower()

    for project in projects:
        if project == cleaned:
            return project

    for project in projects:
        if project.lower() == lowered:
            return project

    for project in projects:
        if project.lower().startswith(lowered):
            return project

    for project in projects:
        segment = project.split("-", 1)[0].lower()
        if segment and lowered.startswith(segment):
            return project

    return None


def resolve_project(
    transcript: str,
    projects: Sequence[str],
    generator: TextGenerator,
    model: str,
) -> str:
    """
    Ask the generation service which project the transcript is about.

    Raises:
        ResolutionError: the response matches no directory
    """
    logger.info("Finding project name from transcript...")

    response = generator.generate(model, build_project_prompt(transcript, projects))
    project = match_project(response, projects)

    if project is None:
        logger.error('Could not match response "%s" to any project directory', response)
        raise ResolutionError(response, len(projects))

    logger.info("Identified project directory: %s", project)
    return project
