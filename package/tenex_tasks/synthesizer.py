"""
Task synthesis.

Turns a transcript plus the project's own documents into a titled task.
"""

import logging
from dataclasses import dataclass

from .context import ProjectContext
from .errors import GenerationError
from .generation import TextGenerator

logger = logging.getLogger("tenex_tasks.synthesizer")

PROMPT_TEMPLATE = """
You are tasked with creating a detailed task for an LLM to work on based on the following transcript.
The task should include a clear title, a careful explanation, and high-level action items.

{context_section}

-- END OF CONTEXT --

What follows is the task requirement, this is the user's description of what needs to be speced:

<TASK-DETAILS>
{transcript}
</TASK-DETAILS>

Create a detailed task with:
1. A clear, concise title as the first line (this will be extracted as the task title) (no more than 15 words)
2. A thorough explanation of what needs to be done
3. Specific action items or steps to complete the task, do not include filenames, function names, or any other specific implementation details. Just a high-level action items of what is involved to accomplish this task.
4. Any relevant technical considerations based on the context provided.

Provide the title as the first line with nothing else, as we'll extract just that line as the task title.
"""


@dataclass
class GeneratedTask:
    """Generated task text. The first line is the title."""

    content: str

    @property
    def title(self) -> str:
        return self.content.split("\n")[0].strip()

    @property
    def body(self) -> str:
        # Published whole, title line included
        return self.content


def build_context_section(spec: str, architecture: str) -> str:
    """Wrap the non-empty supporting documents in labeled blocks."""
    blocks = []
    if spec:
        blocks.append(f"<SPEC>\n{spec}</SPEC>")
    if architecture:
        blocks.append(f"<ARCHITECTURE>\n{architecture}</ARCHITECTURE>")

    if not blocks:
        return ""

    joined = "\n\n".join(blocks)
    return (
        "\nFor context, here are the project's specification and "
        f"architecture documents:\n\n{joined}"
    )


def build_task_prompt(transcript: str, spec: str = "", architecture: str = "") -> str:
    """Build the task-generation prompt."""
    return PROMPT_TEMPLATE.format(
        context_section=build_context_section(spec, architecture),
        transcript=transcript,
    )


def synthesize_task(
    transcript: str,
    context: ProjectContext,
    generator: TextGenerator,
    model: str,
) -> GeneratedTask:
    """
    Create a detailed task for the resolved project.

    Raises:
        GenerationError: the service returned no text
    """
    logger.info("Creating detailed task...")

    prompt = build_task_prompt(transcript, context.spec, context.architecture)
    content = generator.generate(model, prompt).strip()

    if not content:
        raise GenerationError(f"Model {model} returned an empty task")

    task = GeneratedTask(content)
    logger.info("Generated task: %s", task.title)
    return task
