"""
TENEX Tasks - Voice transcripts to published project tasks.

This package turns a free-form transcript into a task for the right
project of a TENEX workspace:
1. Resolve which project directory the transcript is about
2. Generate a titled task grounded in the project's SPEC and ARCHITECTURE
3. Publish it as a Nostr event tagged with the project's parent event
"""

__version__ = "0.1.0"

from .config import Settings
from .errors import (
    TenexTaskError,
    UsageError,
    WorkspaceError,
    ConfigError,
    ProcessError,
    GenerationError,
    ResolutionError,
    PublicationError,
)
from .generation import (
    TextGenerator,
    OllamaGenerator,
    OllamaHTTPGenerator,
    AnthropicGenerator,
    build_generator,
)
from .inventory import list_projects
from .resolver import match_project, resolve_project
from .context import ProjectConfig, ProjectContext, load_project_context
from .synthesizer import GeneratedTask, build_task_prompt, synthesize_task
from .publisher import NakPublisher, PublicationResult, Publisher
from .pipeline import PipelineResult, run_pipeline

__all__ = [
    # Version
    "__version__",
    # Config
    "Settings",
    # Errors
    "TenexTaskError",
    "UsageError",
    "WorkspaceError",
    "ConfigError",
    "ProcessError",
    "GenerationError",
    "ResolutionError",
    "PublicationError",
    # Generation
    "TextGenerator",
    "OllamaGenerator",
    "OllamaHTTPGenerator",
    "AnthropicGenerator",
    "build_generator",
    # Stages
    "list_projects",
    "match_project",
    "resolve_project",
    "ProjectConfig",
    "ProjectContext",
    "load_project_context",
    "GeneratedTask",
    "build_task_prompt",
    "synthesize_task",
    "NakPublisher",
    "PublicationResult",
    "Publisher",
    # Pipeline
    "PipelineResult",
    "run_pipeline",
]
