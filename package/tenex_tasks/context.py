"""
Project context loading.

Reads the project descriptor holding the publishing credentials and the
optional documents used to ground task generation.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .config import ARCHITECTURE_PATH, DESCRIPTOR_NAME, SPEC_PATH
from .errors import ConfigError

logger = logging.getLogger("tenex_tasks.context")

REQUIRED_KEYS = ("nsec", "eventId")


@dataclass
class ProjectConfig:
    """Publishing settings from a project's .tenex.json."""

    nsec: str = field(repr=False)
    event_id: str
    extra: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectConfig":
        """
        Create from a parsed descriptor.

        Raises:
            ConfigError: a required key is missing or empty
        """
        missing = [
            key for key in REQUIRED_KEYS
            if not isinstance(data.get(key), str) or not data[key].strip()
        ]
        if missing:
            raise ConfigError(f"Missing {' or '.join(missing)} in {DESCRIPTOR_NAME}")

        extra = {k: v for k, v in data.items() if k not in REQUIRED_KEYS}
        return cls(nsec=data["nsec"].strip(), event_id=data["eventId"].strip(), extra=extra)


@dataclass
class ProjectContext:
    """Everything task synthesis and publication need about one project."""

    project: str
    config: ProjectConfig
    spec: str = ""
    architecture: str = ""


def load_project_config(root: Union[str, Path], project: str) -> ProjectConfig:
    """Read and validate <root>/<project>/.tenex.json."""
    config_path = Path(root) / project / DESCRIPTOR_NAME
    logger.info("Reading Tenex config from: %s", config_path)

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Error reading Tenex config: %s", e)
        raise ConfigError(f"Could not read {DESCRIPTOR_NAME} for project {project}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{DESCRIPTOR_NAME} for project {project} is not a JSON object")

    return ProjectConfig.from_dict(data)


def read_optional(path: Union[str, Path]) -> str:
    """Read a file if it exists, otherwise return an empty string."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.info("File not found: %s", path)
        return ""


def load_project_context(root: Union[str, Path], project: str) -> ProjectContext:
    """Load descriptor and supporting documents for a resolved project."""
    config = load_project_config(root, project)

    project_dir = Path(root) / project
    return ProjectContext(
        project=project,
        config=config,
        spec=read_optional(project_dir / SPEC_PATH),
        architecture=read_optional(project_dir / ARCHITECTURE_PATH),
    )
