"""
Configuration for TENEX Tasks.

Settings are read from environment variables once at startup and passed
down to every stage of the pipeline.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_PROJECTS_DIR = Path.home() / "tenex-projects"
DEFAULT_FIND_PROJECT_MODEL = "llama3.2"
DEFAULT_TASK_MODEL = "qwen2.5"
DEFAULT_RELAYS = "wss://relay.primal.net wss://relay.damus.io"
DEFAULT_OLLAMA_HOST = "http://localhost:11434"

GENERATORS = ("ollama", "ollama-http", "anthropic")

# Per-project layout
DESCRIPTOR_NAME = ".tenex.json"
SPEC_PATH = Path("context") / "SPEC.md"
ARCHITECTURE_PATH = Path("context") / "ARCHITECTURE.md"

# Nostr kind used for published tasks
TASK_EVENT_KIND = 1934


@dataclass
class Settings:
    """Runtime configuration for one pipeline run."""

    projects_dir: Path = DEFAULT_PROJECTS_DIR
    find_project_model: str = DEFAULT_FIND_PROJECT_MODEL
    task_model: str = DEFAULT_TASK_MODEL
    relays: list[str] = field(default_factory=lambda: DEFAULT_RELAYS.split())
    generator: str = "ollama"
    ollama_bin: str = "ollama"
    ollama_host: str = DEFAULT_OLLAMA_HOST
    nak_bin: str = "nak"
    anthropic_api_key: str = field(default="", repr=False)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Unset or blank variables fall back to their defaults.
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            value = env.get(name, "").strip()
            return value or default

        generator = get("TENEX_GENERATOR", "ollama").lower()
        if generator not in GENERATORS:
            raise ConfigError(
                f"Unsupported TENEX_GENERATOR {generator!r}, "
                f"expected one of: {', '.join(GENERATORS)}"
            )

        anthropic_api_key = get("ANTHROPIC_API_KEY", "")
        if generator == "anthropic" and not anthropic_api_key:
            raise ConfigError("ANTHROPIC_API_KEY not set (required for TENEX_GENERATOR=anthropic)")

        return cls(
            projects_dir=Path(get("TENEX_PROJECTS_DIR", str(DEFAULT_PROJECTS_DIR))).expanduser(),
            find_project_model=get("FIND_PROJECT_MODEL", DEFAULT_FIND_PROJECT_MODEL),
            task_model=get("TASK_MODEL", DEFAULT_TASK_MODEL),
            relays=get("RELAYS", DEFAULT_RELAYS).split(),
            generator=generator,
            ollama_bin=get("OLLAMA_BIN", "ollama"),
            ollama_host=get("OLLAMA_HOST", DEFAULT_OLLAMA_HOST).rstrip("/"),
            nak_bin=get("NAK_BIN", "nak"),
            anthropic_api_key=anthropic_api_key,
            log_level=get("TENEX_LOG_LEVEL", "INFO").upper(),
        )
