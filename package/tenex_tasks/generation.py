"""
Text-generation backends.

The resolver and synthesizer only need "complete this prompt with this
model". Each backend provides that through a different service.
"""

import logging
import os
from typing import Protocol

import anthropic
import requests

from .config import Settings
from .errors import ConfigError, GenerationError
from .process import run_command

logger = logging.getLogger("tenex_tasks.generation")


class TextGenerator(Protocol):
    """Anything that can complete a prompt with a named model."""

    def generate(self, model: str, prompt: str) -> str:
        ...


class OllamaGenerator:
    """Runs `ollama run <model>` with the prompt piped in from a temporary file."""

    def __init__(self, ollama_bin: str = "ollama"):
        self.ollama_bin = ollama_bin

    def generate(self, model: str, prompt: str) -> str:
        logger.info("Querying Ollama with model: %s", model)

        result = run_command(self.ollama_bin, ["run", model], payload=prompt)

        if not result.ok and not result.stdout:
            raise GenerationError(
                f"ollama run {model} failed with exit code {result.returncode}"
            )

        return result.stdout


class OllamaHTTPGenerator:
    """Calls the Ollama HTTP API instead of the CLI."""

    def __init__(self, host: str):
        self.host = host.rstrip("/")

    def generate(self, model: str, prompt: str) -> str:
        logger.info("Querying Ollama at %s with model: %s", self.host, model)

        try:
            response = requests.post(
                f"{self.host}/api/generate",
                json={"model": model, "prompt": prompt, "stream": False},
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise GenerationError(f"Ollama request failed: {e}") from e

        return (data.get("response") or "").strip()


class AnthropicGenerator:
    """Uses Claude through the Anthropic messages API."""

    def __init__(self, api_key: str = "", max_tokens: int = 4096):
        api_key = api_key or os.environ.get("ANTHROPIC_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("ANTHROPIC_API_KEY not set (required for the anthropic generator)")

        try:
            self.client = anthropic.Anthropic(api_key=api_key)
        except anthropic.AnthropicError as e:
            raise GenerationError(f"Could not create Anthropic client: {e}") from e
        self.max_tokens = max_tokens

    def generate(self, model: str, prompt: str) -> str:
        logger.info("Querying Claude with model: %s", model)

        try:
            message = self.client.messages.create(
                model=model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            raise GenerationError(f"API Error: {e}") from e

        return message.content[0].text.strip()


def build_generator(settings: Settings) -> TextGenerator:
    """Create the backend named by settings.generator."""
    if settings.generator == "ollama-http":
        return OllamaHTTPGenerator(settings.ollama_host)
    if settings.generator == "anthropic":
        return AnthropicGenerator(settings.anthropic_api_key)
    return OllamaGenerator(settings.ollama_bin)
