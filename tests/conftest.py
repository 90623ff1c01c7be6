"""Shared fixtures: a fake workspace and deterministic service fakes."""

import json

import pytest

from tenex_tasks.config import Settings
from tenex_tasks.publisher import PublicationResult


class FakeGenerator:
    """Returns queued responses in order and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def generate(self, model, prompt):
        self.calls.append((model, prompt))
        return self.responses.pop(0)


class FakePublisher:
    """Records publish calls and returns a fixed exit code."""

    def __init__(self, exit_code=0):
        self.exit_code = exit_code
        self.calls = []

    def publish(self, nsec, event_id, task):
        self.calls.append((nsec, event_id, task))
        return PublicationResult(success=self.exit_code == 0, exit_code=self.exit_code)


def make_project(root, name, descriptor=None, spec=None, architecture=None):
    project_dir = root / name
    project_dir.mkdir()
    if descriptor is not None:
        (project_dir / ".tenex.json").write_text(json.dumps(descriptor))
    if spec is not None or architecture is not None:
        (project_dir / "context").mkdir()
    if spec is not None:
        (project_dir / "context" / "SPEC.md").write_text(spec)
    if architecture is not None:
        (project_dir / "context" / "ARCHITECTURE.md").write_text(architecture)
    return project_dir


@pytest.fixture
def workspace(tmp_path):
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def settings(workspace):
    return Settings(projects_dir=workspace, relays=["wss://relay.example"])
