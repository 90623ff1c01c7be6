"""
TENEX Tasks error taxonomy.

Every fatal condition of a run is a TenexTaskError subclass. The pipeline
raises them; the CLI logs them and maps them to an exit status.
"""


class TenexTaskError(RuntimeError):
    """Base class for pipeline failures."""


class UsageError(TenexTaskError):
    """Bad or missing command-line input."""


class WorkspaceError(TenexTaskError):
    """Workspace root missing, unreadable, or holding no projects."""


class ConfigError(TenexTaskError):
    """Bad settings, or a project descriptor that is missing or incomplete."""


class ProcessError(TenexTaskError):
    """An external command could not be started."""


class GenerationError(TenexTaskError):
    """The text-generation service failed or returned nothing."""


class ResolutionError(TenexTaskError):
    """No inventory entry matches the generation response."""

    def __init__(self, response: str, inventory_size: int):
        self.response = response
        self.inventory_size = inventory_size
        super().__init__(
            f'Could not match response "{response}" to any of '
            f"{inventory_size} project directories"
        )


class PublicationError(TenexTaskError):
    """The publication command exited with a non-zero status."""

    def __init__(self, exit_code: int):
        self.exit_code = exit_code
        super().__init__(f"Error publishing Nostr event, exit code: {exit_code}")
