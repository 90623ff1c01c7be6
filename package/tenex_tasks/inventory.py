"""Lists candidate projects in the workspace root."""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger("tenex_tasks.inventory")


def list_projects(root: Union[str, Path]) -> list[str]:
    """
    Get the project directory names under the workspace root.

    Order is whatever the filesystem returns. Hidden directories are
    skipped. An unreadable root yields an empty list.
    """
    logger.info("Getting project directories from: %s", root)

    try:
        with os.scandir(root) as entries:
            directories = [
                entry.name
                for entry in entries
                if entry.is_dir() and not entry.name.startswith(".")
            ]
    except OSError as e:
        logger.error("Error reading project directories: %s", e)
        return []

    logger.info("Found %d project directories", len(directories))
    return directories
