"""
Directory scanning helper.

Finds configuration files under a directory by extension or exact name.
The migration path does not use it; plans come from the mapping catalog.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List

logger = logging.getLogger(__name__)

# Hidden directories that are still descended into
VISIBLE_HIDDEN_DIRS = {".git", ".ssh", ".npm"}


def find_config_files(base_dir: str, extensions: Iterable[str]) -> List[str]:
    """
    Walk a directory and collect matching files.

    Args:
        base_dir: Directory to walk
        extensions: Suffixes (".json") or full file names ("config")

    Returns:
        Matching file paths. On a walk error the error is logged and the
        files found so far are returned.
    """
    wanted = set(extensions)
    files: List[str] = []

    def on_error(error: OSError):
        logger.error(f"Error scanning directory: {error}")

    for root, dirs, names in os.walk(base_dir, onerror=on_error):
        dirs[:] = sorted(
            d for d in dirs
            if not d.startswith(".") or d in VISIBLE_HIDDEN_DIRS
        )
        for name in sorted(names):
            if os.path.splitext(name)[1] in wanted or name in wanted:
                files.append(os.path.join(root, name))

    return files
