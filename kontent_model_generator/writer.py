"""
Atomic file writer for generated models.

Content is written to a temporary file in the target directory which then
replaces the target, so an interrupted run never leaves a half-written model.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from .exceptions import FileWriteError

logger = logging.getLogger(__name__)


class FileWriter:
    """Writes generated files, overwriting existing ones."""

    def write(self, path: Path | str, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            FileWriteError: If file operations fail
        """
        path = Path(path)
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
            temp_path = Path(temp_path_str)

            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            temp_path.replace(path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise FileWriteError(f"Could not write {path}: {e}") from e

        logger.debug("Wrote %s (%d bytes)", path, len(content))
