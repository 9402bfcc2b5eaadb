"""Local file system adapter.

Implements the FileSystem port using pathlib and os.access.
This is the default adapter for file system checks.
"""

import os
from pathlib import Path


class LocalFileSystem:
    """Local file system implementation of the FileSystem port."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_readable(self, path: Path) -> bool:
        """Check read permission for the real user, as access(2) does."""
        return os.access(path, os.R_OK)
