"""File System port interface.

Defines the checks vcstamp makes on the target path before querying
version control. Enables testing without touching real permissions.
"""

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Protocol for file system checks."""

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if path is a directory."""
        ...

    def is_readable(self, path: Path) -> bool:
        """Check if the current process may read path."""
        ...
