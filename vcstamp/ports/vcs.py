"""Version Control System (VCS) port interface.

Defines the queries vcstamp needs from a version-control client. Every
client is bound to one working directory; file names are relative to it.
"""

from pathlib import Path
from typing import Protocol


class VersionControlClient(Protocol):
    """Protocol for the three queries behind a version stamp."""

    def content_hash(self, name: str) -> str:
        """Hash the file's current bytes, tracked or not.

        Args:
            name: File name relative to the client's working directory.

        Returns:
            Content hash (blob id) of the file.

        Raises:
            VcsQueryError: If the client fails to hash the file.
        """
        ...

    def current_revision(self) -> str:
        """Get the identifier of the checked-out revision.

        Returns:
            Revision identifier.

        Raises:
            RepositoryNotFoundError: If there is no repository or no history.
            VcsQueryError: For any other failure.
        """
        ...

    def status_of(self, name: str) -> str:
        """Get the porcelain status token for a file.

        Args:
            name: File name relative to the client's working directory.

        Returns:
            First token of the file's status entry, or "" when the file
            matches the committed content.

        Raises:
            VcsQueryError: If the status query fails.
        """
        ...


class VersionControlProvider(Protocol):
    """Protocol for locating the client and binding it to a directory."""

    def locate(self) -> str | None:
        """Find the client executable.

        Returns:
            Path to the executable, or None if it is not installed.
        """
        ...

    def client_for(self, workdir: Path) -> VersionControlClient:
        """Create a client that runs its queries from ``workdir``."""
        ...
