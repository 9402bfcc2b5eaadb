"""Stamp use case: turn a file's version-control state into a result line.

The flow is strictly linear and stops at the first failure:

1. locate the version-control client (fatal if missing)
2. resolve the file's directory (fatal if missing or not a directory)
3. check the file exists and is readable (fatal otherwise)
4. hash the file's content
5. resolve the current revision
6. read the file's working-tree status

Failures in steps 4-6 degrade to a ``status:UNKNOWN`` stamp with exit code 0
so that build stamping never breaks a build.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from vcstamp.domain.entities import (
    Diagnostic,
    FileReference,
    Severity,
    VersionStamp,
    categorize_status,
)
from vcstamp.domain.exceptions import (
    PreconditionError,
    RepositoryNotFoundError,
    VcsQueryError,
)
from vcstamp.ports.fs import FileSystem
from vcstamp.ports.vcs import VersionControlClient, VersionControlProvider

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass
class StampRequest:
    """Request to stamp a file.

    Attributes:
        path: Path to the file, absolute or relative to the current directory.
    """

    path: Path


@dataclass
class StampResponse:
    """Outcome of a stamping run.

    Attributes:
        stamp: Result line to print on standard output.
        exit_code: Process exit code.
        diagnostics: Messages to print on standard error.
    """

    stamp: VersionStamp
    exit_code: int = EXIT_SUCCESS
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.exit_code == EXIT_SUCCESS

    @classmethod
    def create_success(cls, stamp: VersionStamp) -> "StampResponse":
        return cls(stamp=stamp)

    @classmethod
    def create_fatal(cls, message: str, hint: str | None = None) -> "StampResponse":
        """Create a response for a failed precondition (exit 1)."""
        return cls(
            stamp=VersionStamp.unknown(),
            exit_code=EXIT_FAILURE,
            diagnostics=[Diagnostic(Severity.FATAL, message, hint=hint)],
        )

    @classmethod
    def create_degraded(cls, message: str, *, blob: str | None = None) -> "StampResponse":
        """Create a response for a failed query (exit 0, status unknown)."""
        return cls(
            stamp=VersionStamp.unknown(blob=blob),
            exit_code=EXIT_SUCCESS,
            diagnostics=[Diagnostic(Severity.WARNING, message)],
        )


class StampUseCase:
    """Use case for producing a version stamp for a single file."""

    def __init__(self, vcs_provider: VersionControlProvider, fs: FileSystem) -> None:
        """Initialize stamp use case.

        Args:
            vcs_provider: Locates the version-control client and binds it
                to a working directory.
            fs: File system used for the precondition checks.
        """
        self.vcs_provider = vcs_provider
        self.fs = fs

    def execute(self, request: StampRequest) -> StampResponse:
        """Execute the stamp operation.

        Args:
            request: Stamp request with the target path.

        Returns:
            StampResponse with the stamp, exit code and diagnostics.
        """
        try:
            target = self._check_preconditions(request.path)
        except PreconditionError as e:
            logger.debug("Precondition failed for %s: %s", request.path, e.message)
            return StampResponse.create_fatal(e.message, hint=e.hint)

        client = self.vcs_provider.client_for(target.directory)
        return self._query(client, target)

    def _check_preconditions(self, path: Path) -> FileReference:
        """Validate client availability, directory and file.

        Raises:
            PreconditionError: On the first check that fails.
        """
        executable = self.vcs_provider.locate()
        if executable is None:
            raise PreconditionError(
                "version-control client not found on PATH",
                hint="Install git or add its directory to PATH",
            )

        target = FileReference.from_path(path)
        directory = target.directory
        if not self.fs.exists(directory):
            raise PreconditionError(f"directory '{directory}' does not exist")
        if not self.fs.is_dir(directory):
            raise PreconditionError(f"'{directory}' is not a directory")

        if not self.fs.exists(target.path):
            raise PreconditionError(f"file '{target.path}' does not exist")
        if not self.fs.is_readable(target.path):
            raise PreconditionError(f"file '{target.path}' is not readable")

        return target

    def _query(self, client: VersionControlClient, target: FileReference) -> StampResponse:
        try:
            blob = client.content_hash(target.name)
        except VcsQueryError as e:
            return StampResponse.create_degraded(f"could not hash file: {e.message}")

        try:
            revision = client.current_revision()
        except RepositoryNotFoundError as e:
            return StampResponse.create_degraded(
                f"no repository history for '{target.path}': {e.message}", blob=blob
            )
        except VcsQueryError as e:
            return StampResponse.create_degraded(f"could not resolve revision: {e.message}")

        try:
            code = client.status_of(target.name)
        except VcsQueryError as e:
            return StampResponse.create_degraded(
                f"could not get working-tree status: {e.message}", blob=blob
            )

        if not code:
            logger.debug("%s is clean at %s", target.path, revision)
            return StampResponse.create_success(VersionStamp.clean(revision))

        category = categorize_status(code)
        logger.debug("%s has status %r (%s)", target.path, code, category.value)
        return StampResponse.create_success(VersionStamp.changed(revision, category, blob))
