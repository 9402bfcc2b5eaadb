"""Git adapter implementing the VCS ports using subprocess git commands."""

import logging
import shutil
import subprocess
from pathlib import Path

from vcstamp.domain.config import StampConfig
from vcstamp.domain.exceptions import RepositoryNotFoundError, VcsQueryError

logger = logging.getLogger(__name__)


def format_git_error(error: subprocess.CalledProcessError, context: str) -> str:
    """Format git error with full context.

    Args:
        error: The CalledProcessError from git command.
        context: Human-readable description of what was being done.

    Returns:
        Formatted error message with exit code and stderr.
    """
    stderr = error.stderr.decode("utf-8", errors="replace").strip() if error.stderr else ""

    msg = f"{context} (git exit code {error.returncode})"
    if stderr:
        msg += f": {stderr}"
    else:
        msg += " (no error output from git)"

    return msg


class GitClient:
    """Git VCS client bound to one working directory.

    Each query is a separate, blocking ``git`` subprocess run with ``cwd``
    set to the working directory. The process working directory is never
    changed.
    """

    def __init__(
        self,
        workdir: Path,
        config: StampConfig | None = None,
        executable: str | None = None,
    ) -> None:
        """Initialize Git client.

        Args:
            workdir: Directory the queries run from.
            config: Settings supplying the executable name and the
                no-repository exit code. Default: StampConfig.default().
            executable: Resolved path of git, overriding config.git_executable.
        """
        self.workdir = workdir
        self.config = config or StampConfig.default()
        self.executable = executable or self.config.git_executable

    def _run_git(self, args: list[str], context: str) -> str:
        """Run a git command in the working directory.

        Args:
            args: Git command arguments (without 'git' prefix).
            context: Description of the query, used in error messages.

        Returns:
            Decoded standard output.

        Raises:
            RepositoryNotFoundError: If git exits with the no-repository code.
            VcsQueryError: If git exits non-zero or cannot be started.
        """
        cmd = [self.executable] + args
        logger.debug("Running %s in %s", cmd, self.workdir)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.workdir,
                capture_output=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = format_git_error(e, context)
            logger.debug("%s", error_msg)
            if e.returncode == self.config.no_repository_exit_code:
                raise RepositoryNotFoundError(error_msg, returncode=e.returncode) from e
            raise VcsQueryError(error_msg, returncode=e.returncode) from e
        except OSError as e:
            raise VcsQueryError(f"{context}: could not run {self.executable}: {e}") from e

        return result.stdout.decode("utf-8", errors="replace")

    def content_hash(self, name: str) -> str:
        """Hash the file's current bytes with ``git hash-object``.

        Works outside a repository and for untracked files.
        """
        output = self._run_git(["hash-object", "--", name], f"Failed to hash '{name}'")
        return output.strip()

    def current_revision(self) -> str:
        """Get the commit SHA of HEAD.

        Raises:
            RepositoryNotFoundError: Outside a repository, or in one with no commits.
            VcsQueryError: For any other failure.
        """
        output = self._run_git(["rev-parse", "HEAD"], "Failed to resolve HEAD revision")
        return output.strip()

    def status_of(self, name: str) -> str:
        """Get the porcelain status token for a file.

        ``git status --porcelain`` prints ``XY path`` per entry; the token is
        the first whitespace-delimited field of the first entry, so `` M`` and
        ``M `` both yield ``M``. A file without an entry is clean.

        The name is passed as a literal pathspec so glob characters and a
        leading ``:`` match only the file itself.

        Returns:
            Status token, or "" for a clean file.
        """
        output = self._run_git(
            ["--literal-pathspecs", "status", "--porcelain", "--", name],
            f"Failed to get status of '{name}'",
        )
        lines = output.splitlines()
        if not lines:
            return ""
        parts = lines[0].split()
        return parts[0] if parts else ""


class GitProvider:
    """Locates the git executable and creates GitClients."""

    def __init__(self, config: StampConfig | None = None) -> None:
        self.config = config or StampConfig.default()
        self._executable: str | None = None

    def locate(self) -> str | None:
        """Find git on PATH.

        Returns:
            Absolute path of the executable, or None if not found.
        """
        self._executable = shutil.which(self.config.git_executable)
        logger.debug("Located %s at %s", self.config.git_executable, self._executable)
        return self._executable

    def client_for(self, workdir: Path) -> GitClient:
        """Create a GitClient running from workdir."""
        return GitClient(
            workdir,
            config=self.config,
            executable=self._executable,
        )
