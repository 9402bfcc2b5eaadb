"""Git adapter using the git command-line client."""

from vcstamp.adapters.git_cmd.git_adapter import GitClient, GitProvider, format_git_error

__all__ = ["GitClient", "GitProvider", "format_git_error"]
