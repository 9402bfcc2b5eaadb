"""Config domain model for vcstamp.

vcstamp reads no configuration files or environment variables; the CLI runs
with StampConfig.default(). Tests and embedding callers build their own.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StampConfig:
    """Settings for a stamping run.

    Attributes:
        git_executable: Name (or path) of the git client, looked up on PATH.
        no_repository_exit_code: Exit code git uses when no repository
            (or no history) is available.
        quote: Literal character wrapped around the printed result line.

    Raises:
        ValueError: If git_executable is empty, the exit code is not a
            positive integer, or quote is longer than one character.
    """

    git_executable: str = "git"
    no_repository_exit_code: int = 128
    quote: str = "'"

    def __post_init__(self) -> None:
        if not self.git_executable:
            raise ValueError("git_executable cannot be empty")
        if self.no_repository_exit_code <= 0:
            raise ValueError(
                f"no_repository_exit_code must be positive, got {self.no_repository_exit_code}"
            )
        if len(self.quote) > 1:
            raise ValueError(f"quote must be at most one character, got {self.quote!r}")

    @classmethod
    def default(cls) -> "StampConfig":
        """Create a StampConfig with the built-in defaults."""
        return cls()
