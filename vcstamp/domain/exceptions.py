"""Domain exceptions for vcstamp.

These are raised below the use case and converted there into a
StampResponse; they never reach the CLI.
"""


class VcstampDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class PreconditionError(VcstampDomainError):
    """Raised when a run cannot start: no git client, bad directory or file."""

    pass


class VcsQueryError(VcstampDomainError):
    """Raised when a version-control query exits unsuccessfully.

    Attributes:
        returncode: Exit code of the client, or None if it could not be run.
    """

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class RepositoryNotFoundError(VcsQueryError):
    """Raised when the client reports that no repository (or history) exists."""

    pass
