"""Domain entities for version stamping.

A run produces exactly one VersionStamp (the result line) and zero or more
Diagnostics (lines routed to standard error).
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class StatusCategory(str, Enum):
    """Human-readable working-tree status of a file."""

    UNTRACKED = "Untracked"
    ADDED = "Added"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    COPIED = "Copied"
    UNMERGED = "Unmerged"
    UNKNOWN = "UNKNOWN"


# Porcelain status tokens (leading/trailing blanks removed) to categories.
# Renamed and copied entries only show up when rename detection is requested.
STATUS_CODE_CATEGORIES: dict[str, StatusCategory] = {
    "??": StatusCategory.UNTRACKED,
    "A": StatusCategory.ADDED,
    "M": StatusCategory.MODIFIED,
    "D": StatusCategory.DELETED,
    "R": StatusCategory.RENAMED,
    "C": StatusCategory.COPIED,
    "U": StatusCategory.UNMERGED,
    "UU": StatusCategory.UNMERGED,
}


def categorize_status(code: str) -> StatusCategory:
    """Map a porcelain status token to its category.

    Args:
        code: Status token as reported by ``git status --porcelain``.

    Returns:
        The matching category, or StatusCategory.UNKNOWN for any code
        outside the table.
    """
    return STATUS_CODE_CATEGORIES.get(code.strip(), StatusCategory.UNKNOWN)


@dataclass(frozen=True)
class FileReference:
    """A target file split into its directory and base name.

    Attributes:
        directory: Directory the file lives in; all queries run from here.
        name: Base name of the file inside ``directory``.
    """

    directory: Path
    name: str

    @classmethod
    def from_path(cls, path: Path | str) -> "FileReference":
        """Decompose a path into (directory, name).

        A bare file name resolves to the current directory.
        """
        path = Path(path)
        return cls(directory=path.parent, name=path.name)

    @property
    def path(self) -> Path:
        return self.directory / self.name


@dataclass(frozen=True)
class VersionStamp:
    """The result line of a run.

    Attributes:
        revision: Current revision identifier, if one was obtained.
        status: Working-tree category; None only for a clean file.
        blob: Content hash of the file's current bytes, if one was obtained.
    """

    revision: str | None = None
    status: StatusCategory | None = StatusCategory.UNKNOWN
    blob: str | None = None

    @classmethod
    def clean(cls, revision: str) -> "VersionStamp":
        return cls(revision=revision, status=None, blob=None)

    @classmethod
    def changed(cls, revision: str, status: StatusCategory, blob: str) -> "VersionStamp":
        return cls(revision=revision, status=status, blob=blob)

    @classmethod
    def unknown(cls, blob: str | None = None) -> "VersionStamp":
        return cls(revision=None, status=StatusCategory.UNKNOWN, blob=blob)

    def render(self, quote: str = "'") -> str:
        """Format the stamp as it is printed on standard output.

        Args:
            quote: Literal character wrapped around the line.

        Returns:
            e.g. ``'ref:<rev> status:Modified blob:<hash>'``.
        """
        fields = []
        if self.revision is not None:
            fields.append(f"ref:{self.revision}")
        if self.status is not None:
            fields.append(f"status:{self.status.value}")
        if self.blob is not None:
            fields.append(f"blob:{self.blob}")
        return f"{quote}{' '.join(fields)}{quote}"


class Severity(str, Enum):
    """Severity prefix of a diagnostic line."""

    FATAL = "FATAL"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A message destined for standard error.

    Attributes:
        severity: FATAL or WARNING prefix.
        message: The primary message.
        hint: Optional actionable suggestion, printed on its own line.
    """

    severity: Severity
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        msg = f"{self.severity.value}: {self.message}"
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg
