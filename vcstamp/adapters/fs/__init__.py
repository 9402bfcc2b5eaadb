"""Local file system adapter."""

from vcstamp.adapters.fs.local import LocalFileSystem

__all__ = ["LocalFileSystem"]
