"""vcstamp - build-time version stamps from git state."""

from vcstamp.version import __version__

__all__ = ["__version__"]
