"""Entry point for running vcstamp as a module.

Usage:
    python -m vcstamp [-h] <file>
"""

from vcstamp.entrypoints.cli import main

if __name__ == "__main__":
    main()
