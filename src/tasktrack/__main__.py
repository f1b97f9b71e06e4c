"""Allow running as ``python -m tasktrack``."""

from tasktrack.cli import cli_main

if __name__ == "__main__":
    cli_main()
