"""Allow running as ``python -m humantime``."""

from humantime.cli import main

main()
