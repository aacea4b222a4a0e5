"""Allow ``python -m dev_events``."""

from .cli import main

main()
