"""Centralised logging configuration.

Importing this module sets the default logging format/level. Other modules
should simply import `logging` and call `logging.getLogger(__name__)`.
The web factory and the CLI import it before doing any work.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Werkzeug logs every request line at INFO; keep the console readable
logging.getLogger("werkzeug").setLevel(logging.WARNING)

__all__ = ["logging"]
