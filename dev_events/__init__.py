"""Top-level package for the dev-events project.

This package exposes the Flask application factory so callers can do
`from dev_events import create_app` or run `python -m dev_events serve`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("dev-events")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .web import create_app  # convenience re-export

__all__ = ["create_app", "__version__"]
