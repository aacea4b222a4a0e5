"""Utility functions for the dev_events project.

Re-exports the slug, datetime and cache helpers so that imports like
`from ..utils import slugify` or `from ..utils import get_current_timestamp`
work as expected.
"""

from .slugs import slugify, with_suffix, with_random_suffix  # noqa: F401
from .datetime_utils import get_current_timestamp  # noqa: F401
from .cache import TTLCache  # noqa: F401

__all__ = [
    "slugify",
    "with_suffix",
    "with_random_suffix",
    "get_current_timestamp",
    "TTLCache",
]
