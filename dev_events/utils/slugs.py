"""Slug helpers used to build URL-safe event identifiers."""

from __future__ import annotations

import re
import unicodedata
import uuid
from typing import Final

# Fallback for titles made only of punctuation
DEFAULT_SLUG: Final[str] = "event"

# ---------------------------------------------------------------------------
# Local helpers
# ---------------------------------------------------------------------------

def _fold_char(char: str) -> str:
    """Strip accents from Latin letters; leave other scripts untouched."""
    decomposed = unicodedata.normalize("NFKD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base if base.isascii() else char

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def slugify(text: str) -> str:
    """Return a lowercase, hyphen-separated slug for *text*.

    Punctuation is dropped rather than replaced, so ``"Next.js Conf 2026"``
    becomes ``"nextjs-conf-2026"``. Accented Latin letters are folded to
    ASCII; letters of other scripts are kept (``"Собрание"`` -> ``"собрание"``).
    """
    folded: str = "".join(_fold_char(char) for char in text)

    cleaned: str = folded.lower().strip()
    # Drop everything that is not a letter, digit, whitespace or hyphen
    cleaned = re.sub(r"[^\w\s-]|_", "", cleaned)
    # Collapse runs of whitespace/hyphens into a single hyphen
    cleaned = re.sub(r"[\s-]+", "-", cleaned).strip("-")

    return cleaned or DEFAULT_SLUG


def with_suffix(slug: str, attempt: int) -> str:
    """Return the disambiguated slug for the *attempt*-th try (1-based).

    The first attempt uses the plain slug, later ones append ``-2``, ``-3``...
    """
    return slug if attempt <= 1 else f"{slug}-{attempt}"


def with_random_suffix(slug: str) -> str:
    """Return *slug* with a short random hex suffix, e.g. ``conf-3fa9c1``."""
    return f"{slug}-{uuid.uuid4().hex[:6]}"

__all__ = ["slugify", "with_suffix", "with_random_suffix", "DEFAULT_SLUG"]
