"""Asset store for event posters."""

from __future__ import annotations

import logging
import os
import uuid
from abc import ABC, abstractmethod

from werkzeug.utils import secure_filename

from ..config import UPLOAD_FOLDER, UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


class AssetStore(ABC):
    """Accepts binary blobs and hands back a durable reference."""

    @abstractmethod
    def save(self, filename: str, content: bytes, content_type: str | None = None) -> str:
        """Store *content* and return its reference (URL)."""

    @abstractmethod
    def delete(self, reference: str) -> None:
        """Remove a previously saved asset; unknown references are ignored."""


class LocalAssetStore(AssetStore):
    """Writes assets into a local folder served under ``url_prefix``."""

    def __init__(self, folder: str = UPLOAD_FOLDER, url_prefix: str = UPLOAD_URL_PREFIX) -> None:
        self.folder = os.path.abspath(folder)
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, filename: str, content: bytes, content_type: str | None = None) -> str:
        os.makedirs(self.folder, exist_ok=True)
        safe_name = secure_filename(filename) or "image"
        # Random prefix keeps two uploads of "poster.png" apart
        stored_name = f"{uuid.uuid4().hex[:12]}_{safe_name}"
        with open(os.path.join(self.folder, stored_name), "wb") as fh:
            fh.write(content)
        logger.info("Saved asset %s (%d bytes)", stored_name, len(content))
        return f"{self.url_prefix}/{stored_name}"

    def delete(self, reference: str) -> None:
        name = secure_filename(reference.rsplit("/", 1)[-1])
        if not name:
            return
        path = os.path.join(self.folder, name)
        if os.path.exists(path):
            os.remove(path)
            logger.info("Deleted asset %s", name)

__all__ = ["AssetStore", "LocalAssetStore"]
