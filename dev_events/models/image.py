"""In-memory image file shared by the submission client and the ingestion endpoint."""

from __future__ import annotations

import base64
import mimetypes
import os
from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(slots=True, frozen=True)
class ImageFile:
    """A single uploaded or selected image held in memory."""

    filename: str
    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    def __bool__(self) -> bool:
        return bool(self.content)

    @property
    def preview(self) -> str:
        """Return a ``data:`` URL for local previews (no network I/O)."""
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"

    @classmethod
    def from_data_url(cls, url: str, filename: str = "") -> "ImageFile | None":
        """Rebuild an image from a :attr:`preview` URL; ``None`` if *url* is not one."""
        header, sep, encoded = url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            return None
        try:
            content = base64.b64decode(encoded, validate=True)
        except ValueError:
            return None
        content_type = header[len("data:"):-len(";base64")] or DEFAULT_CONTENT_TYPE
        return cls(filename, content, content_type)

    @classmethod
    def from_path(cls, path: str) -> "ImageFile":
        """Load the file at *path*, guessing its content type from the extension."""
        with open(path, "rb") as fh:
            content = fh.read()
        content_type, _ = mimetypes.guess_type(path)
        return cls(os.path.basename(path), content, content_type or DEFAULT_CONTENT_TYPE)

__all__ = ["ImageFile"]
