from __future__ import annotations

import mimetypes
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Logical path prefix recorded for uploaded logs in the metadata store.
LOG_PATH_PREFIX = "logs/"


class LogUpload(BaseModel):
    """A named log blob ready to be written to storage under `name`."""

    name: str = Field(..., min_length=1)
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: os.PathLike[str] | str, *, name: Optional[str] = None) -> "LogUpload":
        """Read a local file; the content type is guessed from its extension."""
        p = Path(path)
        ctype, _ = mimetypes.guess_type(p.name)
        return cls(name=name or p.name, data=p.read_bytes(), content_type=ctype or DEFAULT_CONTENT_TYPE)


class LogFileRecord(BaseModel):
    """
    Row of the `log_files` table describing an uploaded log.

    `id`, `uploaded_at` and `created_at` are filled in by the database.
    """

    file_name: str
    file_path: str
    file_size: int = Field(..., ge=0)
    source_device: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def for_upload(cls, upload: LogUpload, *, source_device: Optional[str] = None) -> "LogFileRecord":
        return cls(
            file_name=upload.name,
            file_path=f"{LOG_PATH_PREFIX}{upload.name}",
            file_size=upload.size,
            source_device=source_device,
            metadata={"content_type": upload.content_type},
        )
