from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from .models import LogFileRecord, LogUpload


@runtime_checkable
class LogAccessor(Protocol):
    """List and upload log blobs.

    Implementations: HttpLogStore, S3LogStore.
    """

    def fetch_logs(self) -> List[str]:
        """Names of stored logs in backend order; `[]` when none exist."""
        ...

    def upload_log(self, upload: LogUpload) -> None:
        """Write `upload.data` under `upload.name`, replacing any existing blob."""
        ...


@runtime_checkable
class LogMetadataRecorder(Protocol):
    """Secondary store receiving one record per successful upload."""

    def record(self, entry: LogFileRecord) -> None:
        ...
