"""
Accessors for stored log files.

Backends
- HttpLogStore: generic HTTP backend (`/logs`).
- S3LogStore: S3 bucket, optionally recording uploads via SupabaseLogRecorder.
"""

from .base import LogAccessor, LogMetadataRecorder
from .models import LogFileRecord, LogUpload

__all__ = ["LogAccessor", "LogMetadataRecorder", "LogFileRecord", "LogUpload"]
