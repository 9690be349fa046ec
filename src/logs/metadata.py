from __future__ import annotations

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from common.errors import OperationFailedError

from .models import LogFileRecord


logger = logging.getLogger(__name__)

RECORD_CONTEXT = "Failed to record log metadata"

LOG_FILES_TABLE = "log_files"


class SupabaseLogRecorder:
    """Inserts one `log_files` row per uploaded log."""

    def __init__(self, *, client: Any, table: str = LOG_FILES_TABLE) -> None:
        self._client = client
        self._table = table

    def record(self, entry: LogFileRecord) -> None:
        try:
            self._client.table(self._table).insert(entry.model_dump()).execute()
        except (APIError, httpx.HTTPError) as e:
            raise OperationFailedError(RECORD_CONTEXT, str(e)) from e
        logger.debug("Recorded metadata for %s", entry.file_name)
