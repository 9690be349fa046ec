from __future__ import annotations

import logging
from typing import List

from common.errors import OperationFailedError
from common.http_api import HttpApiClient

from .models import LogUpload


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch logs"
UPLOAD_CONTEXT = "Failed to upload log"


class HttpLogStore(HttpApiClient):
    """Logs behind the generic backend: `GET /logs` (names) and `POST /logs` (multipart)."""

    def fetch_logs(self) -> List[str]:
        data = self._request_json("GET", "/logs", FETCH_CONTEXT)
        if data is None:
            return []
        if not isinstance(data, list):
            raise OperationFailedError(FETCH_CONTEXT, "expected a JSON array")
        return [str(name) for name in data]

    def upload_log(self, upload: LogUpload) -> None:
        files = {"file": (upload.name, upload.data, upload.content_type)}
        self._request("POST", "/logs", UPLOAD_CONTEXT, files=files)
        logger.debug("Uploaded log %s (%d bytes)", upload.name, upload.size)
