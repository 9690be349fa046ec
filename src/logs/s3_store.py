from __future__ import annotations

import logging
from typing import Any, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from common.errors import OperationFailedError

from .base import LogMetadataRecorder
from .models import LogFileRecord, LogUpload


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch logs"
UPLOAD_CONTEXT = "Failed to upload log"


class S3LogStore:
    """
    Logs stored as objects in one S3 bucket, keyed by file name.

    Usage
    - `fetch_logs()` issues a single `ListObjectsV2` and returns the keys in
      the order S3 delivers them (lexicographic, up to 1000 keys).
    - `upload_log()` puts the blob (overwriting any existing key). When a
      `recorder` is configured, a `LogFileRecord` is then written to it.

    Notes
    - The two writes are not atomic. If recording fails after the blob write
      succeeded, the failure is logged and the upload still counts as done;
      the blob is not removed.
    """

    def __init__(
        self,
        *,
        s3: Any,
        bucket: str,
        recorder: Optional[LogMetadataRecorder] = None,
        source_device: Optional[str] = None,
    ) -> None:
        if not bucket:
            raise ValueError("bucket is required")
        self._s3 = s3
        self._bucket = bucket
        self._recorder = recorder
        self._source_device = source_device

    def fetch_logs(self) -> List[str]:
        try:
            resp = self._s3.list_objects_v2(Bucket=self._bucket)
        except (ClientError, BotoCoreError) as e:
            raise OperationFailedError(FETCH_CONTEXT, str(e)) from e
        return [obj.get("Key") or "" for obj in resp.get("Contents") or []]

    def upload_log(self, upload: LogUpload) -> None:
        try:
            self._s3.put_object(
                Bucket=self._bucket,
                Key=upload.name,
                Body=upload.data,
                ContentType=upload.content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise OperationFailedError(UPLOAD_CONTEXT, str(e)) from e
        logger.debug("Uploaded s3://%s/%s (%d bytes)", self._bucket, upload.name, upload.size)

        if self._recorder is None:
            return
        entry = LogFileRecord.for_upload(upload, source_device=self._source_device)
        try:
            self._recorder.record(entry)
        except Exception as e:
            logger.warning("Log %s uploaded but metadata was not recorded: %s", upload.name, e)
