from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from common.errors import OperationFailedError


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch parameter"
SAVE_CONTEXT = "Failed to save parameter"


def _error_code(e: ClientError) -> str | None:
    return e.response.get("Error", {}).get("Code")


class SsmParameterStore:
    """
    Parameter kept in SSM Parameter Store as a SecureString.

    Notes
    - Reads request decryption (`WithDecryption=True`); a missing parameter
      reads as `""`.
    - SSM rejects empty values, so writing `""` deletes the parameter, which
      then reads back as `""`.
    """

    def __init__(self, *, ssm: Any, name: str) -> None:
        if not name:
            raise ValueError("name is required")
        self._ssm = ssm
        self._name = name

    def get_parameter(self) -> str:
        try:
            resp = self._ssm.get_parameter(Name=self._name, WithDecryption=True)
        except ClientError as e:
            if _error_code(e) == "ParameterNotFound":
                return ""
            raise OperationFailedError(FETCH_CONTEXT, str(e)) from e
        except BotoCoreError as e:
            raise OperationFailedError(FETCH_CONTEXT, str(e)) from e
        val = resp.get("Parameter", {}).get("Value")
        return val if isinstance(val, str) else ""

    def put_parameter(self, value: str) -> None:
        if value == "":
            self._delete()
            return
        try:
            self._ssm.put_parameter(
                Name=self._name,
                Value=value,
                Type="SecureString",
                Overwrite=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise OperationFailedError(SAVE_CONTEXT, str(e)) from e

    def _delete(self) -> None:
        try:
            self._ssm.delete_parameter(Name=self._name)
        except ClientError as e:
            if _error_code(e) == "ParameterNotFound":
                return
            raise OperationFailedError(SAVE_CONTEXT, str(e)) from e
        except BotoCoreError as e:
            raise OperationFailedError(SAVE_CONTEXT, str(e)) from e
        logger.debug("Deleted parameter %s (empty value)", self._name)
