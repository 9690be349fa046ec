from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from common.errors import OperationFailedError

from .models import STATE_RECORD_ID, StateData


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch state"
UPDATE_CONTEXT = "Failed to update state"

KEY_ATTR = "id"
STATE_ATTR = "state"


class DynamoStateStore:
    """
    State record kept as a single DynamoDB item.

    Item layout: `{"id": "app-state", "state": {<key>: <value>, ...}}`.
    `table` is a boto3 `Table` resource (see `common.clients.dynamodb_table`).
    """

    def __init__(self, *, table: Any, record_id: str = STATE_RECORD_ID) -> None:
        self._table = table
        self._record_id = record_id

    def get_state(self) -> StateData:
        try:
            resp = self._table.get_item(Key={KEY_ATTR: self._record_id}, ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            raise OperationFailedError(FETCH_CONTEXT, str(e)) from e

        item = resp.get("Item")
        if not item:
            logger.debug("State record %s not found; returning empty state", self._record_id)
            return {}
        state = item.get(STATE_ATTR) or {}
        return {str(k): str(v) for k, v in state.items()}

    def update_state(self, new_state: StateData) -> None:
        try:
            self._table.put_item(Item={KEY_ATTR: self._record_id, STATE_ATTR: dict(new_state)})
        except (ClientError, BotoCoreError) as e:
            raise OperationFailedError(UPDATE_CONTEXT, str(e)) from e
