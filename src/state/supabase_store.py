from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError

from common.errors import OperationFailedError

from .models import StateData, StateSnapshot


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch state"
UPDATE_CONTEXT = "Failed to update state"

SNAPSHOTS_TABLE = "state_snapshots"


class SupabaseStateStore:
    """
    State record kept as an append-only series of rows in `state_snapshots`.

    - `get_state()` reads the newest row (by `created_at`); no rows -> `{}`.
    - `update_state()` inserts a new row, so the latest write wins on read.
    """

    def __init__(
        self,
        *,
        client: Any,
        table: str = SNAPSHOTS_TABLE,
        created_by: Optional[str] = None,
    ) -> None:
        self._client = client
        self._table = table
        self._created_by = created_by

    def get_state(self) -> StateData:
        try:
            resp = (
                self._client.table(self._table)
                .select("state_data")
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise OperationFailedError(FETCH_CONTEXT, str(e)) from e

        rows = resp.data or []
        if not rows:
            return {}
        state = rows[0].get("state_data") or {}
        return {str(k): str(v) for k, v in state.items()}

    def update_state(self, new_state: StateData) -> None:
        snapshot = StateSnapshot(state_data=dict(new_state), created_by=self._created_by)
        try:
            self._client.table(self._table).insert(snapshot.model_dump()).execute()
        except (APIError, httpx.HTTPError) as e:
            raise OperationFailedError(UPDATE_CONTEXT, str(e)) from e
        logger.debug("Inserted state snapshot (%d keys)", len(new_state))
