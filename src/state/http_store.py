from __future__ import annotations

import logging

from common.errors import OperationFailedError
from common.http_api import HttpApiClient

from .models import StateData


logger = logging.getLogger(__name__)

FETCH_CONTEXT = "Failed to fetch state"
UPDATE_CONTEXT = "Failed to update state"


class HttpStateStore(HttpApiClient):
    """State record behind the generic backend: `GET /state` and `PUT /state`."""

    def get_state(self) -> StateData:
        data = self._request_json("GET", "/state", FETCH_CONTEXT)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise OperationFailedError(FETCH_CONTEXT, "expected a JSON object")
        return data

    def update_state(self, new_state: StateData) -> None:
        self._request("PUT", "/state", UPDATE_CONTEXT, json=dict(new_state))
        logger.debug("State updated (%d keys)", len(new_state))
