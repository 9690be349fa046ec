from __future__ import annotations

from common.errors import OperationFailedError
from common.http_api import HttpApiClient


FETCH_CONTEXT = "Failed to fetch parameter"
SAVE_CONTEXT = "Failed to save parameter"


class HttpParameterStore(HttpApiClient):
    """Parameter behind the generic backend: `GET/PUT /config` with `{"value": str}`."""

    def get_parameter(self) -> str:
        data = self._request_json("GET", "/config", FETCH_CONTEXT)
        if data is None:
            return ""
        if not isinstance(data, dict):
            raise OperationFailedError(FETCH_CONTEXT, "expected a JSON object")
        value = data.get("value")
        return "" if value is None else str(value)

    def put_parameter(self, value: str) -> None:
        self._request("PUT", "/config", SAVE_CONTEXT, json={"value": value})
