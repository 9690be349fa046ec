from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .errors import OperationFailedError


logger = logging.getLogger(__name__)


class HttpApiClient:
    """
    Base for accessors talking to the generic HTTP backend.

    Notes
    - One request per call, no retries; the transport's default behaviour
      applies for timeouts and redirects.
    - Any non-2xx status, transport error, or undecodable JSON body becomes an
      `OperationFailedError` whose message starts with the caller's context.
    - When no `client` is injected, one is created from `base_url` and closed
      by `close()`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 15.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if client is None and not base_url:
            raise ValueError("base_url is required when no client is provided")
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --------------- Internal ---------------
    def _request(self, method: str, path: str, context: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise OperationFailedError(context, str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            body = resp.text[:200]
            detail = f"HTTP {resp.status_code}" + (f": {body}" if body else "")
            raise OperationFailedError(context, detail)
        return resp

    def _request_json(self, method: str, path: str, context: str, **kwargs: Any) -> Any:
        resp = self._request(method, path, context, **kwargs)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:  # JSON decode error
            raise OperationFailedError(context, "response body is not valid JSON") from exc


__all__ = ["HttpApiClient"]
