from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from logs.base import LogAccessor
from logs.http_store import HttpLogStore
from logs.metadata import SupabaseLogRecorder
from logs.s3_store import S3LogStore
from params.base import ParameterAccessor
from params.http_store import HttpParameterStore
from params.ssm_store import SsmParameterStore
from state.base import StateAccessor
from state.dynamo_store import DynamoStateStore
from state.http_store import HttpStateStore
from state.supabase_store import SupabaseStateStore

from . import clients
from .config import ENV_API_BASE_URL, ENV_SUPABASE_ANON_KEY, ENV_SUPABASE_URL, Settings
from .errors import ConfigError


logger = logging.getLogger(__name__)


@dataclass
class Accessors:
    """The three accessors selected for this process, plus handles to close on shutdown."""

    state: StateAccessor
    logs: LogAccessor
    params: ParameterAccessor
    _closers: List[Callable[[], None]] = field(default_factory=list, repr=False)

    def close(self) -> None:
        for closer in self._closers:
            closer()
        self._closers.clear()

    def __enter__(self) -> "Accessors":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class _Handles:
    """Lazily built client handles shared by the accessors of one `Accessors`."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._http: Optional[Any] = None
        self._session: Optional[Any] = None
        self._supabase: Optional[Any] = None
        self.closers: List[Callable[[], None]] = []

    def http(self):
        if self._http is None:
            if self._settings.api is None:
                raise ConfigError(f"Missing required environment variables: {ENV_API_BASE_URL}")
            self._http = clients.http_client(self._settings.api)
            self.closers.append(self._http.close)
        return self._http

    def aws(self):
        if self._session is None:
            self._session = clients.aws_session(self._settings.aws)
        return self._session

    def supabase(self):
        if self._supabase is None:
            if self._settings.supabase is None:
                raise ConfigError(
                    f"Missing required environment variables: {ENV_SUPABASE_URL}, {ENV_SUPABASE_ANON_KEY}"
                )
            self._supabase = clients.supabase_client(self._settings.supabase)
        return self._supabase


def build_accessors(settings: Settings) -> Accessors:
    """
    Construct one accessor per resource according to `settings`.

    Each external client is created once here and reused by every call; the
    HTTP backend's client is shared across the three HTTP accessors.
    """
    missing = settings.missing()
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    h = _Handles(settings)

    state: StateAccessor
    if settings.state_backend == "dynamodb":
        state = DynamoStateStore(table=clients.dynamodb_table(h.aws(), settings.aws.state_table))
    elif settings.state_backend == "supabase":
        state = SupabaseStateStore(client=h.supabase())
    else:
        state = HttpStateStore(client=h.http())

    logs: LogAccessor
    if settings.log_backend == "s3":
        recorder = SupabaseLogRecorder(client=h.supabase()) if settings.log_metadata else None
        logs = S3LogStore(
            s3=clients.s3_client(h.aws()),
            bucket=settings.aws.log_bucket,
            recorder=recorder,
            source_device=settings.log_metadata_source,
        )
    else:
        logs = HttpLogStore(client=h.http())

    params: ParameterAccessor
    if settings.param_backend == "ssm":
        params = SsmParameterStore(ssm=clients.ssm_client(h.aws()), name=settings.aws.param_name)
    else:
        params = HttpParameterStore(client=h.http())

    logger.info(
        "Accessors ready: state=%s logs=%s params=%s",
        settings.state_backend,
        settings.log_backend,
        settings.param_backend,
    )
    return Accessors(state=state, logs=logs, params=params, _closers=h.closers)


def accessors_from_env() -> Accessors:
    return build_accessors(Settings.from_env())


__all__ = ["Accessors", "build_accessors", "accessors_from_env"]
