from __future__ import annotations

import os
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError


# Environment variable names
ENV_STATE_BACKEND = "STATE_BACKEND"
ENV_LOG_BACKEND = "LOG_BACKEND"
ENV_PARAM_BACKEND = "PARAM_BACKEND"
ENV_API_BASE_URL = "API_BASE_URL"
ENV_HTTP_TIMEOUT = "HTTP_TIMEOUT"
ENV_AWS_REGION = "AWS_REGION"
ENV_AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_STATE_TABLE = "STATE_TABLE"
ENV_LOG_BUCKET = "LOG_BUCKET"
ENV_PARAM_NAME = "PARAM_NAME"
ENV_SUPABASE_URL = "SUPABASE_URL"
ENV_SUPABASE_ANON_KEY = "SUPABASE_ANON_KEY"
ENV_LOG_METADATA = "LOG_METADATA"
ENV_LOG_METADATA_SOURCE = "LOG_METADATA_SOURCE"

DEFAULT_HTTP_TIMEOUT = 15.0

StateBackend = Literal["http", "dynamodb", "supabase"]
LogBackend = Literal["http", "s3"]
ParamBackend = Literal["http", "ssm"]


def _getenv(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = env.get(name)
    return v if v not in (None, "") else default


def _truthy(v: Optional[str]) -> bool:
    return (v or "").strip().lower() in ("1", "true", "yes", "on")


class ApiSettings(BaseModel):
    base_url: str
    timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)


class AwsSettings(BaseModel):
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    state_table: Optional[str] = None
    log_bucket: Optional[str] = None
    param_name: Optional[str] = None


class SupabaseSettings(BaseModel):
    url: str
    anon_key: str


class Settings(BaseModel):
    """
    Process-wide configuration, read once at startup.

    Backend selection
    - `state_backend`: "http" | "dynamodb" | "supabase"
    - `log_backend`:   "http" | "s3"
    - `param_backend`: "http" | "ssm"

    Sections (`api`, `aws`, `supabase`) are only required when a selected
    backend needs them; `from_env()` enforces that and names what is missing.
    """

    state_backend: StateBackend = "http"
    log_backend: LogBackend = "http"
    param_backend: ParamBackend = "http"
    api: Optional[ApiSettings] = None
    aws: AwsSettings = Field(default_factory=AwsSettings)
    supabase: Optional[SupabaseSettings] = None
    log_metadata: bool = False
    log_metadata_source: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env

        timeout_raw = _getenv(env, ENV_HTTP_TIMEOUT)
        try:
            timeout = float(timeout_raw) if timeout_raw is not None else DEFAULT_HTTP_TIMEOUT
        except ValueError as ex:
            raise ConfigError(f"{ENV_HTTP_TIMEOUT} must be a number, got {timeout_raw!r}") from ex

        base_url = _getenv(env, ENV_API_BASE_URL)
        sb_url = _getenv(env, ENV_SUPABASE_URL)
        sb_key = _getenv(env, ENV_SUPABASE_ANON_KEY)

        raw = {
            "state_backend": _getenv(env, ENV_STATE_BACKEND, "http"),
            "log_backend": _getenv(env, ENV_LOG_BACKEND, "http"),
            "param_backend": _getenv(env, ENV_PARAM_BACKEND, "http"),
            "api": {"base_url": base_url, "timeout": timeout} if base_url else None,
            "aws": {
                "region": _getenv(env, ENV_AWS_REGION),
                "access_key_id": _getenv(env, ENV_AWS_ACCESS_KEY_ID),
                "secret_access_key": _getenv(env, ENV_AWS_SECRET_ACCESS_KEY),
                "state_table": _getenv(env, ENV_STATE_TABLE),
                "log_bucket": _getenv(env, ENV_LOG_BUCKET),
                "param_name": _getenv(env, ENV_PARAM_NAME),
            },
            "supabase": {"url": sb_url, "anon_key": sb_key} if sb_url and sb_key else None,
            "log_metadata": _truthy(_getenv(env, ENV_LOG_METADATA)),
            "log_metadata_source": _getenv(env, ENV_LOG_METADATA_SOURCE),
        }
        try:
            settings = cls.model_validate(raw)
        except ValidationError as ex:
            raise ConfigError(f"Invalid configuration: {ex}") from ex

        missing = settings.missing()
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        return settings

    def missing(self) -> List[str]:
        """Names of environment variables the selected backends need but lack."""
        out: List[str] = []
        uses_http = "http" in (self.state_backend, self.log_backend, self.param_backend)
        if uses_http and self.api is None:
            out.append(ENV_API_BASE_URL)
        if self.state_backend == "dynamodb" and not self.aws.state_table:
            out.append(ENV_STATE_TABLE)
        if self.log_backend == "s3" and not self.aws.log_bucket:
            out.append(ENV_LOG_BUCKET)
        if self.param_backend == "ssm" and not self.aws.param_name:
            out.append(ENV_PARAM_NAME)
        needs_supabase = self.state_backend == "supabase" or (
            self.log_backend == "s3" and self.log_metadata
        )
        if needs_supabase and self.supabase is None:
            out.extend([ENV_SUPABASE_URL, ENV_SUPABASE_ANON_KEY])
        return out


__all__ = ["Settings", "ApiSettings", "AwsSettings", "SupabaseSettings"]
