from __future__ import annotations

import logging
from typing import Any

import boto3
import httpx
from supabase import Client as SupabaseClient
from supabase import create_client

from .config import ApiSettings, AwsSettings, SupabaseSettings


logger = logging.getLogger(__name__)


def http_client(api: ApiSettings) -> httpx.Client:
    """Client for the generic HTTP backend; paths are relative to `api.base_url`."""
    logger.debug("Creating HTTP client for %s", api.base_url)
    return httpx.Client(base_url=api.base_url.rstrip("/"), timeout=api.timeout)


def aws_session(aws: AwsSettings) -> boto3.session.Session:
    """
    Session carrying region and static keys when configured.

    Without keys, boto3's default credential chain applies (env, profile,
    instance role).
    """
    kwargs = {}
    if aws.region:
        kwargs["region_name"] = aws.region
    if aws.access_key_id and aws.secret_access_key:
        kwargs["aws_access_key_id"] = aws.access_key_id
        kwargs["aws_secret_access_key"] = aws.secret_access_key
    return boto3.session.Session(**kwargs)


def s3_client(session: boto3.session.Session) -> Any:
    return session.client("s3")


def ssm_client(session: boto3.session.Session) -> Any:
    return session.client("ssm")


def dynamodb_table(session: boto3.session.Session, table_name: str) -> Any:
    return session.resource("dynamodb").Table(table_name)


def supabase_client(sb: SupabaseSettings) -> SupabaseClient:
    logger.debug("Creating Supabase client for %s", sb.url)
    return create_client(sb.url, sb.anon_key)


__all__ = [
    "http_client",
    "aws_session",
    "s3_client",
    "ssm_client",
    "dynamodb_table",
    "supabase_client",
]
