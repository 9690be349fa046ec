"""
Common utilities for remote-accessors.

Modules:
- config: Settings read once from the environment
- errors: OperationFailedError / ConfigError
- clients: factory for httpx, boto3 and Supabase handles
- http_api: shared request/error mapping for the generic HTTP backend
- accessors: backend selection (`build_accessors`)
"""

__all__ = [
    "accessors",
    "clients",
    "config",
    "errors",
    "http_api",
]
