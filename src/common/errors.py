from __future__ import annotations

from typing import Optional


class OperationFailedError(RuntimeError):
    """An accessor call failed; `context` names the operation (e.g. "Failed to fetch state")."""

    def __init__(self, context: str, detail: Optional[str] = None) -> None:
        self.context = context
        self.detail = detail
        super().__init__(f"{context}: {detail}" if detail else context)


class ConfigError(ValueError):
    """Missing or invalid configuration detected at startup."""


__all__ = ["OperationFailedError", "ConfigError"]
