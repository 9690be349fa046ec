"""
Accessors for the singleton application state record.

Backends
- HttpStateStore: generic HTTP backend (`/state`).
- DynamoStateStore: DynamoDB item `"app-state"`.
- SupabaseStateStore: newest row of the `state_snapshots` table.
"""

from .base import StateAccessor
from .models import STATE_RECORD_ID, StateData, StateSnapshot

__all__ = ["StateAccessor", "StateData", "StateSnapshot", "STATE_RECORD_ID"]
