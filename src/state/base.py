from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import StateData


@runtime_checkable
class StateAccessor(Protocol):
    """Read/replace the singleton state record.

    Implementations: HttpStateStore, DynamoStateStore, SupabaseStateStore.
    """

    def get_state(self) -> StateData:
        """Return the current mapping; an absent record reads as `{}`."""
        ...

    def update_state(self, new_state: StateData) -> None:
        """Overwrite the whole record with `new_state` (no merge)."""
        ...
