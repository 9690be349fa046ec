from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# The state record is a flat string->string mapping owned by the remote side.
StateData = Dict[str, str]

# Fixed identifier of the singleton record in the document store.
STATE_RECORD_ID = "app-state"


class StateSnapshot(BaseModel):
    """
    Row of the `state_snapshots` table in the backend-as-a-service store.

    Fields
    - state_data: the full state mapping at the time of the snapshot.
    - snapshot_type: free-form label; updates made through the accessor use "manual".
    - created_by: optional author identifier.

    Notes
    - `id` and `created_at` are assigned by the database and are not sent on insert.
    """

    state_data: Dict[str, Any] = Field(default_factory=dict)
    snapshot_type: str = "manual"
    created_by: Optional[str] = None
