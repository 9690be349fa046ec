from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ParameterAccessor(Protocol):
    """Read/overwrite the single scalar configuration value.

    Implementations: HttpParameterStore, SsmParameterStore.
    """

    def get_parameter(self) -> str:
        """Current value; `""` when unset."""
        ...

    def put_parameter(self, value: str) -> None:
        ...
