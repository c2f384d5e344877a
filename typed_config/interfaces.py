from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldHandle(Protocol):
    """
    Type-erased view of a config field: one key in a JSON-like document.
    """

    @property
    def key(self) -> str | None:
        ...

    def load_from(self, document: dict[str, Any]) -> None:
        """Read this field's value from `document` if its key is present."""
        ...

    def save_into(self, document: dict[str, Any]) -> None:
        """Write this field's current value into `document` under its key."""
        ...
