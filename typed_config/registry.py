from __future__ import annotations

import logging
from typing import Callable, Iterator

from .errors import DuplicateKeyError
from .interfaces import FieldHandle

logger = logging.getLogger(__name__)


class FieldRegistry:
    """
    Insertion-ordered collection of field handles, keyed by field key.

    Holds references only; fields are expected to live for the whole process.
    There is no way to unregister.
    """

    def __init__(self) -> None:
        self._fields: dict[str, FieldHandle] = {}

    def register(self, field: FieldHandle) -> None:
        key = field.key
        if key is None:
            raise ValueError("cannot register a field without a key")
        if key in self._fields:
            raise DuplicateKeyError(key)
        self._fields[key] = field
        logger.debug("registered config field %r (%d total)", key, len(self._fields))

    def for_each(self, action: Callable[[FieldHandle], None]) -> None:
        for field in list(self._fields.values()):
            action(field)

    def get(self, key: str) -> FieldHandle | None:
        return self._fields.get(key)

    def keys(self) -> list[str]:
        return list(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[FieldHandle]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keys()!r})"


GLOBAL_REGISTRY = FieldRegistry()
