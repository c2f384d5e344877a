from __future__ import annotations

from .async_store import AsyncConfigStore
from .errors import DuplicateKeyError, FieldTypeError, TypedConfigError
from .field import ConfigField
from .interfaces import FieldHandle
from .registry import GLOBAL_REGISTRY, FieldRegistry
from .store import ConfigStore

__all__ = [
    "ConfigField",
    "FieldHandle",
    "FieldRegistry",
    "GLOBAL_REGISTRY",
    "ConfigStore",
    "AsyncConfigStore",
    "TypedConfigError",
    "DuplicateKeyError",
    "FieldTypeError",
]
