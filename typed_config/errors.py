from __future__ import annotations


class TypedConfigError(Exception):
    """Base class for config registry errors."""


class DuplicateKeyError(TypedConfigError, ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate config key! '{key}' is already registered.")
        self.key = key


class FieldTypeError(TypedConfigError, ValueError):
    """
    A value could not be converted to a field's declared type.

    Raised from `load_from` when a document entry has the wrong shape, and from
    `set_value` / construction for bad in-memory values.
    """

    def __init__(self, key: str | None, expected: object, reason: str) -> None:
        super().__init__(f"Invalid value for config key '{key}' (expected {expected!r}): {reason}")
        self.key = key
        self.expected = expected
