from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import FieldTypeError
from .registry import GLOBAL_REGISTRY, FieldRegistry

T = TypeVar("T")


def _describe(e: ValidationError) -> str:
    return "; ".join(err["msg"] for err in e.errors()) or str(e)


class ConfigField(Generic[T]):
    """
    A named, typed config value that registers itself on construction.

        volume = ConfigField("volume", 80)
        muted = ConfigField("muted", False)
        theme = ConfigField("theme", None, type_=str | None)

    The declared type is `type_` if given, else the type of the initial value.
    Values are converted with pydantic, so anything a `TypeAdapter` can
    validate and dump to JSON works (models, dataclasses, enums, generics).
    Document entries go through pydantic's strict JSON mode; values set from
    Python use its lax mode.

    `ConfigField()` with no key is a placeholder: it is never registered and
    its load/save are no-ops.
    """

    def __init__(
        self,
        key: str | None = None,
        value: T | None = None,
        *,
        type_: Any = None,
        registry: FieldRegistry | None = None,
    ) -> None:
        if key is not None and not isinstance(key, str):
            raise TypeError(f"config field key must be a str, got {type(key).__name__}")
        if type_ is None:
            if value is None:
                if key is not None:
                    raise TypeError(f"config field '{key}' needs type_ when its initial value is None")
                type_ = Any
            else:
                type_ = type(value)

        self._key = key
        self._type = type_
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)
        if key is None and value is None:
            self._value: T = value  # type: ignore[assignment]
        else:
            self._value = self._validate(value)

        if key is not None:
            (registry if registry is not None else GLOBAL_REGISTRY).register(self)

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def type(self) -> Any:
        return self._type

    def value(self) -> T:
        """The stored object itself; mutating a container mutates the field."""
        return self._value

    def set_value(self, value: T) -> None:
        self._value = self._validate(value)

    def load_from(self, document: dict[str, Any]) -> None:
        if self._key is None or self._key not in document:
            return
        self._value = self._validate_document_entry(document[self._key])

    def save_into(self, document: dict[str, Any]) -> None:
        if self._key is None:
            return
        document[self._key] = self._adapter.dump_python(self._value, mode="json")

    def _validate(self, raw: Any) -> T:
        try:
            return self._adapter.validate_python(raw)
        except ValidationError as e:
            raise FieldTypeError(self._key, self._type, _describe(e)) from e

    def _validate_document_entry(self, raw: Any) -> T:
        # Strict JSON semantics: "50" is not an int, "yes" is not a bool.
        try:
            text = json.dumps(raw)
        except (TypeError, ValueError, RecursionError) as e:
            raise FieldTypeError(self._key, self._type, f"not JSON data: {e}") from e
        try:
            return self._adapter.validate_json(text, strict=True)
        except ValidationError as e:
            raise FieldTypeError(self._key, self._type, _describe(e)) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, {self._value!r})"
