from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from json_store import atomic_write_text, dump_object, ensure_dir, parse_object, read_text

from .registry import GLOBAL_REGISTRY, FieldRegistry

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Loads and saves every field of a registry as one JSON object.

    - `get()` / `set(text)` work on JSON text, for callers that move config
      around without touching disk.
    - `load(name)` / `save(name)` use `<path>/<name>`. Missing files,
      unwritable destinations and malformed documents are silent no-ops.
    - A present key whose value does not fit its field raises `FieldTypeError`.
    """

    def __init__(self, path: Path | str | None = None, registry: FieldRegistry | None = None):
        self._path = Path(path) if path is not None else Path.cwd()
        self._registry = registry if registry is not None else GLOBAL_REGISTRY

    @property
    def path(self) -> Path:
        return self._path

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    def set_default_path(self, path: Path | str) -> None:
        self._path = Path(path)

    def get(self) -> str:
        document: dict[str, Any] = {}
        self._registry.for_each(lambda field: field.save_into(document))
        return dump_object(document)

    def set(self, text: str | bytes) -> None:
        document = parse_object(text)
        if document is None:
            logger.debug("ignoring config text that is not a JSON object")
            return
        self._registry.for_each(lambda field: field.load_from(document))

    def load(self, file_name: str) -> bool:
        ensure_dir(self._path)
        target = self._path / file_name
        text = read_text(target)
        if text is None:
            logger.debug("CONFIG LOAD: nothing to load from %s", target)
            return False
        self.set(text)
        logger.info("CONFIG LOAD: %s (%d fields)", target, len(self._registry))
        return True

    def save(self, file_name: str) -> bool:
        ensure_dir(self._path)
        target = self._path / file_name
        if not atomic_write_text(target, self.get()):
            logger.warning("CONFIG SAVE: failed to write %s", target)
            return False
        logger.info("CONFIG SAVE: %s (%d fields)", target, len(self._registry))
        return True
