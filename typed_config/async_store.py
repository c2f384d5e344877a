from __future__ import annotations

import asyncio
from pathlib import Path

from .store import ConfigStore


class AsyncConfigStore:
    """
    Async wrapper around ConfigStore.
    Uses asyncio.to_thread so file I/O does not block the event loop.

    Not a lock: concurrent load/save calls must be serialized by the caller.
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def path(self) -> Path:
        return self._store.path

    def set_default_path(self, path: Path | str) -> None:
        self._store.set_default_path(path)

    async def get(self) -> str:
        return self._store.get()

    async def set(self, text: str | bytes) -> None:
        self._store.set(text)

    async def load(self, file_name: str) -> bool:
        return await asyncio.to_thread(self._store.load, file_name)

    async def save(self, file_name: str) -> bool:
        return await asyncio.to_thread(self._store.save, file_name)
