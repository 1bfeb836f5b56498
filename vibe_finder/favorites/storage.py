"""
Async key-value storage adapters for the favorites store.

``KeyValueStorage`` is the whole contract the store depends on: string keys,
string values, ``None`` for a missing key. ``JsonFileStorage`` is the durable
adapter; ``InMemoryStorage`` backs tests and previews.
"""
from __future__ import annotations

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Protocol


class KeyValueStorage(Protocol):
    async def get_item(self, key: str) -> str | None: ...

    async def set_item(self, key: str, value: str) -> None: ...


class InMemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """
    All keys live in one JSON object file.

    File I/O runs in a worker thread so callers on the event loop are not
    blocked. A missing file reads as empty; a file that is not a JSON object
    raises ``ValueError`` on read and is overwritten by the next write.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            fh = os.fdopen(fd, "w", encoding="utf-8")
        except BaseException:
            os.close(fd)
            os.unlink(tmp_name)
            raise
        try:
            with fh:
                json.dump(data, fh)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    async def get_item(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read_all)
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write_item, key, value)
