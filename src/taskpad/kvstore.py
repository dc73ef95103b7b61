"""Persistent key-value storage backends.

A storage backend holds string values under string keys, the same shape as a
browser's localStorage. The task store only ever touches one key; everything
else about the backend (file layout, encoding) is private to it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal get/set/remove storage capability."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Storage that lives only as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """Storage backed by a single JSON object on disk.

    Every write rewrites the whole file. A missing file reads as empty; so
    does a file that is not a JSON object of strings, in which case a
    warning is logged and the next write replaces it.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Unreadable storage file %s: %s", self._path, e)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Storage file %s is not a JSON object, ignoring", self._path)
            return {}

        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.debug("Wrote %d key(s) to %s", len(data), self._path)
