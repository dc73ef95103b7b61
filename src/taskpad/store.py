"""Task store - the durable copy of the task list.

The whole list lives under one storage key as a JSON array of
``{"text": ..., "completed": ...}`` objects. There is no partial update:
every save rewrites the full array, and the last writer wins.
"""

from __future__ import annotations

import json
import logging

from taskpad.kvstore import KeyValueStorage
from taskpad.models import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class TaskStore:
    """Reads and writes the task list through an injected storage handle."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        """Load the persisted task list.

        A missing slot, unparsable JSON, a non-array value or any malformed
        record all read as an empty list. Nothing is raised to the caller.
        """
        raw = self._storage.get(self._key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unparsable task list under %r: %s", self._key, e)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Ignoring task list under %r: expected an array, got %s",
                self._key,
                type(data).__name__,
            )
            return []

        try:
            tasks = [Task.from_dict(item) for item in data]
        except ValueError as e:
            logger.warning("Ignoring task list under %r: %s", self._key, e)
            return []

        logger.debug("Loaded %d task(s) from %r", len(tasks), self._key)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Serialise the full list and overwrite the slot."""
        self._storage.set(self._key, json.dumps([task.to_dict() for task in tasks]))
        logger.debug("Saved %d task(s) to %r", len(tasks), self._key)

    def clear(self) -> None:
        """Drop the persisted slot entirely."""
        self._storage.remove(self._key)
        logger.info("Cleared task list under %r", self._key)
