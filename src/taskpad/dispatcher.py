"""Event dispatch: user intents in, saved and rendered task lists out.

Each user action becomes an intent value. ``reduce`` is the only place the
next task list is computed, so the mutation rules can be tested without any
surface at all. ``EventDispatcher`` wraps it in the load-reduce-save-render
cycle that every event runs to completion.
"""

from __future__ import annotations

import logging

from taskpad.models import AddTask, Intent, Task, ToggleTask
from taskpad.renderer import Renderer
from taskpad.store import TaskStore
from taskpad.surface import InputField

logger = logging.getLogger(__name__)


def is_blank(text: str) -> bool:
    """Check whether text is empty or whitespace only."""
    return not text.strip()


def reduce(tasks: list[Task], intent: Intent) -> list[Task]:
    """Compute the task list that results from applying an intent.

    The input list and its tasks are left untouched.

    Toggling matches by text, not by position: every task whose text equals
    the intent's text flips together. Duplicate labels therefore cannot be
    toggled independently.
    """
    if isinstance(intent, AddTask):
        if is_blank(intent.text):
            return [Task(t.text, t.completed) for t in tasks]
        return [Task(t.text, t.completed) for t in tasks] + [Task(intent.text)]

    if isinstance(intent, ToggleTask):
        return [
            Task(t.text, not t.completed if t.text == intent.text else t.completed)
            for t in tasks
        ]

    raise TypeError(f"Unknown intent: {intent!r}")


class EventDispatcher:
    """Turns add and toggle events into store writes plus a re-render."""

    def __init__(self, store: TaskStore, renderer: Renderer, field: InputField) -> None:
        self._store = store
        self._renderer = renderer
        self._field = field

    def dispatch(self, intent: Intent) -> list[Task]:
        """Run one full load, reduce, save, render cycle."""
        tasks = reduce(self._store.load(), intent)
        self._store.save(tasks)
        if isinstance(intent, AddTask):
            self._field.clear()
        self._renderer.render(tasks)
        return tasks

    def submit(self) -> None:
        """Handle the add button: add whatever is in the input field."""
        text = self._field.value
        if is_blank(text):
            logger.debug("Ignoring blank task submission")
            return

        tasks = self.dispatch(AddTask(text))
        logger.info("Added task %r (%d total)", text, len(tasks))

    def toggle(self, text: str) -> None:
        """Handle activation of a rendered item."""
        tasks = self.dispatch(ToggleTask(text))
        matched = sum(1 for t in tasks if t.text == text)
        if matched == 0:
            logger.info("Toggle for %r matched no tasks", text)
        elif matched > 1:
            logger.info("Toggled %d tasks sharing the text %r", matched, text)
        else:
            logger.info("Toggled task %r", text)
