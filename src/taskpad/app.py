"""Application wiring and the interactive session."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console, RenderableType

from taskpad.config import DisplayConfig, TaskpadConfig
from taskpad.dispatcher import EventDispatcher
from taskpad.kvstore import JsonFileStorage
from taskpad.models import Task
from taskpad.renderer import TaskListRenderer, build_table
from taskpad.store import TaskStore
from taskpad.surface import Button, InputField, ListContainer

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


class TaskApp:
    """Wires the store, renderer and dispatcher to a set of surfaces.

    Construction only assembles the parts. Call ``start()`` once to load
    the persisted list, draw it and hook up the listeners.
    """

    def __init__(
        self,
        store: TaskStore,
        container: ListContainer | None = None,
        field: InputField | None = None,
        button: Button | None = None,
        renderer: TaskListRenderer | None = None,
    ) -> None:
        self.store = store
        self.container = container if container is not None else ListContainer()
        self.field = field if field is not None else InputField()
        self.button = button if button is not None else Button()
        self.renderer = renderer if renderer is not None else TaskListRenderer(self.container)
        self.dispatcher = EventDispatcher(store, self.renderer, self.field)
        self._started = False

    @classmethod
    def from_config(cls, config: TaskpadConfig) -> TaskApp:
        """Build an app persisting to the configured storage file."""
        storage = JsonFileStorage(Path(config.storage.path))
        return cls(TaskStore(storage, key=config.storage.key))

    def start(self) -> list[Task]:
        """Load persisted tasks, render them and register listeners.

        Safe to call more than once; later calls only re-render.
        """
        tasks = self.store.load()

        if not self._started:
            self.renderer.on_toggle = self.dispatcher.toggle
            self.button.on_click(self.dispatcher.submit)
            self._started = True

        self.renderer.render(tasks)
        logger.debug("Started with %d task(s)", len(tasks))
        return tasks

    def add(self, text: str) -> None:
        """Type text into the field and press the add button."""
        self.field.value = text
        self.button.click()

    def activate(self, index: int) -> bool:
        """Activate the rendered item at a 1-based position.

        Returns False if there is no such item.
        """
        children = self.container.children
        if not 1 <= index <= len(children):
            return False
        children[index - 1].activate()
        return True


def run_session(
    app: TaskApp,
    console: Console,
    display: DisplayConfig | None = None,
) -> None:
    """Run the interactive prompt loop until the user quits.

    A bare number toggles that item, a quit word ends the session, and any
    other input is added as a new task.
    """
    app.start()

    console.print("[dim]Type a task to add it, a number to toggle it, q to quit.[/dim]")

    while True:
        console.print(_view(app, display))

        try:
            line = click.prompt("task", default="", show_default=False)
        except click.Abort:
            console.print()
            break

        entry = line.strip()
        if entry.lower() in QUIT_WORDS:
            break

        if entry.isdecimal():
            if not app.activate(int(entry)):
                console.print(f"[yellow]No task #{entry}[/yellow]")
            continue

        app.add(line)


def _view(app: TaskApp, display: DisplayConfig | None) -> RenderableType:
    if not len(app.container):
        return "[dim]No tasks yet.[/dim]"
    return build_table(app.container, display)
