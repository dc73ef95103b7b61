"""Task list rendering.

Rendering is a full rebuild: the container is emptied and one node per task
is appended, every time. Each node carries its own toggle listener bound to
the task's text, so freshly rendered items are always clickable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from rich.table import Table
from rich.text import Text

from taskpad.config import DisplayConfig
from taskpad.models import Task
from taskpad.surface import ItemNode, ListContainer

ToggleHandler = Callable[[str], None]


class Renderer(Protocol):
    """Anything that can project a task list onto a surface."""

    def render(self, tasks: list[Task]) -> None: ...


class TaskListRenderer:
    """Rebuilds a ListContainer from a task list."""

    def __init__(
        self,
        container: ListContainer,
        on_toggle: ToggleHandler | None = None,
    ) -> None:
        self.container = container
        self.on_toggle = on_toggle

    def render(self, tasks: list[Task]) -> None:
        self.container.clear()

        for task in tasks:
            node = ItemNode(task.text, struck=task.completed)
            if self.on_toggle is not None:
                node.on_activate(self._toggle_listener(task.text))
            self.container.append(node)

    def _toggle_listener(self, text: str) -> Callable[[], None]:
        handler = self.on_toggle

        def listener() -> None:
            if handler is not None:
                handler(text)

        return listener


def build_table(container: ListContainer, display: DisplayConfig | None = None) -> Table:
    """Build a rich table showing the container's current items."""
    if display is None:
        display = DisplayConfig()

    table = Table(title=display.title, show_header=True)
    if display.show_index:
        table.add_column("#", style="dim", justify="right")
    table.add_column("", width=1)
    table.add_column("Task", style="white")

    for index, node in enumerate(container.children, start=1):
        if node.struck:
            marker = Text("✓", style="green")
            label = Text(node.text, style=display.completed_style)
        else:
            marker = Text("○", style="cyan")
            label = Text(node.text)

        if display.show_index:
            table.add_row(str(index), marker, label)
        else:
            table.add_row(marker, label)

    return table
