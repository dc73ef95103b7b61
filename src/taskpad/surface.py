"""In-memory rendering and input surfaces.

These stand in for the host page: a list container whose children can be
cleared and appended, item nodes that accept activation listeners and carry
a strike-through flag, and a text field with an adjacent button.
"""

from __future__ import annotations

from collections.abc import Callable

Listener = Callable[[], None]


class ItemNode:
    """One visual list item."""

    def __init__(self, text: str, struck: bool = False) -> None:
        self.text = text
        self.struck = struck
        self._listeners: list[Listener] = []

    def on_activate(self, listener: Listener) -> None:
        """Register a click-style activation listener."""
        self._listeners.append(listener)

    def activate(self) -> None:
        """Fire every registered activation listener in order."""
        for listener in list(self._listeners):
            listener()

    def __repr__(self) -> str:
        return f"ItemNode({self.text!r}, struck={self.struck})"


class ListContainer:
    """Mutable, ordered container of item nodes."""

    def __init__(self) -> None:
        self._children: list[ItemNode] = []

    @property
    def children(self) -> list[ItemNode]:
        return list(self._children)

    def clear(self) -> None:
        self._children.clear()

    def append(self, node: ItemNode) -> None:
        self._children.append(node)

    def __len__(self) -> int:
        return len(self._children)


class InputField:
    """Single-line text field."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def clear(self) -> None:
        self.value = ""


class Button:
    """Activation trigger next to the input field."""

    def __init__(self, label: str = "Add") -> None:
        self.label = label
        self._listeners: list[Listener] = []

    def on_click(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def click(self) -> None:
        for listener in list(self._listeners):
            listener()
