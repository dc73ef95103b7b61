"""Tests for taskpad.dispatcher module."""

from __future__ import annotations

import pytest

from taskpad.dispatcher import EventDispatcher, is_blank, reduce
from taskpad.kvstore import MemoryStorage
from taskpad.models import AddTask, Task, ToggleTask
from taskpad.renderer import TaskListRenderer
from taskpad.store import TaskStore
from taskpad.surface import InputField, ListContainer


class RecordingRenderer:
    """Renderer that remembers what it was asked to draw."""

    def __init__(self) -> None:
        self.calls: list[list[Task]] = []

    def render(self, tasks: list[Task]) -> None:
        self.calls.append(list(tasks))


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("text", ["", " ", "\t", "\n  \n"])
    def test_blank(self, text: str) -> None:
        """Test empty and whitespace-only strings are blank."""
        assert is_blank(text)

    @pytest.mark.parametrize("text", ["a", " a ", "0"])
    def test_not_blank(self, text: str) -> None:
        """Test strings with content are not blank."""
        assert not is_blank(text)


class TestReduceAdd:
    """Tests for reduce with AddTask."""

    def test_appends_open_task(self) -> None:
        """Test the new task goes last and starts open."""
        tasks = [Task("a", True)]
        result = reduce(tasks, AddTask("b"))
        assert result == [Task("a", True), Task("b", False)]

    def test_add_to_empty(self) -> None:
        """Test adding to an empty list."""
        assert reduce([], AddTask("Write report")) == [Task("Write report")]

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_blank_leaves_list_unchanged(self, text: str) -> None:
        """Test blank text is ignored."""
        tasks = [Task("a")]
        assert reduce(tasks, AddTask(text)) == [Task("a")]

    def test_text_kept_as_typed(self) -> None:
        """Test non-blank text is stored without trimming."""
        assert reduce([], AddTask("  padded ")) == [Task("  padded ")]

    def test_duplicates_allowed(self) -> None:
        """Test the same label can be added twice."""
        result = reduce([Task("x")], AddTask("x"))
        assert result == [Task("x"), Task("x")]

    def test_input_not_mutated(self) -> None:
        """Test the original list and tasks are untouched."""
        original = Task("a")
        tasks = [original]
        reduce(tasks, AddTask("b"))
        assert tasks == [Task("a")]


class TestReduceToggle:
    """Tests for reduce with ToggleTask."""

    def test_single_match(self) -> None:
        """Test toggling flips and toggling again restores."""
        tasks = [Task("buy milk")]

        once = reduce(tasks, ToggleTask("buy milk"))
        twice = reduce(once, ToggleTask("buy milk"))

        assert once == [Task("buy milk", True)]
        assert twice == [Task("buy milk", False)]

    def test_duplicates_toggle_together(self) -> None:
        """Test every task with the same text flips in one operation."""
        result = reduce([Task("x"), Task("x")], ToggleTask("x"))
        assert result == [Task("x", True), Task("x", True)]

    def test_duplicates_with_mixed_state_each_flip(self) -> None:
        """Test each match flips its own flag."""
        result = reduce([Task("x", True), Task("x", False)], ToggleTask("x"))
        assert result == [Task("x", False), Task("x", True)]

    def test_other_tasks_untouched(self) -> None:
        """Test non-matching tasks keep their state."""
        result = reduce([Task("a"), Task("b", True)], ToggleTask("a"))
        assert result == [Task("a", True), Task("b", True)]

    def test_no_match(self) -> None:
        """Test an unknown text changes nothing."""
        assert reduce([Task("a")], ToggleTask("zzz")) == [Task("a")]

    def test_exact_text_match(self) -> None:
        """Test matching is exact, not trimmed or case-folded."""
        assert reduce([Task("a")], ToggleTask("A")) == [Task("a")]
        assert reduce([Task("a")], ToggleTask(" a")) == [Task("a")]

    def test_input_not_mutated(self) -> None:
        """Test the original tasks are untouched."""
        original = Task("a")
        reduce([original], ToggleTask("a"))
        assert original.completed is False


class TestReduceUnknown:
    """Tests for unsupported intents."""

    def test_unknown_intent(self) -> None:
        """Test anything that isn't an intent is rejected."""
        with pytest.raises(TypeError):
            reduce([], "add")  # type: ignore[arg-type]


class TestEventDispatcher:
    """Tests for EventDispatcher."""

    def test_submit_adds_saves_clears_renders(self, store: TaskStore) -> None:
        """Test the full add sequence."""
        renderer = RecordingRenderer()
        field = InputField("Write report")
        dispatcher = EventDispatcher(store, renderer, field)

        dispatcher.submit()

        assert store.load() == [Task("Write report")]
        assert field.value == ""
        assert renderer.calls == [[Task("Write report")]]

    def test_submit_blank_is_noop(self, store: TaskStore) -> None:
        """Test a blank field neither saves nor renders."""
        store.save([Task("a")])
        renderer = RecordingRenderer()
        field = InputField("   ")
        dispatcher = EventDispatcher(store, renderer, field)

        dispatcher.submit()

        assert store.load() == [Task("a")]
        assert renderer.calls == []
        assert field.value == "   "

    def test_submit_reads_latest_stored_list(self, store: TaskStore) -> None:
        """Test each event starts from what is in storage."""
        dispatcher = EventDispatcher(store, RecordingRenderer(), InputField("b"))
        store.save([Task("a")])

        dispatcher.submit()

        assert store.load() == [Task("a"), Task("b")]

    def test_toggle_saves_and_renders(self, store: TaskStore) -> None:
        """Test the full toggle sequence."""
        store.save([Task("a"), Task("b")])
        renderer = RecordingRenderer()
        dispatcher = EventDispatcher(store, renderer, InputField())

        dispatcher.toggle("b")

        assert store.load() == [Task("a"), Task("b", True)]
        assert renderer.calls == [[Task("a"), Task("b", True)]]

    def test_toggle_leaves_input_alone(self, store: TaskStore) -> None:
        """Test toggling does not clear a half-typed task."""
        store.save([Task("a")])
        field = InputField("draft")
        EventDispatcher(store, RecordingRenderer(), field).toggle("a")
        assert field.value == "draft"

    def test_toggle_duplicates(self, store: TaskStore) -> None:
        """Test toggling one duplicate flips both."""
        store.save([Task("x"), Task("x")])
        EventDispatcher(store, RecordingRenderer(), InputField()).toggle("x")
        assert store.load() == [Task("x", True), Task("x", True)]

    def test_toggle_on_malformed_storage(self, memory_storage: MemoryStorage) -> None:
        """Test a corrupt slot behaves like an empty list."""
        memory_storage.set("tasks", "{broken")
        store = TaskStore(memory_storage)
        renderer = RecordingRenderer()

        EventDispatcher(store, renderer, InputField()).toggle("a")

        assert store.load() == []
        assert renderer.calls == [[]]

    def test_dispatch_returns_new_list(self, store: TaskStore) -> None:
        """Test dispatch hands back what it saved."""
        dispatcher = EventDispatcher(store, RecordingRenderer(), InputField())
        result = dispatcher.dispatch(AddTask("a"))
        assert result == [Task("a")] == store.load()

    def test_toggle_through_rendered_node(self, store: TaskStore) -> None:
        """Test nodes drawn by the real renderer drive toggles."""
        container = ListContainer()
        renderer = TaskListRenderer(container)
        dispatcher = EventDispatcher(store, renderer, InputField())
        renderer.on_toggle = dispatcher.toggle
        store.save([Task("a")])
        renderer.render(store.load())

        container.children[0].activate()

        assert container.children[0].struck is True
        assert store.load() == [Task("a", True)]
