"""Shared fixtures for taskpad tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from taskpad.kvstore import MemoryStorage
from taskpad.store import TaskStore


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_taskpad_dir(temp_project: Path) -> Path:
    """Create a temporary .taskpad directory."""
    taskpad_dir = temp_project / ".taskpad"
    taskpad_dir.mkdir()
    return taskpad_dir


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory key-value storage."""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage: MemoryStorage) -> TaskStore:
    """Task store over empty in-memory storage."""
    return TaskStore(memory_storage)


@pytest.fixture
def sample_tasks_data() -> list[dict]:
    """Sample persisted task records."""
    return [
        {"text": "Buy milk", "completed": False},
        {"text": "Write report", "completed": True},
        {"text": "Call Sam", "completed": False},
    ]


@pytest.fixture
def seeded_storage_file(temp_taskpad_dir: Path, sample_tasks_data: list[dict]) -> Path:
    """Write sample tasks to the default storage file."""
    storage_path = temp_taskpad_dir / "storage.json"
    storage_path.write_text(json.dumps({"tasks": json.dumps(sample_tasks_data)}))
    return storage_path
