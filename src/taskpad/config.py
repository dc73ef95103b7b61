"""Configuration models for taskpad."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Configuration for the persisted key-value slot."""

    path: str = ".taskpad/storage.json"
    key: str = "tasks"


class DisplayConfig(BaseModel):
    """Configuration for the rendered task table."""

    title: str = "Tasks"
    completed_style: str = "strike dim"
    show_index: bool = True


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    enabled: bool = True
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = ".taskpad/taskpad.log"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"


class TaskpadConfig(BaseModel):
    """Main configuration for taskpad."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskpadConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)


# Default config directory
TASKPAD_DIR = Path(".taskpad")
CONFIG_FILE = TASKPAD_DIR / "config.json"
STORAGE_FILE = TASKPAD_DIR / "storage.json"
LOG_FILE = TASKPAD_DIR / "taskpad.log"
