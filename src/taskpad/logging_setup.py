"""Logging configuration for the taskpad CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


class _ConsoleNoiseFilter(logging.Filter):
    """Keep taskpad records on the console; other libraries only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskpad" or record.name.startswith("taskpad."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int | str = logging.DEBUG,
) -> None:
    """Configure root logging.

    Console output goes to stderr through rich so it does not interleave
    with the rendered task table on stdout. When ``log_file`` is given,
    everything at ``file_level`` and above is also written there.

    Call this once, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    ch = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    ch.setLevel(level)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    logging.captureWarnings(True)
