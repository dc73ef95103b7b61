"""taskpad - a persistent terminal task list."""

__version__ = "0.1.0"
