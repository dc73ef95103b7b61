"""CLI interface for taskpad."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from taskpad import __version__
from taskpad.app import TaskApp, run_session
from taskpad.config import CONFIG_FILE, TaskpadConfig
from taskpad.dispatcher import is_blank
from taskpad.logging_setup import setup_logging
from taskpad.renderer import build_table

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskpad")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """taskpad - a task list that remembers.

    Run without a command for an interactive session.

    \b
    Quick usage:
      taskpad                     # Interactive session
      taskpad add Write report    # Add a task
      taskpad toggle Write report # Mark it done (or undone)
      taskpad list                # Show all tasks
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    # init rewrites the config, so it must work when the current one is broken.
    if ctx.invoked_subcommand == "init":
        return

    try:
        config = TaskpadConfig.load(config_path)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid config:[/red] {escape(str(e))}")
        ctx.exit(1)

    if config.logging.enabled:
        setup_logging(
            level="DEBUG" if verbose else config.logging.level,
            log_file=config.logging.file,
            file_level=config.logging.file_level,
        )

    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        run_session(TaskApp.from_config(config), console, config.display)


def _started_app(ctx: click.Context) -> tuple[TaskApp, TaskpadConfig]:
    config: TaskpadConfig = ctx.obj["config"]
    app = TaskApp.from_config(config)
    app.start()
    return app, config


def _show(app: TaskApp, config: TaskpadConfig) -> None:
    if not len(app.container):
        console.print("[dim]No tasks yet.[/dim]")
        return
    console.print(build_table(app.container, config.display))


@main.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """Show all tasks."""
    app, config = _started_app(ctx)
    _show(app, config)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Add a task."""
    text = " ".join(words)
    if is_blank(text):
        console.print("[yellow]Nothing to add.[/yellow]")
        return

    app, config = _started_app(ctx)
    app.add(text)
    _show(app, config)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def toggle(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Toggle every task with exactly this text."""
    text = " ".join(words)
    app, config = _started_app(ctx)

    matches = [node for node in app.container.children if node.text == text]
    if not matches:
        console.print(f"[yellow]No task named[/yellow] {escape(repr(text))}")
        return

    # Every matching node toggles all of them, so one activation is enough.
    matches[0].activate()
    _show(app, config)


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Delete every stored task."""
    config: TaskpadConfig = ctx.obj["config"]
    app = TaskApp.from_config(config)

    if not yes and not click.confirm("Delete all tasks?", default=False):
        console.print("[dim]Cancelled.[/dim]")
        return

    app.store.clear()
    console.print("[green]All tasks removed.[/green]")


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a default configuration file.

    Writes to the --config path when one is given.
    """
    config_path: Path = ctx.obj.get("config_path") or CONFIG_FILE
    if config_path.exists() and not force:
        console.print(
            "[yellow]taskpad already initialized.[/yellow] Use --force to overwrite."
        )
        return

    TaskpadConfig().save(config_path)

    console.print(
        Panel.fit(
            "[green]Configuration saved![/green]\n\n"
            f"Config: [cyan]{escape(str(config_path))}[/cyan]\n\n"
            "Next steps:\n"
            "  1. Add a task: [cyan]taskpad add Write report[/cyan]\n"
            "  2. Start a session: [cyan]taskpad[/cyan]",
            title="taskpad",
        )
    )


if __name__ == "__main__":
    main()
