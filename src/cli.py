"""Command-line entry points for the Kanban and To-Do apps.

``kanban`` and ``todo`` start the same way: settings from the environment,
options on top, logging configured, then the chosen host runs the app's
render callback until the window (or terminal loop) is closed.
"""
import logging
from typing import Optional

import click

from config import FRONTENDS, LOG_LEVELS, Settings
from frame import WindowInitError
from kanban_app import KanbanApp
from logging_utils import configure_logging
from terminal_frontend import TerminalHost
from theme import Theme
from todo_app import TodoApp

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def launch(app, settings: Settings) -> int:
    """Run ``app`` on the configured host; returns the process exit code."""
    theme = Theme.from_env()
    try:
        if settings.frontend == "terminal":
            return TerminalHost(app, theme, alt_screen=settings.alt_screen).run()
        try:
            from qt_frontend import run_native
        except ImportError as exc:
            raise WindowInitError(f"PyQt6 could not be loaded: {exc}") from exc
        return run_native(app, theme.hex_palette)
    except WindowInitError as exc:
        logger.error("Could not open the %s window: %s", app.title, exc)
        return 1


def _settings(frontend: Optional[str], log_level: Optional[str], log_file: Optional[str]) -> Settings:
    settings = Settings.from_env()
    if frontend:
        settings.frontend = frontend.lower()
    if log_level:
        settings.log_level = log_level.upper()
    if log_file:
        settings.log_file = log_file
    return settings


def _host_options(func):
    func = click.option(
        "--log-file", type=click.Path(dir_okay=False), default=None,
        help="Also write log records to this file (env: KANBAN_LOG_FILE).",
    )(func)
    func = click.option(
        "--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
        help="Log level (env: KANBAN_LOG_LEVEL, default WARNING).",
    )(func)
    func = click.option(
        "--frontend", type=click.Choice(FRONTENDS, case_sensitive=False), default=None,
        help="Qt window or terminal loop (env: KANBAN_FRONTEND, default qt).",
    )(func)
    return func


def _run(ctx: click.Context, app, frontend, log_level, log_file) -> None:
    settings = _settings(frontend, log_level, log_file)
    configure_logging(settings.log_level, settings.log_file)
    logger.debug("Starting %s with %s", app.title, settings)
    ctx.exit(launch(app, settings))


@click.command(context_settings=CONTEXT_SETTINGS)
@_host_options
@click.pass_context
def kanban_main(ctx: click.Context, frontend, log_level, log_file) -> None:
    """Kanban board with To Do, In-Progress and Done columns."""
    _run(ctx, KanbanApp(), frontend, log_level, log_file)


@click.command(context_settings=CONTEXT_SETTINGS)
@_host_options
@click.pass_context
def todo_main(ctx: click.Context, frontend, log_level, log_file) -> None:
    """Single-list To-Do app."""
    _run(ctx, TodoApp(), frontend, log_level, log_file)


if __name__ == '__main__':  # pragma: no cover
    kanban_main()
