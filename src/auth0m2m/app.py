"""Typer application and CLI entry point for auth0m2m.

This module wires together the top-level Typer application and registers the
built-in sub-commands:

* ``new`` (alias ``set``) -- register an application's credentials.
* ``login`` (alias ``fetch``) -- print an access token for an application.
* ``list`` / ``show`` -- inspect registered applications.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.  Unhandled exceptions are written to a crash log under
the home root's ``.logs/`` directory.
"""

from __future__ import annotations

import signal
import sys
import tempfile
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer

from auth0m2m import __version__
from auth0m2m.client import DEFAULT_TIMEOUT
from auth0m2m.commands.apps import list_command, show_command
from auth0m2m.commands.login import login_command
from auth0m2m.commands.new import new_command
from auth0m2m.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="auth0m2m",
    help="Auth0 M2M access token management.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("new")(new_command)
app.command("set", hidden=True)(new_command)
app.command("login")(login_command)
app.command("fetch", hidden=True)(login_command)
app.command("list")(list_command)
app.command("show")(show_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"auth0m2m {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    root: Optional[str] = typer.Option(
        None, "--root", help="Name of the directory under $HOME holding applications [default: .auth0m2m]."
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", min=0.1, help="Token request timeout in seconds."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~auth0m2m.output.OutputManager` from CLI
    flags and stores shared settings (``root``, ``timeout``) in the Typer
    context so that sub-commands can read them via ``ctx.obj``.
    """
    from auth0m2m.output import OutputFormat, OutputManager, set_output

    output = OutputManager(
        format=OutputFormat.JSON if json_output else OutputFormat.AUTO,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)

    ctx.ensure_object(dict)
    ctx.obj["root"] = root
    ctx.obj["timeout"] = timeout


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly.

    This is the only interrupt path: :func:`main` installs it before running
    the app, so ``KeyboardInterrupt`` is never raised.
    """

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _crash_log_dir() -> Path:
    """Directory for crash logs: ``<home root>/.logs``, or the temp dir if $HOME is unknown.

    The leading dot keeps it out of the application-name namespace.
    """
    from auth0m2m.config import resolve_home
    from auth0m2m.exceptions import Auth0M2MError

    try:
        return resolve_home() / ".logs"
    except Auth0M2MError:
        return Path(tempfile.gettempdir()) / "auth0m2m-logs"


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    logs_dir = _crash_log_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``auth0m2m`` console script.

    Command-level :class:`~auth0m2m.exceptions.Auth0M2MError` instances are
    already reported by :func:`~auth0m2m.commands.handle_errors`; this
    handler covers errors raised outside a command and unexpected crashes.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        from auth0m2m.exceptions import Aborted, Auth0M2MError
        from auth0m2m.output import error

        if isinstance(exc, Aborted):
            sys.stderr.write("Aborting.\n")
            sys.exit(exc.exit_code)
        if isinstance(exc, Auth0M2MError):
            error(str(exc))
            sys.exit(exc.exit_code)

        try:
            log_path = _write_crash_log(exc)
        except OSError:
            error(f"Unexpected error: {type(exc).__name__}")
        else:
            error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)


if __name__ == "__main__":
    main()
