"""Built-in sub-commands for the auth0m2m CLI.

Each module exposes a plain ``run_*`` function holding the command's flow
(testable without Typer) and a thin Typer command wrapper that reads global
settings from ``ctx.obj``.  Wrappers are decorated with
:func:`handle_errors`, which turns :class:`~auth0m2m.exceptions.Auth0M2MError`
into a message on stderr and a non-zero exit.
"""

from __future__ import annotations

import functools
import sys
from typing import Any, Callable, TypeVar

import typer

from auth0m2m.exceptions import Aborted, Auth0M2MError
from auth0m2m.exit_codes import EXIT_GENERIC_FAILURE
from auth0m2m.output import error

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Map auth0m2m errors raised by a command to a clean Typer exit.

    A declined confirmation prints exactly ``Aborting.`` and nothing else.
    Every other :class:`~auth0m2m.exceptions.Auth0M2MError` is printed as
    ``Error: <message>``.  Tracebacks are never shown for these errors.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Aborted:
            print("Aborting.", file=sys.stderr, flush=True)
            raise typer.Exit(code=EXIT_GENERIC_FAILURE) from None
        except Auth0M2MError as exc:
            error(str(exc))
            raise typer.Exit(code=exc.exit_code) from None

    return wrapper  # type: ignore[return-value]
