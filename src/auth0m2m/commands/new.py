"""``auth0m2m new`` -- register or overwrite an application's credentials.

Flow::

    validate name -> resolve home -> confirm overwrite if the app dir exists
    -> prompt for credentials -> create app dir -> write config.json

Example::

    $ auth0m2m new billing-api
    client_id> AbC123
    client_secret> ********
    audience> https://billing.example.com
    domain> example.eu.auth0.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from auth0m2m import credential_store
from auth0m2m.commands import handle_errors
from auth0m2m.config import app_dir, resolve_home, validate_app_name
from auth0m2m.output import debug, success, suggest, warning
from auth0m2m.prompt import PromptReader, collect_credential_record, confirm_or_abort


def run_new(
    app_name: str,
    root: Optional[str] = None,
    reader: Optional[PromptReader] = None,
    force: bool = False,
) -> Path:
    """Create (or overwrite) the credential set for *app_name*.

    Args:
        app_name: Application name, used as a directory name.
        root: Optional override for the home-root segment name.
        reader: Prompt collaborator.  Defaults to stdin/stdout.
        force: Skip the overwrite confirmation.  A warning is still printed
            when an existing config is replaced.

    Returns:
        Path of the written ``config.json``.

    Raises:
        Aborted: If the app directory exists and the user does not confirm.
        InvalidAppNameError: If *app_name* is not a safe directory name.
        StoreError: If the directory or file cannot be written.
        PromptError: If the terminal cannot be read.
    """
    reader = reader or PromptReader()
    validate_app_name(app_name)
    directory = app_dir(resolve_home(root), app_name)
    debug(f"Application directory: {directory}")

    if credential_store.exists(directory):
        if force:
            warning(f"Overwriting existing config in {directory}")
        else:
            confirm_or_abort(
                f"{directory} already exists. Continuing will overwrite your config.",
                reader,
            )

    record = collect_credential_record(reader)
    credential_store.create_dir_all(directory)
    return credential_store.write(record, directory)


@handle_errors
def new_command(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., metavar="APP", help="The name of the credential set to create."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without confirmation."),
) -> None:
    """Create a new credential set for an M2M application."""
    obj = ctx.obj or {}
    path = run_new(app_name, root=obj.get("root"), force=force)
    success(f"Saved credentials for '{app_name}' to {path}")
    suggest(f"Fetch a token: auth0m2m login {app_name}")
