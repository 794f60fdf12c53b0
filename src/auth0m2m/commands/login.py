"""``auth0m2m login`` -- fetch an access token for a registered application.

By default only the bare access token is printed, so it can be captured::

    $ TOKEN=$(auth0m2m login billing-api)

With the global ``--json`` flag the whole token response is printed instead.
"""

from __future__ import annotations

from typing import Optional

import typer

from auth0m2m import credential_store
from auth0m2m.client import DEFAULT_TIMEOUT, fetch_token
from auth0m2m.commands import handle_errors
from auth0m2m.config import app_dir, config_path, resolve_home, validate_app_name
from auth0m2m.exceptions import StoreError
from auth0m2m.models import TokenRecord
from auth0m2m.output import OutputFormat, debug, format_response, get_output, print_data


def run_login(
    app_name: str,
    root: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TokenRecord:
    """Load the stored credentials for *app_name* and fetch a token.

    The config file itself must exist; an app directory without a
    ``config.json`` counts as unregistered.  Nothing is sent over the
    network in that case.

    Raises:
        StoreError: If the application is not registered or unreadable.
        CredentialParseError: If the stored file is malformed.
        FetchError: If the token request fails.
    """
    validate_app_name(app_name)
    path = config_path(app_dir(resolve_home(root), app_name))

    if not credential_store.exists(path):
        raise StoreError(f"{path} does not exist.")

    debug(f"Loading credentials from {path}")
    record = credential_store.load(path)
    return fetch_token(record, timeout=timeout)


@handle_errors
def login_command(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., metavar="APP", help="The name of the application to login with."),
) -> None:
    """Fetch an access token and print it to stdout."""
    obj = ctx.obj or {}
    token = run_login(
        app_name,
        root=obj.get("root"),
        timeout=obj.get("timeout", DEFAULT_TIMEOUT),
    )
    if get_output().format == OutputFormat.JSON:
        format_response(token.to_payload())
    else:
        print_data(token.access_token.get_secret_value())
