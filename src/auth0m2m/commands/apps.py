"""``auth0m2m list`` and ``auth0m2m show`` -- inspect registered applications."""

from __future__ import annotations

import typer

from auth0m2m import credential_store
from auth0m2m.commands import handle_errors
from auth0m2m.config import app_dir, config_path, resolve_home, validate_app_name
from auth0m2m.exceptions import StoreError
from auth0m2m.output import OutputFormat, format_response, get_output, info, print_data, suggest

_MASK = "**********"


@handle_errors
def list_command(ctx: typer.Context) -> None:
    """List registered applications."""
    obj = ctx.obj or {}
    home = resolve_home(obj.get("root"))
    names = credential_store.list_apps(home)

    if get_output().format == OutputFormat.JSON:
        format_response(names)
        return
    if not names:
        info(f"No applications registered under {home}.")
        suggest("Register one: auth0m2m new <app>")
        return
    for name in names:
        print_data(name)


@handle_errors
def show_command(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., metavar="APP", help="The application to show."),
) -> None:
    """Show an application's stored settings (the client secret stays masked)."""
    obj = ctx.obj or {}
    validate_app_name(app_name)
    path = config_path(app_dir(resolve_home(obj.get("root")), app_name))
    if not credential_store.exists(path):
        raise StoreError(f"{path} does not exist.")

    data = credential_store.load(path).to_payload()
    data["client_secret"] = _MASK
    format_response(data)
