"""auth0m2m -- local credential manager for OAuth2 machine-to-machine apps.

Register a named *application* once (its ``client_id``, ``client_secret``,
``audience`` and ``domain`` are stored under ``~/.auth0m2m/<app>/``), then
exchange those credentials for an access token whenever you need one.

Typical workflow::

    auth0m2m new billing-api       # interactive, prompts for credentials
    auth0m2m login billing-api     # prints an access token to stdout

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for stored credentials and fetched tokens.
    config: Home-root resolution, app directories, atomic writes.
    credential_store: Persist and load per-application credential files.
    prompt: Interactive line prompts and overwrite confirmation.
    client: Client-credentials token fetch over HTTPS.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
