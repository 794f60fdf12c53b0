"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Every failure that auth0m2m itself detects -- a declined overwrite, a missing
application, a rejected token request -- exits with
:data:`EXIT_GENERIC_FAILURE`.  Argument errors are reported by Typer, which
exits with status 2.

Example::

    $ auth0m2m login unknown-app
    $ echo $?
    1
"""

EXIT_GENERIC_FAILURE = 1
"""The command failed or was aborted by the user."""

EXIT_INTERRUPTED = 130
"""The command was cancelled with Ctrl-C."""
