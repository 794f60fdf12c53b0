"""Exception hierarchy for auth0m2m.

All exceptions inherit from :class:`Auth0M2MError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`auth0m2m.exit_codes`.
The top-level error handler in :func:`auth0m2m.app.main` catches
``Auth0M2MError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Messages never contain ``client_secret`` or ``access_token`` values.

Subclass hierarchy::

    Auth0M2MError (exit 1)
    +-- ConfigError
    |   +-- HomeResolutionError
    |   +-- InvalidAppNameError
    +-- StoreError
    +-- CredentialParseError
    +-- PromptError
    +-- FetchError
    |   +-- FetchHttpError
    |   +-- FetchDecodeError
    |   +-- FetchTimeoutError
    |   +-- FetchConnectionError
    +-- Aborted
"""

from auth0m2m.exit_codes import EXIT_GENERIC_FAILURE


class Auth0M2MError(Exception):
    """Base exception for all auth0m2m errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(Auth0M2MError):
    """Raised for invalid runtime settings (e.g. a bad ``--root`` override)."""


class HomeResolutionError(ConfigError):
    """Raised when the platform cannot determine the user's home directory."""


class InvalidAppNameError(ConfigError):
    """Raised when an application name is not safe to use as a path segment."""


class StoreError(Auth0M2MError):
    """Raised when a credential directory or file cannot be created, read, or written."""


class CredentialParseError(Auth0M2MError):
    """Raised when a stored ``config.json`` is not valid JSON or misses required fields."""


class PromptError(Auth0M2MError):
    """Raised when reading from or writing to the interactive terminal fails."""


class FetchError(Auth0M2MError):
    """Base class for token endpoint failures."""


class FetchHttpError(FetchError):
    """Raised when the identity provider answers with a 4xx or 5xx status.

    Args:
        status_code: The HTTP status returned by the token endpoint.
        message: Human-readable description (secret-free).
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class FetchDecodeError(FetchError):
    """Raised when a successful response body is not a valid token record."""


class FetchTimeoutError(FetchError):
    """Raised when the token request exceeds its timeout.  Never retried."""


class FetchConnectionError(FetchError):
    """Raised on network-level failures (DNS resolution, TLS, connection refused)."""


class Aborted(Auth0M2MError):
    """Raised when the user declines a confirmation prompt.

    This is a clean, intentional termination: the entry point prints only
    ``Aborting.`` to stderr and exits without a diagnostic.
    """

    def __init__(self, message: str = "Aborting."):
        super().__init__(message)
