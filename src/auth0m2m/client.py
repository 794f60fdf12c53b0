"""Client Credentials token fetch.

Performs the non-interactive OAuth2 Client Credentials grant
(:rfc:`6749` section 4.4) against an Auth0-style token endpoint::

    POST https://<domain>/oauth/token
    Content-Type: application/json

    {"client_id": ..., "client_secret": ..., "audience": ...,
     "domain": ..., "grant_type": "client_credentials"}

The request is made exactly once with a finite timeout.  There is no
retry, no caching, and no refresh-token handling: every ``auth0m2m login``
asks the identity provider for a fresh token.
"""

from __future__ import annotations

import json

import httpx
from pydantic import ValidationError

from auth0m2m.exceptions import (
    FetchConnectionError,
    FetchDecodeError,
    FetchHttpError,
    FetchTimeoutError,
)
from auth0m2m.models import CredentialRecord, TokenRecord, describe_validation_error
from auth0m2m.output import debug

DEFAULT_TIMEOUT = 30.0
"""Seconds allowed for connecting to and reading from the token endpoint."""

_REDACTED = "***"

_MIN_SCRUB_LENGTH = 8
"""Shorter secrets are only scrubbed where they appear as a whole JSON string."""


def fetch_token(record: CredentialRecord, timeout: float = DEFAULT_TIMEOUT) -> TokenRecord:
    """Exchange *record* for an access token.

    Args:
        record: Stored credentials.  The whole record, including
            ``grant_type``, is sent as the JSON body.
        timeout: Connect/read timeout in seconds.

    Returns:
        The parsed :class:`~auth0m2m.models.TokenRecord`.

    Raises:
        FetchHttpError: If the endpoint answers with a 4xx or 5xx status.
            The body is not parsed as a token.
        FetchDecodeError: If a 2xx body is not a valid token response.
        FetchTimeoutError: If the request times out.
        FetchConnectionError: On any other network-level failure.
    """
    url = record.token_url
    debug(f"POST {url}")

    try:
        response = httpx.post(
            url,
            json=record.to_payload(),
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        detail = _scrub(exc.response.text, record).strip()
        message = f"Token request to {url} failed with status {status}"
        if detail:
            message += f": {detail}"
        raise FetchHttpError(status, message) from exc
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(
            f"Token request to {url} timed out after {timeout:g}s"
        ) from exc
    except httpx.HTTPError as exc:
        raise FetchConnectionError(
            f"Token request to {url} failed: {_scrub(str(exc), record)}"
        ) from exc

    debug(f"Token endpoint answered {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise FetchDecodeError(
            f"Could not decode token response from {url}: body is not valid JSON"
        ) from exc

    try:
        return TokenRecord.model_validate(data)
    except ValidationError as exc:
        raise FetchDecodeError(
            f"Could not decode token response from {url}: {describe_validation_error(exc)}"
        ) from exc


def _scrub(text: str, record: CredentialRecord) -> str:
    """Remove the client secret from text that came back from the network.

    A short secret would match inside ordinary words, so it is replaced only
    as a complete JSON string value (``"<secret>"``).
    """
    secret = record.client_secret.get_secret_value()
    if not secret:
        return text
    if len(secret) >= _MIN_SCRUB_LENGTH:
        return text.replace(secret, _REDACTED)
    return text.replace(json.dumps(secret), json.dumps(_REDACTED))
