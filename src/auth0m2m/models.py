"""Pydantic models shared across auth0m2m modules.

:class:`CredentialRecord`
    What ``auth0m2m new`` stores in ``<home>/.auth0m2m/<app>/config.json``
    and what ``auth0m2m login`` POSTs to the token endpoint.

:class:`TokenRecord`
    The parsed response of the token endpoint.  Ephemeral, never persisted.

Secret values (``client_secret``, ``access_token``) are held in
:class:`pydantic.SecretStr` so that ``repr()``, ``str()`` and the default
``model_dump()`` redact them.  Use the explicit ``to_payload()`` helpers when
the real value must leave the process (disk, wire, stdout).
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

GRANT_TYPE = "client_credentials"
"""The only OAuth2 grant type auth0m2m supports."""


class CredentialRecord(BaseModel):
    """Client-credentials set for one registered application.

    ``grant_type`` is not user-settable: whatever value is supplied (by a
    caller or by a hand-edited config file) is replaced with
    :data:`GRANT_TYPE`.  Unknown keys in stored files are ignored.

    Example::

        record = CredentialRecord(
            client_id="abc",
            client_secret="s3cret",
            audience="https://api.example.com",
            domain="tenant.eu.auth0.com",
        )
        assert record.grant_type == "client_credentials"
        assert "s3cret" not in repr(record)
    """

    model_config = ConfigDict(extra="ignore")

    client_id: str = Field(description="OAuth2 client identifier")
    client_secret: SecretStr = Field(description="OAuth2 client secret")
    audience: str = Field(description="API identifier the token is requested for")
    domain: str = Field(description="Identity provider host, without scheme or path")
    grant_type: str = Field(default=GRANT_TYPE, description="Always 'client_credentials'")

    @field_validator("grant_type", mode="before")
    @classmethod
    def _force_grant_type(cls, value: Any) -> str:
        return GRANT_TYPE

    @property
    def token_url(self) -> str:
        """The identity provider's token endpoint for this record."""
        return f"https://{self.domain}/oauth/token"

    def to_payload(self) -> dict[str, str]:
        """Return the record as a plain dict with the secret revealed.

        Used for both the on-disk JSON file and the token request body, so
        the key order matches the documented file layout.
        """
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret.get_secret_value(),
            "audience": self.audience,
            "domain": self.domain,
            "grant_type": GRANT_TYPE,
        }


class TokenRecord(BaseModel):
    """Access token returned by the token endpoint."""

    model_config = ConfigDict(extra="ignore")

    access_token: SecretStr
    token_type: str
    expires_in: Optional[int] = None
    scope: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the token as a plain dict with the access token revealed."""
        data: dict[str, Any] = {
            "access_token": self.access_token.get_secret_value(),
            "token_type": self.token_type,
        }
        if self.expires_in is not None:
            data["expires_in"] = self.expires_in
        if self.scope is not None:
            data["scope"] = self.scope
        return data


def describe_validation_error(exc: ValidationError) -> str:
    """Render a :class:`~pydantic.ValidationError` without any input values.

    Pydantic's default message echoes the offending input, which for these
    models may include a secret.  Only field locations and messages are kept.
    """
    parts = []
    for err in exc.errors(include_input=False, include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
