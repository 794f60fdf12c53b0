"""Persist and load per-application credential files.

Each application maps to exactly one ``config.json`` inside its own
directory under the home root (see :mod:`auth0m2m.config`).  The file holds
a pretty-printed :class:`~auth0m2m.models.CredentialRecord` followed by a
trailing newline::

    {
      "client_id": "...",
      "client_secret": "...",
      "audience": "...",
      "domain": "...",
      "grant_type": "client_credentials"
    }

Writes replace the whole file (no merge) atomically with ``0o600``
permissions.  Secrets are stored in plain text; the file permissions are
the only protection.

The store performs no locking: auth0m2m is a single-user, single-process,
interactive tool.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import ValidationError

from auth0m2m.config import CONFIG_FILENAME, atomic_write, config_path
from auth0m2m.exceptions import CredentialParseError, StoreError
from auth0m2m.models import CredentialRecord, describe_validation_error


def exists(path: Path) -> bool:
    """Return ``True`` if *path* exists.

    Any inability to stat the path (including permission denied) counts as
    non-existent, matching :func:`os.path.exists`.
    """
    return os.path.exists(path)


def create_dir_all(path: Path) -> None:
    """Create *path* and any missing parents.  Succeeds if it already exists.

    Raises:
        StoreError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True, mode=0o700)
    except OSError as exc:
        raise StoreError(f"Create dir {path} failed: {exc.strerror or exc}") from exc


def write(record: CredentialRecord, directory: Path) -> Path:
    """Write *record* to ``<directory>/config.json``, replacing any existing file.

    Args:
        record: The credential set to persist.
        directory: An existing application directory.

    Returns:
        The path of the written file.

    Raises:
        StoreError: If the file cannot be written (permissions, disk full, etc.).
    """
    path = config_path(directory)
    text = json.dumps(record.to_payload(), indent=2) + "\n"
    try:
        atomic_write(path, text)
    except OSError as exc:
        raise StoreError(f"Write to {path} failed: {exc.strerror or exc}") from exc
    return path


def load(path: Path) -> CredentialRecord:
    """Load a credential record from a ``config.json`` file.

    Unknown keys are ignored; missing required keys fail.

    Args:
        path: Path to the config file itself (not its directory).

    Returns:
        The deserialised :class:`~auth0m2m.models.CredentialRecord`.

    Raises:
        StoreError: If the file does not exist or cannot be read.
        CredentialParseError: If the file is not UTF-8 JSON or does not
            match the record shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CredentialParseError(f"Invalid credential file {path}: not UTF-8 text") from exc
    except OSError as exc:
        raise StoreError(f"Could not read {path}: {exc.strerror or exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CredentialParseError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CredentialParseError(f"Invalid credential file {path}: expected a JSON object")

    try:
        return CredentialRecord.model_validate(data)
    except ValidationError as exc:
        raise CredentialParseError(
            f"Invalid credential file {path}: {describe_validation_error(exc)}"
        ) from exc


def list_apps(home: Path) -> list[str]:
    """Return the names of all registered applications, sorted alphabetically.

    An application counts as registered when its directory holds a
    ``config.json``.  Returns an empty list if *home* does not exist.
    """
    if not home.is_dir():
        return []
    return sorted(
        p.name for p in home.iterdir() if p.is_dir() and (p / CONFIG_FILENAME).is_file()
    )
