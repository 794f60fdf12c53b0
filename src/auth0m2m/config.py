"""Home-root resolution, application directories, and atomic file writes.

Directory layout::

    ~/.auth0m2m/               <- home root (segment name overridable)
        <app>/
            config.json        <- one CredentialRecord per application

This module exclusively owns path construction.  Callers pass only an
application name; :func:`validate_app_name` rejects names that would escape
the home root, and :func:`app_dir` joins a validated name onto the root.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`) so that an interrupted ``auth0m2m new`` never leaves a
half-written credential file behind.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from auth0m2m.exceptions import ConfigError, HomeResolutionError, InvalidAppNameError

DEFAULT_ROOT = ".auth0m2m"
CONFIG_FILENAME = "config.json"

_APP_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


# --- Home root ---


def resolve_home(override: Optional[str] = None) -> Path:
    """Return the home root directory (``~/.auth0m2m`` by default).

    Args:
        override: Replacement for the root segment *name*.  The parent is
            always the user's home directory.

    Returns:
        The home root path.  It is not created.

    Raises:
        HomeResolutionError: If the platform cannot determine a home
            directory.
        ConfigError: If *override* is not a single path segment.
    """
    segment = DEFAULT_ROOT if override is None else override
    if segment in ("", ".", "..") or "/" in segment or os.sep in segment:
        raise ConfigError(f"Invalid home root name '{segment}': must be a single directory name")

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeResolutionError("Could not find home dir.") from exc
    return home / segment


def validate_app_name(app_name: str) -> str:
    """Check that *app_name* is safe to use as a single directory name.

    Names must start with a letter or digit and may then contain letters,
    digits, ``.``, ``_`` and ``-``.

    Returns:
        The unchanged *app_name*.

    Raises:
        InvalidAppNameError: If the name is empty or contains other characters.
    """
    if not _APP_NAME_RE.match(app_name):
        raise InvalidAppNameError(
            f"Invalid application name '{app_name}': use letters, digits, '.', '_' "
            "or '-', starting with a letter or digit"
        )
    return app_name


def app_dir(home: Path, app_name: str) -> Path:
    """Return ``<home>/<app_name>``.  Pure: no I/O and no validation."""
    return home / app_name


def config_path(directory: Path) -> Path:
    """Path to the credential file inside an application directory."""
    return directory / CONFIG_FILENAME


# --- Atomic file writes ---


def atomic_write(path: Path, data: str, mode: int = 0o600) -> None:
    """Write *data* to *path* atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems.  Permissions are
    set to *mode* before any content is written.  On failure the temp file
    is removed and the original exception re-raised.
    """
    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        os.chmod(tmp_path, mode)
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.replace(tmp_path, path)
    except BaseException:
        # Includes KeyboardInterrupt.
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise
