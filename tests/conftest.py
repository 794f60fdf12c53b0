"""Shared test fixtures for auth0m2m.

Provides an isolated home directory, a plain-text output manager, sample
credential records, and a Typer CLI runner.  These fixtures are
automatically discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from auth0m2m.models import CredentialRecord
from auth0m2m.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the global OutputManager after every test and disable colour.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    ``NO_COLOR`` keeps diagnostics as plain, unwrapped lines.
    """
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Home isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at a temporary directory.

    Returns:
        The temporary home directory (the home root ``.auth0m2m`` is not
        created).
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def home_root(fake_home: Path) -> Path:
    """The default home root under the fake home (not created)."""
    return fake_home / ".auth0m2m"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_record() -> CredentialRecord:
    return CredentialRecord(
        client_id="my-client-id",
        client_secret="my-client-secret",
        audience="https://api.example.com",
        domain="tenant.example.com",
    )


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
