"""Tests for the command flows, called directly without Typer."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from auth0m2m.commands.login import run_login
from auth0m2m.commands.new import run_new
from auth0m2m.exceptions import Aborted, InvalidAppNameError, StoreError
from auth0m2m.prompt import PromptReader


def _reader(text: str) -> PromptReader:
    return PromptReader(input=io.StringIO(text), output=io.StringIO())


class TestRunNew:
    def test_writes_record(self, home_root: Path) -> None:
        path = run_new("svc", reader=_reader("a\nb\nc\nd\n"))
        assert path == home_root / "svc" / "config.json"
        assert json.loads(path.read_text())["grant_type"] == "client_credentials"

    def test_declined_overwrite_raises_instead_of_exiting(self, home_root: Path) -> None:
        run_new("svc", reader=_reader("a\nb\nc\nd\n"))
        with pytest.raises(Aborted):
            run_new("svc", reader=_reader("\n"))
        assert json.loads((home_root / "svc" / "config.json").read_text())["client_id"] == "a"

    def test_force(self, home_root: Path) -> None:
        run_new("svc", reader=_reader("a\nb\nc\nd\n"))
        run_new("svc", reader=_reader("A\nB\nC\nD\n"), force=True)
        assert json.loads((home_root / "svc" / "config.json").read_text())["client_id"] == "A"

    def test_invalid_name_touches_nothing(self, fake_home: Path) -> None:
        with pytest.raises(InvalidAppNameError):
            run_new("../x", reader=_reader("a\nb\nc\nd\n"))
        assert list(fake_home.iterdir()) == []


class TestRunLogin:
    def test_unregistered(self, home_root: Path) -> None:
        with patch("auth0m2m.client.httpx.post") as mock_post:
            with pytest.raises(StoreError, match="does not exist"):
                run_login("ghost")
        mock_post.assert_not_called()

    def test_returns_token(self, home_root: Path) -> None:
        run_new("svc", reader=_reader("a\nb\nc\nd\n"))
        response = MagicMock(spec=httpx.Response)
        response.status_code = 200
        response.json.return_value = {"access_token": "tok123", "token_type": "Bearer"}
        response.raise_for_status.return_value = None

        with patch("auth0m2m.client.httpx.post", return_value=response) as mock_post:
            token = run_login("svc", timeout=7.5)

        assert token.access_token.get_secret_value() == "tok123"
        assert mock_post.call_args.kwargs["timeout"] == 7.5
