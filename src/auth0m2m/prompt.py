"""Interactive prompts used by ``auth0m2m new``.

:class:`PromptReader` is the single line-reading collaborator: it writes a
label, flushes, and reads one line.  Flushing before the blocking read is
required so that the prompt is visible when the terminal waits for input.

Confirmation is modelled as a value (:class:`Confirmation`) rather than a
process exit.  :func:`confirm_or_abort` turns a declined confirmation into
:class:`~auth0m2m.exceptions.Aborted`, and only the CLI entry point decides
to terminate the process.
"""

from __future__ import annotations

import enum
import sys
from typing import Optional, TextIO

from auth0m2m.exceptions import Aborted, PromptError
from auth0m2m.models import CredentialRecord

CREDENTIAL_FIELDS = ("client_id", "client_secret", "audience", "domain")
"""Prompted fields, in prompt order."""


class Confirmation(str, enum.Enum):
    """Outcome of a yes/no confirmation prompt."""

    CONFIRMED = "confirmed"
    DECLINED = "declined"


class PromptReader:
    """Read single lines from an interactive input stream.

    Args:
        input: Stream to read from.  Defaults to ``sys.stdin`` at call time.
        output: Stream prompts are written to.  Defaults to ``sys.stdout``
            at call time.
    """

    def __init__(self, input: Optional[TextIO] = None, output: Optional[TextIO] = None) -> None:
        self._input = input
        self._output = output

    @property
    def input(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def ask(self, text: str) -> str:
        """Write *text* verbatim, flush, and return the next line stripped.

        End of input yields an empty string.

        Raises:
            PromptError: If the terminal cannot be written to or read from.
        """
        try:
            self.output.write(text)
            self.output.flush()
            line = self.input.readline()
        except (OSError, ValueError) as exc:
            raise PromptError(f"Read from prompt failed: {exc}") from exc
        return line.strip()

    def prompt_line(self, label: str) -> str:
        """Prompt with ``"<label>> "`` and return the trimmed answer.

        Empty answers are returned as-is; no validation happens here.
        """
        return self.ask(f"{label}> ")


def collect_credential_record(reader: PromptReader) -> CredentialRecord:
    """Prompt for client_id, client_secret, audience and domain, in that order.

    ``grant_type`` is never prompted for; the record forces it to
    ``client_credentials``.
    """
    answers = {field: reader.prompt_line(field) for field in CREDENTIAL_FIELDS}
    return CredentialRecord(**answers)


def confirm(message: str, reader: PromptReader) -> Confirmation:
    """Ask ``"<message> Continue? [y/N] "`` and classify the answer.

    Only ``y`` (case-insensitive, surrounding whitespace ignored) confirms.
    Everything else -- including ``yes`` and an empty line -- declines.

    Raises:
        PromptError: If the terminal cannot be read.
    """
    answer = reader.ask(f"{message} Continue? [y/N] ").lower()
    if answer == "y":
        return Confirmation.CONFIRMED
    return Confirmation.DECLINED


def confirm_or_abort(message: str, reader: PromptReader) -> None:
    """Return normally only if the user confirms.

    Raises:
        Aborted: On any answer other than ``y``.
        PromptError: If the terminal cannot be read.
    """
    if confirm(message, reader) is Confirmation.DECLINED:
        raise Aborted()
