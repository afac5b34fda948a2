"""Terminal GUI adapter for interactive password checking."""

from __future__ import annotations

import getpass
import sys
from typing import Any, TextIO

from block_check.gui.contract import GuiAdapterMetadata
from block_check.gui.facade import PasswordCheckerFacade

_PROMPT = "password> "
_HELP = "Type a password and press Enter to submit. Commands: :reset | :help | :quit"


class TerminalGuiAdapter:
    """Interactive prompt standing in for the password field and its buttons.

    Every entered line is submitted verbatim, so leading or trailing spaces
    count toward validation.
    """

    metadata = GuiAdapterMetadata(
        name="terminal",
        version="1.0.0",
        capabilities=(
            "submit",
            "reset",
            "masked_input",
        ),
    )

    __slots__ = ("_facade", "_mask_input", "_stdin", "_stdout", "_running")

    def __init__(
        self,
        facade: PasswordCheckerFacade,
        *,
        mask_input: bool = True,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._facade = facade
        self._mask_input = mask_input
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._running = False

    def start(self) -> None:
        self._running = True
        self._write("Terminal GUI adapter started.")
        self._write(_HELP)

        while self._running:
            try:
                raw = self._read_line()
            except (EOFError, KeyboardInterrupt):
                break

            if raw in {":quit", ":exit"}:
                break
            if raw == ":help":
                self._write(_HELP)
                continue
            if raw == ":reset":
                self._render(self._facade.reset())
                self._write("Fields cleared.")
                continue

            self._render(self._facade.submit(raw))

        self.stop()

    def stop(self) -> None:
        self._running = False

    def _read_line(self) -> str:
        if self._mask_input and self._stdin.isatty():
            return getpass.getpass(_PROMPT, stream=self._stdout)

        self._stdout.write(_PROMPT)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _render(self, view: dict[str, Any]) -> None:
        if view["error"]:
            self._write(view["error"])
        for line in view["output"]:
            self._write(line)

    def _write(self, text: str) -> None:
        print(text, file=self._stdout)
