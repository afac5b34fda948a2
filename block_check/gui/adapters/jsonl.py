"""Line-oriented JSON adapter for driving the checker from another process."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from block_check.gui.contract import GuiAdapterMetadata
from block_check.gui.facade import PasswordCheckerFacade


class JsonLinesGuiAdapter:
    """Reads one candidate per line and answers with one JSON object per line."""

    metadata = GuiAdapterMetadata(
        name="jsonl",
        version="1.0.0",
        capabilities=("json_lines",),
    )

    __slots__ = ("_facade", "_stdin", "_stdout", "_running")

    def __init__(
        self,
        facade: PasswordCheckerFacade,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._facade = facade
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._running = False

    def start(self) -> None:
        self._running = True
        for line in self._stdin:
            if not self._running:
                break
            payload = self._facade.analyze(line.rstrip("\r\n"))
            self._stdout.write(json.dumps(payload) + "\n")
            self._stdout.flush()
        self.stop()

    def stop(self) -> None:
        self._running = False
