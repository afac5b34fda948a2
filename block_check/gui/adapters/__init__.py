"""Adapter registry for GUI host runtime selection."""

from __future__ import annotations

from block_check.config import CheckerConfig
from block_check.gui.contract import GuiAdapter
from block_check.gui.facade import PasswordCheckerFacade

from .jsonl import JsonLinesGuiAdapter
from .terminal import TerminalGuiAdapter


def available_adapters() -> tuple[str, ...]:
    return ("terminal", "jsonl")


def create_adapter(name: str, *, facade: PasswordCheckerFacade, config: CheckerConfig) -> GuiAdapter:
    normalized = name.strip().lower()

    if normalized == "terminal":
        return TerminalGuiAdapter(facade=facade, mask_input=config.mask_input)
    if normalized == "jsonl":
        return JsonLinesGuiAdapter(facade=facade)

    options = ", ".join(available_adapters())
    raise ValueError(f"Unknown CHECKER_ADAPTER={name!r}. Supported adapters: {options}")
