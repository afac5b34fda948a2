"""GUI host runtime that wires the analyzer to one selected GUI adapter."""

from __future__ import annotations

import logging

from block_check.application.analyzer import PasswordAnalyzer
from block_check.config import CheckerConfig
from block_check.gui.adapters import create_adapter
from block_check.gui.facade import PasswordCheckerFacade

logger = logging.getLogger(__name__)


class GuiHost:
    """Bootstraps analyzer, facade, and one GUI adapter."""

    __slots__ = (
        "config",
        "analyzer",
        "facade",
        "adapter",
    )

    def __init__(self, config: CheckerConfig) -> None:
        self.config = config
        self.analyzer = PasswordAnalyzer(config.policy)
        self.facade = PasswordCheckerFacade(self.analyzer)
        self.adapter = create_adapter(
            config.adapter_name,
            facade=self.facade,
            config=config,
        )

    def start(self) -> None:
        logger.info("Starting %s adapter", self.adapter.metadata.name)
        self.adapter.start()

    def stop(self) -> None:
        self.adapter.stop()
        logger.info(
            "Stopped %s adapter after %d submissions",
            self.adapter.metadata.name,
            self.facade.submission_count,
        )
