"""GUI-facing facade that owns display state for the password checker."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any

from block_check.application.analyze_password import AnalyzePassword
from block_check.application.analyzer import AnalysisFailure, PasswordAnalyzer
from block_check.gui.contract import CONTRACT_VERSION, GuiAdapterMetadata

logger = logging.getLogger(__name__)


class PasswordCheckerFacade:
    """Facade that isolates GUI adapters from the analyzer.

    Adapters only capture input and render ``view()``; the error label text
    and output lines live here and are replaced on every submission.
    """

    __slots__ = (
        "_analyzer",
        "_analyze_password",
        "_lock",
        "_error_text",
        "_output_lines",
        "_submission_count",
        "_rejection_count",
    )

    def __init__(self, analyzer: PasswordAnalyzer) -> None:
        self._analyzer = analyzer
        self._analyze_password = AnalyzePassword(analyzer)
        self._lock = RLock()
        self._error_text = ""
        self._output_lines: list[str] = []
        self._submission_count = 0
        self._rejection_count = 0

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def submit(self, password: str) -> dict[str, Any]:
        result = self._analyze_password.execute(password=password)
        with self._lock:
            self._error_text = ""
            self._output_lines = []
            self._submission_count += 1

            if isinstance(result, AnalysisFailure):
                self._rejection_count += 1
                self._error_text = f"Error: {result.error}"
                logger.info("Submission rejected (%s)", result.kind)
            else:
                self._output_lines = [
                    f"The largest block is {result.run_length}.",
                    result.feedback.message,
                ]
                logger.info("Submission accepted, largest block %d", result.run_length)

            return self._view_locked()

    def analyze(self, password: str) -> dict[str, Any]:
        """Return the raw analysis payload without touching display state."""
        result = self._analyze_password.execute(password=password)
        with self._lock:
            self._submission_count += 1
            if isinstance(result, AnalysisFailure):
                self._rejection_count += 1
        return result.to_dict()

    def reset(self) -> dict[str, Any]:
        with self._lock:
            self._error_text = ""
            self._output_lines = []
            return self._view_locked()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def view(self) -> dict[str, Any]:
        with self._lock:
            return self._view_locked()

    def diagnostics(self, *, adapter_metadata: GuiAdapterMetadata) -> dict[str, Any]:
        policy = self._analyzer.policy
        with self._lock:
            return {
                "contract_version": CONTRACT_VERSION,
                **adapter_metadata.as_dict(),
                "min_length": policy.min_length,
                "max_length": policy.max_length,
                "block_threshold": policy.block_threshold,
                "submission_count": self._submission_count,
                "rejection_count": self._rejection_count,
            }

    @property
    def submission_count(self) -> int:
        with self._lock:
            return self._submission_count

    @property
    def rejection_count(self) -> int:
        with self._lock:
            return self._rejection_count

    def _view_locked(self) -> dict[str, Any]:
        return {
            "error": self._error_text,
            "output": list(self._output_lines),
            "submissions": self._submission_count,
        }
