"""Use case: analyze one submitted password."""

from __future__ import annotations

from block_check.application.analyzer import AnalysisResult, PasswordAnalyzer


class AnalyzePassword:
    """Application use case returning the analysis for a candidate password."""

    def __init__(self, analyzer: PasswordAnalyzer) -> None:
        self._analyzer = analyzer

    def execute(self, *, password: str) -> AnalysisResult:
        return self._analyzer.analyze(password)
