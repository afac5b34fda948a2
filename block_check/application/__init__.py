"""Application use cases for the password block checker."""

from block_check.application.analyze_password import AnalyzePassword
from block_check.application.analyzer import (
    AnalysisFailure,
    AnalysisResult,
    AnalysisSuccess,
    PasswordAnalyzer,
    analyze,
    classify,
    longest_run,
    validate,
)

__all__ = [
    "AnalysisFailure",
    "AnalysisResult",
    "AnalysisSuccess",
    "AnalyzePassword",
    "PasswordAnalyzer",
    "analyze",
    "classify",
    "longest_run",
    "validate",
]
