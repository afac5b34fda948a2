"""Password checker reporting the largest block of identical adjacent characters."""

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
from block_check.domain.errors import LengthError, ValidationError, WhitespaceError
from block_check.domain.policy import DEFAULT_POLICY, PasswordPolicy

__all__ = [
    "AnalysisFailure",
    "AnalysisResult",
    "AnalysisSuccess",
    "AnalyzePassword",
    "DEFAULT_POLICY",
    "LengthError",
    "PasswordAnalyzer",
    "PasswordPolicy",
    "ValidationError",
    "WhitespaceError",
    "analyze",
    "classify",
    "longest_run",
    "validate",
]
