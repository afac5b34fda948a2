"""Stateless password analyzer: validate, scan for the longest block, classify."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

from block_check.domain.blocks import Block, find_longest_block
from block_check.domain.blocks import longest_run as _scan_longest_run
from block_check.domain.errors import LengthError, ValidationError, WhitespaceError
from block_check.domain.feedback import Feedback
from block_check.domain.feedback import classify as _classify
from block_check.domain.policy import DEFAULT_POLICY, PasswordPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisFailure:
    """Rejected candidate with the first failing validation reason."""

    error: str
    kind: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


@dataclass(frozen=True, slots=True)
class AnalysisSuccess:
    """Accepted candidate with its largest block and feedback."""

    run_length: int
    feedback: Feedback
    block: Block

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"run_length": self.run_length, "feedback": self.feedback.message}


AnalysisResult = Union[AnalysisFailure, AnalysisSuccess]


class PasswordAnalyzer:
    """Applies one password policy; holds no per-call state."""

    __slots__ = ("policy",)

    def __init__(self, policy: PasswordPolicy = DEFAULT_POLICY) -> None:
        self.policy = policy

    def validate(self, candidate: str) -> str:
        """Return the candidate unchanged or raise the first failing check.

        Length is checked before content, so a short string containing a
        space reports a LengthError.
        """
        length = len(candidate)
        if not self.policy.accepts_length(length):
            raise LengthError(
                length=length,
                min_length=self.policy.min_length,
                max_length=self.policy.max_length,
            )

        for position, char in enumerate(candidate):
            if char in self.policy.forbidden:
                raise WhitespaceError(position=position)

        return candidate

    def longest_run(self, candidate: str) -> int:
        return _scan_longest_run(candidate)

    def classify(self, run_length: int) -> Feedback:
        return _classify(run_length, threshold=self.policy.block_threshold)

    def analyze(self, candidate: str) -> AnalysisResult:
        try:
            self.validate(candidate)
        except ValidationError as exc:
            logger.debug("Rejected candidate of length %d: %s", len(candidate), exc.kind)
            return AnalysisFailure(error=exc.message, kind=exc.kind)

        block = find_longest_block(candidate)
        if block is None:
            raise ValueError("Cannot scan an empty password for blocks")
        feedback = self.classify(block.length)
        logger.debug(
            "Analyzed candidate of length %d: largest block %d, reduce by %d",
            len(candidate),
            block.length,
            feedback.reduce_by,
        )
        return AnalysisSuccess(run_length=block.length, feedback=feedback, block=block)


_DEFAULT_ANALYZER = PasswordAnalyzer()


def validate(candidate: str) -> str:
    return _DEFAULT_ANALYZER.validate(candidate)


def longest_run(candidate: str) -> int:
    return _DEFAULT_ANALYZER.longest_run(candidate)


def classify(run_length: int) -> Feedback:
    return _DEFAULT_ANALYZER.classify(run_length)


def analyze(candidate: str) -> AnalysisResult:
    """Analyze a candidate under the default 8-12 character policy."""
    return _DEFAULT_ANALYZER.analyze(candidate)
