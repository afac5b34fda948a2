"""Domain rules for password block analysis."""

from block_check.domain.blocks import Block, find_longest_block, longest_run
from block_check.domain.errors import LengthError, ValidationError, WhitespaceError
from block_check.domain.feedback import Feedback, classify
from block_check.domain.policy import DEFAULT_POLICY, PasswordPolicy

__all__ = [
    "Block",
    "DEFAULT_POLICY",
    "Feedback",
    "LengthError",
    "PasswordPolicy",
    "ValidationError",
    "WhitespaceError",
    "classify",
    "find_longest_block",
    "longest_run",
]
