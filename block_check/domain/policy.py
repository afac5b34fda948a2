"""Password policy rules applied by the analyzer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Length bounds, forbidden characters, and the decent-block threshold."""

    min_length: int = 8
    max_length: int = 12
    forbidden: str = " "
    block_threshold: int = 2

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )
        if self.block_threshold < 1:
            raise ValueError(f"block_threshold must be >= 1, got {self.block_threshold}")

    def accepts_length(self, length: int) -> bool:
        return self.min_length <= length <= self.max_length


DEFAULT_POLICY = PasswordPolicy()
