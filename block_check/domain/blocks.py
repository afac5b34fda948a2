"""Scanning for runs of identical adjacent characters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Block:
    """One maximal run of a repeated character."""

    char: str
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def find_longest_block(candidate: str) -> Block | None:
    """Return the earliest run of greatest length, or None for an empty string."""
    if not candidate:
        return None

    best_start = 0
    best_length = 1
    current_start = 0
    current_length = 1

    for index in range(1, len(candidate)):
        if candidate[index] == candidate[index - 1]:
            current_length += 1
        else:
            current_start = index
            current_length = 1
        if current_length > best_length:
            best_start = current_start
            best_length = current_length

    return Block(char=candidate[best_start], start=best_start, length=best_length)


def longest_run(candidate: str) -> int:
    block = find_longest_block(candidate)
    if block is None:
        return 0
    return block.length
