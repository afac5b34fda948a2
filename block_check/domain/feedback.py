"""Feedback derived from the longest block length."""

from __future__ import annotations

from dataclasses import dataclass

DECENT_MESSAGE = "This is a decent password."


@dataclass(frozen=True, slots=True)
class Feedback:
    """Advice shown to the user for one analyzed password."""

    run_length: int
    reduce_by: int
    message: str

    @property
    def is_decent(self) -> bool:
        return self.reduce_by == 0


def classify(run_length: int, threshold: int = 2) -> Feedback:
    if run_length > threshold:
        reduce_by = run_length - threshold
        return Feedback(
            run_length=run_length,
            reduce_by=reduce_by,
            message=f"Please reduce the block by {reduce_by} characters.",
        )
    return Feedback(run_length=run_length, reduce_by=0, message=DECENT_MESSAGE)
