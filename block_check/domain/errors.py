"""Validation errors raised for rejected password candidates."""

from __future__ import annotations


class ValidationError(ValueError):
    """User-input error; the caller is expected to re-prompt."""

    kind = "invalid"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LengthError(ValidationError):
    kind = "length"

    def __init__(self, *, length: int, min_length: int, max_length: int) -> None:
        super().__init__(f"Password must be between {min_length} and {max_length} characters.")
        self.length = length
        self.min_length = min_length
        self.max_length = max_length


class WhitespaceError(ValidationError):
    kind = "whitespace"

    def __init__(self, *, position: int) -> None:
        super().__init__("Password cannot contain spaces.")
        self.position = position
