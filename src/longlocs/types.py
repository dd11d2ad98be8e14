"""Type definitions for longlocs."""
from typing import TypedDict


class Violation(TypedDict):
    """A single line longer than the configured maximum."""

    path: str
    line: int
    length: int
    text: str
