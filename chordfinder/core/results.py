"""Structured parse results shared by the note and chord-symbol parsers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ParseErrorKind(Enum):
    """Why a parse could not produce a result."""
    EMPTY_INPUT = "empty_input"
    UNPARSABLE_ROOT = "unparsable_root"
    UNKNOWN_ROOT = "unknown_root"
    INSUFFICIENT_DISTINCT_NOTES = "insufficient_distinct_notes"


@dataclass
class ParseFailure:
    """A parse that failed, with a message meant for the user."""

    kind: ParseErrorKind
    message: str
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False
