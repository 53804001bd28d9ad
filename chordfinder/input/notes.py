"""Note input parsing - Turn free-form note text into a pitch-class set.

Accepts the ways people actually type notes:
- ASCII or unicode accidentals ("Bb", "B♭", "F#", "F♯")
- Word forms ("B flat", "B-flat", "c sharp")
- Lowercase names ("bb", "f#") and octave numbers ("C4", "Eb5")
- Any mix of spaces and commas as separators

Unreadable tokens never abort the parse; they are reported as warnings
alongside the result.
"""

import re
from dataclasses import dataclass, field
from typing import List, Union

from ..core import (
    MIN_DISTINCT_NOTES,
    ParseErrorKind,
    ParseFailure,
    note_name_to_pc,
    unique_pitch_classes,
)
from ..core.constants import FLAT_GLYPH, SHARP_GLYPH

_FLAT_WORD = re.compile(r"\b([A-Ga-g])(?:\s|-)*flat\b", re.IGNORECASE)
_SHARP_WORD = re.compile(r"\b([A-Ga-g])(?:\s|-)*sharp\b", re.IGNORECASE)
_LOWER_NOTE = re.compile(r"\b([a-g])([b#])\b")
_SEPARATORS = re.compile(r"[\s,]+")
_NOT_NOTE_CHAR = re.compile(r"[^A-Ga-g#b0-9]")
_NOTE_TOKEN = re.compile(r"^([A-Ga-g])([#b]{0,2})(\d+)?$")

EMPTY_MESSAGE = "Type some notes (e.g., C E G Bb)."
NO_NOTES_MESSAGE = "I couldn't find any notes in that input."
TOO_FEW_MESSAGE = "Please enter at least two distinct notes."


@dataclass
class ParsedNotes:
    """Result of a successful note parse."""

    notes: List[int]  # Pitch classes, first-occurrence order
    normalized_input: str  # e.g. "0,4,7,10"
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


NotesParseResult = Union[ParsedNotes, ParseFailure]


def normalize_note_text(text: str) -> str:
    """Rewrite glyphs, word accidentals and lowercase names to ASCII note tokens."""
    raw = text.strip()
    raw = raw.replace(FLAT_GLYPH, "b").replace(SHARP_GLYPH, "#")
    raw = _FLAT_WORD.sub(r"\1b", raw)
    raw = _SHARP_WORD.sub(r"\1#", raw)
    return _LOWER_NOTE.sub(lambda m: m.group(1).upper() + m.group(2), raw)


def tokenize_notes(text: str) -> List[str]:
    """Split normalised text into cleaned, non-empty tokens."""
    tokens = (_NOT_NOTE_CHAR.sub("", tok) for tok in _SEPARATORS.split(text))
    return [tok for tok in tokens if tok]


def parse_notes_input(text: str) -> NotesParseResult:
    """
    Parse free text into a deduplicated pitch-class list.

    Args:
        text: Raw user input (e.g. "C E G B-flat")

    Returns:
        ParsedNotes on success, ParseFailure otherwise. Both carry warnings
        for tokens that were skipped.
    """
    raw = normalize_note_text(text)
    if not raw:
        return ParseFailure(ParseErrorKind.EMPTY_INPUT, EMPTY_MESSAGE)

    tokens = tokenize_notes(raw)
    if not tokens:
        return ParseFailure(ParseErrorKind.EMPTY_INPUT, NO_NOTES_MESSAGE)

    pcs = []
    warnings = []

    for token in tokens:
        m = _NOTE_TOKEN.match(token)
        if not m:
            warnings.append(f'Ignored "{token}"')
            continue

        # Octave digits are accepted and dropped
        name = m.group(1).upper() + m.group(2)
        pc = note_name_to_pc(name)
        if pc is None:
            warnings.append(f'Unknown note "{token}"')
            continue
        pcs.append(pc)

    unique = unique_pitch_classes(pcs)
    if len(unique) < MIN_DISTINCT_NOTES:
        return ParseFailure(
            ParseErrorKind.INSUFFICIENT_DISTINCT_NOTES, TOO_FEW_MESSAGE, warnings
        )

    return ParsedNotes(
        notes=unique,
        normalized_input=",".join(str(pc) for pc in unique),
        warnings=warnings,
    )


def prefer_flats_from_input(text: str) -> bool:
    """True only when the raw text has strictly more 'b' than '#' characters."""
    return text.count("b") > text.count("#")
