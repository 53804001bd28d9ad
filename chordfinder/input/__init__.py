"""Input layer - Read what the user typed.

- Free-form note lists ("C E G Bb", "c, e-flat, g") -> pitch-class sets
- Chord symbols ("F#m7b5", "G7(b9)") -> root + interval formula
"""

from .notes import (
    ParsedNotes,
    parse_notes_input,
    prefer_flats_from_input,
)
from .chord_symbol import (
    ParsedChordSymbol,
    parse_chord_symbol,
)

__all__ = [
    "ParsedNotes",
    "parse_notes_input",
    "prefer_flats_from_input",
    "ParsedChordSymbol",
    "parse_chord_symbol",
]
