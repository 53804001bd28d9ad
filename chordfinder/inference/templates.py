"""Chord templates - The named interval patterns chords are matched against."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ChordTemplate:
    """A chord quality as intervals above the root (reduced to one octave)."""

    id: str
    label: str  # Appended to the root name, e.g. "m7" -> "Am7"
    intervals: Tuple[int, ...]
    important: Tuple[int, ...] = ()  # Tones whose absence hurts the reading most

    @property
    def size(self) -> int:
        return len(self.intervals)


# Ordered: generation order breaks score ties in the detector
TEMPLATES: Tuple[ChordTemplate, ...] = (
    # Triads
    ChordTemplate("maj", "", (0, 4, 7), (4, 7)),
    ChordTemplate("min", "m", (0, 3, 7), (3, 7)),
    ChordTemplate("dim", "dim", (0, 3, 6), (3, 6)),
    ChordTemplate("aug", "aug", (0, 4, 8), (4, 8)),
    ChordTemplate("sus2", "sus2", (0, 2, 7), (2, 7)),
    ChordTemplate("sus4", "sus4", (0, 5, 7), (5, 7)),
    # Sixths
    ChordTemplate("6", "6", (0, 4, 7, 9), (4, 9)),
    ChordTemplate("m6", "m6", (0, 3, 7, 9), (3, 9)),
    # Sevenths
    ChordTemplate("7", "7", (0, 4, 7, 10), (4, 10)),
    ChordTemplate("maj7", "maj7", (0, 4, 7, 11), (4, 11)),
    ChordTemplate("m7", "m7", (0, 3, 7, 10), (3, 10)),
    ChordTemplate("mMaj7", "m(maj7)", (0, 3, 7, 11), (3, 11)),
    ChordTemplate("m7b5", "m7♭5", (0, 3, 6, 10), (3, 6, 10)),
    ChordTemplate("dim7", "dim7", (0, 3, 6, 9), (3, 6, 9)),
    # Dominant stack (9 = 2, 11 = 5, 13 = 9 within the octave)
    ChordTemplate("9", "9", (0, 4, 7, 10, 2), (4, 10, 2)),
    ChordTemplate("11", "11", (0, 4, 7, 10, 2, 5), (4, 10, 5)),
    ChordTemplate("13", "13", (0, 4, 7, 10, 2, 5, 9), (4, 10, 9)),
)

# Templates that need some seventh in the input to be considered
EXTENDED_TEMPLATE_IDS = frozenset({"9", "11", "13"})

# Leftover tones when the chord already has a seventh
EXTENSION_LABELS: Dict[int, str] = {
    1: "♭9",
    2: "9",
    3: "♯9",
    5: "11",
    6: "♯11",
    8: "♭13",
    9: "13",
}

# Leftover tones on a chord without a seventh
ADD_LABELS: Dict[int, str] = {
    2: "add9",
    5: "add11",
    9: "add13",
}

_BY_ID = {t.id: t for t in TEMPLATES}


def get_template(template_id: str) -> ChordTemplate:
    """Look up a template by id. Raises KeyError for unknown ids."""
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise KeyError(f"Unknown chord template: {template_id!r}") from None
