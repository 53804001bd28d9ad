"""Inference layer - Musical understanding of parsed input.

- Chord naming from a pitch-class set (template matching)
- Enharmonic spelling of a chord formula from its root

Pipeline: pitch classes -> [templates] -> ranked chord names
          root + formula -> spelled chord tones
"""

from .templates import (
    ChordTemplate,
    TEMPLATES,
    EXTENSION_LABELS,
    ADD_LABELS,
    get_template,
)
from .chords import ChordDetector, Candidate, ScoringConfig, detect_chord
from .spelling import (
    RootSpelling,
    parse_root_spelling,
    accidental_text,
    spell_chord_tones,
)

__all__ = [
    # Templates
    "ChordTemplate",
    "TEMPLATES",
    "EXTENSION_LABELS",
    "ADD_LABELS",
    "get_template",
    # Chord detection
    "ChordDetector",
    "Candidate",
    "ScoringConfig",
    "detect_chord",
    # Spelling
    "RootSpelling",
    "parse_root_spelling",
    "accidental_text",
    "spell_chord_tones",
]
