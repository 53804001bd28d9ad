"""Chord Finder - Name chords from notes, spell notes from chord symbols.

Architecture Layers:
    1. core/       - Pitch-class helpers, note tables, parse failures
    2. input/      - Note-list and chord-symbol parsing
    3. inference/  - Chord templates, chord detection, enharmonic spelling
    4. output/     - Text rendering of note lists and chord tones
"""

__version__ = "0.1.0"

# Core types
from .core import ParseErrorKind, ParseFailure, pc_to_name

# Input layer
from .input import (
    ParsedNotes,
    ParsedChordSymbol,
    parse_notes_input,
    parse_chord_symbol,
    prefer_flats_from_input,
)

# Inference layer
from .inference import (
    ChordTemplate,
    TEMPLATES,
    ChordDetector,
    Candidate,
    ScoringConfig,
    detect_chord,
    spell_chord_tones,
)

# Output layer
from .output import notes_list, chord_tones_from_root

__all__ = [
    # Core
    "ParseErrorKind",
    "ParseFailure",
    "pc_to_name",
    # Input
    "ParsedNotes",
    "ParsedChordSymbol",
    "parse_notes_input",
    "parse_chord_symbol",
    "prefer_flats_from_input",
    # Inference
    "ChordTemplate",
    "TEMPLATES",
    "ChordDetector",
    "Candidate",
    "ScoringConfig",
    "detect_chord",
    "spell_chord_tones",
    # Output
    "notes_list",
    "chord_tones_from_root",
]
