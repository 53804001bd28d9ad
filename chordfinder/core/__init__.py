"""Core types and constants for Chord Finder."""

from .constants import (
    PITCH_NAMES,
    FLAT_PITCH_NAMES,
    LETTERS,
    NATURAL_PC,
    NOTE_TO_PC,
    MIN_DISTINCT_NOTES,
)
from .pitch import (
    reduce_pc,
    pc_to_name,
    note_name_to_pc,
    unique_pitch_classes,
    sorted_pitch_classes,
    relative_intervals,
)
from .results import ParseErrorKind, ParseFailure

__all__ = [
    "PITCH_NAMES",
    "FLAT_PITCH_NAMES",
    "LETTERS",
    "NATURAL_PC",
    "NOTE_TO_PC",
    "MIN_DISTINCT_NOTES",
    "reduce_pc",
    "pc_to_name",
    "note_name_to_pc",
    "unique_pitch_classes",
    "sorted_pitch_classes",
    "relative_intervals",
    "ParseErrorKind",
    "ParseFailure",
]
