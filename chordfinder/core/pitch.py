"""Pitch-class helpers - the octave-free unit every component works in."""

from typing import Iterable, List, Optional

import numpy as np

from .constants import FLAT_PITCH_NAMES, NOTE_TO_PC, PITCH_NAMES


def reduce_pc(value: int) -> int:
    """Reduce any semitone value into the 0-11 pitch-class range."""
    return int(value) % 12


def pc_to_name(pc: int, prefer_flats: bool = False) -> str:
    """Display name for a pitch class, e.g. 10 -> 'A#' or 'Bb'."""
    names = FLAT_PITCH_NAMES if prefer_flats else PITCH_NAMES
    return names[reduce_pc(pc)]


def note_name_to_pc(name: str) -> Optional[int]:
    """Look up a letter+accidental spelling (e.g. 'Bb'), None if not a known note."""
    return NOTE_TO_PC.get(name)


def unique_pitch_classes(pitch_classes: Iterable[int]) -> List[int]:
    """Reduce to pitch classes and drop repeats, keeping first-occurrence order."""
    seen = set()
    unique = []
    for pc in pitch_classes:
        pc = reduce_pc(pc)
        if pc not in seen:
            seen.add(pc)
            unique.append(pc)
    return unique


def sorted_pitch_classes(pitch_classes: Iterable[int]) -> List[int]:
    """Unique pitch classes in ascending order."""
    return sorted(unique_pitch_classes(pitch_classes))


def relative_intervals(root_pc: int, pitch_classes: Iterable[int]) -> List[int]:
    """
    Intervals of each pitch class above a hypothesised root.

    Args:
        root_pc: Root pitch class
        pitch_classes: Pitch classes, order is preserved

    Returns:
        List of semitone offsets in [0, 11], one per input pitch class
    """
    pcs = np.asarray(list(pitch_classes), dtype=int)
    if pcs.size == 0:
        return []
    return [int(i) for i in np.mod(pcs - root_pc, 12)]
