"""Plain-text rendering of pitch-class lists and chord tones."""

from typing import Iterable

from ..core import pc_to_name, reduce_pc, sorted_pitch_classes

NOTE_SEPARATOR = "–"  # en dash


def notes_list(pitch_classes: Iterable[int], prefer_flats: bool = False) -> str:
    """Input notes in ascending pitch-class order, e.g. 'C–E–G–Bb'."""
    return NOTE_SEPARATOR.join(
        pc_to_name(pc, prefer_flats) for pc in sorted_pitch_classes(pitch_classes)
    )


def chord_tones_from_root(
    root_pc: int,
    intervals_from_root: Iterable[int],
    prefer_flats: bool = False,
) -> str:
    """Tones of a detected chord in interval order, e.g. 'C–E–G–Bb'."""
    return NOTE_SEPARATOR.join(
        pc_to_name(reduce_pc(root_pc + i), prefer_flats) for i in intervals_from_root
    )
