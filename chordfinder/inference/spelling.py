"""Enharmonic spelling - Write chord tones with the right letter names.

A chord tone's letter is a fixed number of letter steps above the root letter
(a third is always two letters up, a ninth one letter up), and the
accidental is whatever makes that letter land on the right pitch class.
Both sixths and minor sevenths sit five letters up, so an Ab7 is spelled
"Ab C Eb F#" and a C7 "C E G A#".
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from ..core import LETTERS, NATURAL_PC, reduce_pc

_ROOT_SPELLING = re.compile(r"^([A-Ga-g])([#b]{0,2})$")

# Semitones above the root (mod 24) -> letters above the root letter
DEGREE_STEPS = {
    0: 0,   # 1
    1: 1,   # b2 / b9
    2: 1,   # 2 / 9
    3: 2,   # b3
    4: 2,   # 3
    5: 3,   # 4 / 11
    6: 3,   # #4 / #11
    7: 4,   # 5
    8: 4,   # #5
    9: 5,   # 6 / 13
    10: 5,  # b7, spelled as #6
    11: 6,  # 7
    13: 1,  # b9
    14: 1,  # 9
    15: 2,  # #9
    16: 2,
    17: 3,  # 11
    18: 3,  # #11
    20: 5,  # b13
    21: 5,  # 13
}

MAX_ACCIDENTALS = 2


@dataclass(frozen=True)
class RootSpelling:
    """A parsed root spelling such as 'Eb' or 'F##'."""
    letter: str
    accidental: str
    pc: int


def parse_root_spelling(text: str) -> Optional[RootSpelling]:
    """Parse a letter with up to two accidentals, None if unreadable."""
    m = _ROOT_SPELLING.match(text.strip())
    if not m:
        return None

    letter = m.group(1).upper()
    accidental = m.group(2)

    pc = NATURAL_PC[letter]
    for ch in accidental:
        pc += 1 if ch == "#" else -1

    return RootSpelling(letter=letter, accidental=accidental, pc=reduce_pc(pc))


def interval_to_degree_steps(interval: int) -> int:
    """Letters between the root and the tone an interval names (0-6)."""
    return DEGREE_STEPS.get(interval % 24, 0)


def accidental_text(delta: int) -> str:
    """Render a semitone offset from the natural letter: -1 -> 'b', 2 -> '##'."""
    if delta >= 0:
        return "#" * delta
    return "b" * -delta


def spell_note(letter: str, target_pc: int) -> str:
    """Spell a pitch class on a given letter with the nearest accidental."""
    diff = (target_pc - NATURAL_PC[letter]) % 12

    # Shortest signed distance, +6 for the tritone
    delta = diff - 12 if diff > 6 else diff
    delta = max(-MAX_ACCIDENTALS, min(MAX_ACCIDENTALS, delta))

    return f"{letter}{accidental_text(delta)}"


def spell_chord_tones(root_symbol: str, intervals_from_root: Iterable[int]) -> str:
    """
    Spell the tones of a chord from its root spelling and interval formula.

    Args:
        root_symbol: Root as typed, e.g. "Bb", "f#", "C##"
        intervals_from_root: Semitones above the root (compound intervals allowed)

    Returns:
        Space-separated note names in ascending interval order,
        or "" if the root cannot be read
    """
    root = parse_root_spelling(root_symbol)
    if root is None:
        return ""

    root_index = LETTERS.index(root.letter)

    spelled = []
    for interval in sorted(set(intervals_from_root)):
        target_pc = reduce_pc(root.pc + interval)
        letter = LETTERS[(root_index + interval_to_degree_steps(interval)) % 7]
        spelled.append(spell_note(letter, target_pc))

    return " ".join(spelled)
