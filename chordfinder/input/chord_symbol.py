"""Chord symbol parsing - Turn a chord symbol into a root and interval formula.

The symbol is read left to right by a fixed sequence of prefix-consuming
steps:

    root -> [ø] -> quality -> [half-diminished marker] -> extension -> alterations

Within each step the rules are tried in the order they are listed and the
first match wins, so "maj" is always seen before "m" and "sus2"/"sus4"
before a bare "sus". Text no step understands is left unread.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..core import ParseErrorKind, ParseFailure, note_name_to_pc
from ..core.constants import (
    FLAT_GLYPH,
    SHARP_GLYPH,
    HALF_DIM_GLYPH,
    HALF_DIM_GLYPH_UPPER,
)

EMPTY_MESSAGE = "Type a chord symbol (e.g., C7, F#m7b5)."
ROOT_MESSAGE = "Couldn't read the root note."

_ROOT = re.compile(r"^([A-Ga-g])([#b]?)(.*)$")
_ALTERATION = re.compile(r"([b#])(5|9|11|13)")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ParsedChordSymbol:
    """Result of a successful chord-symbol parse."""

    root_pc: int
    intervals_from_root: List[int]  # Semitones above the root, sorted, contains 0
    normalized_symbol: str
    root_name: str = ""  # Root as written, e.g. "Bb"
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


ChordSymbolParseResult = Union[ParsedChordSymbol, ParseFailure]


@dataclass(frozen=True)
class PrefixRule:
    """A literal prefix that, when it starts the remaining text, is consumed.

    A rule with ``consumes=False`` still decides the step but leaves the
    text for the next step to read.
    """

    prefix: str
    value: str
    ignore_case: bool = True
    consumes: bool = True

    def matches(self, text: str) -> bool:
        head = text[:len(self.prefix)]
        if self.ignore_case:
            head = head.lower()
        return head == self.prefix

    def consume(self, text: str) -> str:
        if not self.consumes:
            return text
        return text[len(self.prefix):]


# Quality keywords, most specific first.
# "maj7" is major quality but belongs to the extension step.
QUALITY_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule("maj7", "maj", consumes=False),
    PrefixRule("maj", "maj"),
    PrefixRule("min", "min"),
    PrefixRule("m", "min", ignore_case=False),
    PrefixRule("dim", "dim"),
    PrefixRule("o", "dim", ignore_case=False),
    PrefixRule("aug", "aug"),
    PrefixRule("+", "aug", ignore_case=False),
    PrefixRule("sus2", "sus2"),
    PrefixRule("sus4", "sus4"),
    PrefixRule("sus", "sus4"),
)

# Markers swallowed after a half-diminished reading, in order
HALF_DIM_MARKERS: Tuple[PrefixRule, ...] = (
    PrefixRule("7b5", "7b5"),
    PrefixRule("7", "7", ignore_case=False),
)
REDUNDANT_FLAT_FIVE = PrefixRule("b5", "b5")

# Extensions; 9/11/13 stack on a minor seventh
EXTENSION_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule("maj7", "maj7"),
    PrefixRule("6", "6", ignore_case=False),
    PrefixRule("7", "7", ignore_case=False),
    PrefixRule("9", "9", ignore_case=False),
    PrefixRule("11", "11", ignore_case=False),
    PrefixRule("13", "13", ignore_case=False),
)
EXTENSION_INTERVALS = {
    "maj7": (11,),
    "6": (9,),
    "7": (10,),
    "9": (10, 14),
    "11": (10, 14, 17),
    "13": (10, 14, 17, 21),
}

TRIAD_INTERVALS = {
    "maj": [0, 4, 7],
    "min": [0, 3, 7],
    "dim": [0, 3, 6],
    "aug": [0, 4, 8],
    "sus2": [0, 2, 7],
    "sus4": [0, 5, 7],
}
HALF_DIM_INTERVALS = [0, 3, 6, 10]

# Semitones of an unaltered degree above the root
DEGREE_SEMITONES = {5: 7, 9: 14, 11: 17, 13: 21}


def normalize_symbol_text(text: str) -> str:
    """Strip whitespace and map unicode accidentals/half-diminished to one form."""
    s = text.strip()
    s = s.replace(FLAT_GLYPH, "b").replace(SHARP_GLYPH, "#")
    s = _WHITESPACE.sub("", s)
    return s.replace(HALF_DIM_GLYPH_UPPER, HALF_DIM_GLYPH)


def _first_match(rules: Tuple[PrefixRule, ...], text: str) -> Optional[PrefixRule]:
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def _add(intervals: List[int], value: int) -> List[int]:
    return intervals if value in intervals else intervals + [value]


def _replace_or_add(intervals: List[int], target: int, replacement: int) -> List[int]:
    if target in intervals:
        return [replacement if i == target else i for i in intervals]
    return intervals + [replacement]


def extension_from_intervals(intervals: List[int]) -> str:
    """Infer the extension text ("maj7", "13", ..., "6" or "") from a formula."""
    present = set(intervals)

    if 11 in present:
        return "maj7"
    if 10 in present:
        # Dominant stack, highest extension wins
        if 21 in present:
            return "13"
        if 17 in present:
            return "11"
        if 14 in present:
            return "9"
        return "7"
    if 9 in present:
        return "6"
    return ""


def _unique(items: List[str]) -> List[str]:
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def parse_chord_symbol(text: str) -> ChordSymbolParseResult:
    """
    Parse a chord symbol such as "C7", "Bbmaj7", "F#m7b5" or "G7(b9#11)".

    Args:
        text: Raw chord symbol

    Returns:
        ParsedChordSymbol on success, ParseFailure otherwise
    """
    s = normalize_symbol_text(text)
    if not s:
        return ParseFailure(ParseErrorKind.EMPTY_INPUT, EMPTY_MESSAGE)

    m = _ROOT.match(s)
    if not m:
        return ParseFailure(ParseErrorKind.UNPARSABLE_ROOT, ROOT_MESSAGE)

    letter = m.group(1).upper()
    accidental = m.group(2)
    rest = m.group(3)

    root_name = f"{letter}{accidental}"
    root_pc = note_name_to_pc(root_name)
    if root_pc is None:
        return ParseFailure(
            ParseErrorKind.UNKNOWN_ROOT, f'Unknown root note "{root_name}".'
        )

    warnings: List[str] = []

    # ---- Quality ----
    had_half_dim_glyph = rest.startswith(HALF_DIM_GLYPH)
    if had_half_dim_glyph:
        rest = rest[1:]

    quality = "maj"
    rule = _first_match(QUALITY_RULES, rest)
    if rule:
        quality = rule.value
        rest = rule.consume(rest)

    intervals = list(TRIAD_INTERVALS[quality])

    # ---- Half-diminished (m7b5 / ø7 / ø) ----
    is_half_dim = had_half_dim_glyph or (
        quality == "min" and HALF_DIM_MARKERS[0].matches(rest)
    )
    if is_half_dim:
        intervals = list(HALF_DIM_INTERVALS)
        marker = _first_match(HALF_DIM_MARKERS, rest)
        if marker:
            rest = marker.consume(rest)
        if REDUNDANT_FLAT_FIVE.matches(rest):
            rest = REDUNDANT_FLAT_FIVE.consume(rest)
    else:
        # ---- Extension ----
        rule = _first_match(EXTENSION_RULES, rest)
        if rule:
            for value in EXTENSION_INTERVALS[rule.value]:
                intervals = _add(intervals, value)
            rest = rule.consume(rest)

    # ---- Alterations ----
    if rest.startswith("(") and rest.endswith(")"):
        rest = rest[1:-1]

    alterations = []
    for alt in _ALTERATION.finditer(rest):
        sign = alt.group(1)
        degree = int(alt.group(2))

        base = DEGREE_SEMITONES[degree]
        adjusted = base - 1 if sign == "b" else base + 1

        intervals = _replace_or_add(intervals, base, adjusted)
        alterations.append(f"{sign}{degree}")

    intervals = sorted(set(intervals))

    if is_half_dim:
        quality_text = "m7b5"
    elif quality == "maj":
        quality_text = ""
    elif quality == "min":
        quality_text = "m"
    else:
        quality_text = quality

    ext_text = "" if is_half_dim else extension_from_intervals(intervals)
    alt_text = f"({''.join(_unique(alterations))})" if alterations else ""

    return ParsedChordSymbol(
        root_pc=root_pc,
        intervals_from_root=intervals,
        normalized_symbol=f"{root_name}{quality_text}{ext_text}{alt_text}",
        root_name=root_name,
        warnings=warnings,
    )
