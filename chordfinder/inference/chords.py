"""Chord detection - Name the chord(s) a pitch-class set most likely spells.

Implements template matching with:
- Every input pitch class tried as the root
- Integer scoring that rewards matched tones and penalises missing/extra ones
- Heavier penalties when a template's defining tones are absent
- A sparsity gate so thin matches are never reported
- Decorated names for leftover tones ("C7(♭9)", "C(add9)")

Ranking is deterministic: equal scores keep the order in which they were
generated (roots in input order, then templates in table order).
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Set, Tuple

from ..core import pc_to_name, relative_intervals, unique_pitch_classes
from .templates import (
    ADD_LABELS,
    EXTENDED_TEMPLATE_IDS,
    EXTENSION_LABELS,
    TEMPLATES,
    ChordTemplate,
)

RootNameFn = Callable[[int], str]


@dataclass
class Candidate:
    """A named chord reading of the input, with how well it fits."""
    root_pc: int
    name: str
    template_id: str
    score: int
    missing: List[int] = field(default_factory=list)
    extras: List[int] = field(default_factory=list)
    intervals_from_root: List[int] = field(default_factory=list)


@dataclass
class ScoringConfig:
    """Weights and limits for template scoring.

    Attributes:
        match_reward: Added for each template tone present (default: 12)
        missing_important_penalty: Subtracted per missing important tone (default: 18)
        missing_penalty: Subtracted per missing ordinary tone (default: 10)
        extra_penalty: Subtracted per input tone outside the template (default: 4)
        tertian_bonus: Added when the input holds a third above the root (default: 6)
        tertian_intervals: Intervals that earn the tertian bonus (default: 3, 4)
        seventh_intervals: Intervals that count as "has a seventh" (default: 10, 11)
        max_missing_triad: Missing tones tolerated by 3-note templates (default: 1)
        max_missing_larger: Missing tones tolerated by larger templates (default: 2)
        max_candidates: Maximum results returned (default: 6)
    """

    match_reward: int = 12
    missing_important_penalty: int = 18
    missing_penalty: int = 10
    extra_penalty: int = 4
    tertian_bonus: int = 6
    tertian_intervals: Tuple[int, ...] = (3, 4)
    seventh_intervals: Tuple[int, ...] = (10, 11)
    max_missing_triad: int = 1
    max_missing_larger: int = 2
    max_candidates: int = 6


class ChordDetector:
    """Detect chord names from a set of pitch classes.

    Features:
    - Template matching against the chord template library
    - Tolerance for missing or extra notes
    - Extended (9/11/13) readings only when a seventh is present
    - Deterministic ranking with name-level deduplication
    """

    def __init__(
        self,
        templates: Tuple[ChordTemplate, ...] = TEMPLATES,
        config: Optional[ScoringConfig] = None,
    ):
        """
        Initialize ChordDetector.

        Args:
            templates: Templates to match, in tie-break order
            config: Optional ScoringConfig, defaults to the standard weights
        """
        self.templates = templates
        self.config = config if config is not None else ScoringConfig()

    def detect(
        self,
        pitch_classes: Iterable[int],
        root_name_fn: Optional[RootNameFn] = None,
    ) -> List[Candidate]:
        """
        Rank chord names for a pitch-class set.

        Args:
            pitch_classes: Pitch classes; reduced mod 12 and deduplicated,
                           their order decides tie-breaks between roots
            root_name_fn: Maps a root pitch class to its display name
                          (defaults to sharp names)

        Returns:
            Up to ``max_candidates`` candidates, best first, names unique
        """
        pcs = unique_pitch_classes(pitch_classes)
        if not pcs:
            return []

        if root_name_fn is None:
            root_name_fn = pc_to_name

        candidates = self._get_chord_candidates(pcs, root_name_fn)

        # list.sort is stable, so ties keep generation order
        candidates.sort(key=lambda c: c.score, reverse=True)

        seen = set()
        unique = []
        for candidate in candidates:
            if candidate.name in seen:
                continue
            seen.add(candidate.name)
            unique.append(candidate)
            if len(unique) >= self.config.max_candidates:
                break

        return unique

    def _get_chord_candidates(
        self,
        pcs: List[int],
        root_name_fn: RootNameFn,
    ) -> List[Candidate]:
        """
        Score every (root, template) pairing that passes the gates.
        """
        candidates = []

        for root_pc in pcs:
            rel = relative_intervals(root_pc, pcs)
            rel_set = set(rel)

            for template in self.templates:
                if template.id in EXTENDED_TEMPLATE_IDS and not self._has_seventh(rel_set):
                    continue

                score, missing, extras = self._score_chord_match(template, rel)

                if len(missing) > self._max_missing(template):
                    continue

                candidates.append(Candidate(
                    root_pc=root_pc,
                    name=self.build_name(root_name_fn(root_pc), template, rel),
                    template_id=template.id,
                    score=score,
                    missing=missing,
                    extras=extras,
                    intervals_from_root=sorted(rel),
                ))

        return candidates

    def _score_chord_match(
        self,
        template: ChordTemplate,
        rel: List[int],
    ) -> Tuple[int, List[int], List[int]]:
        """
        Score how well relative intervals match a chord template.

        Returns:
            (score, missing_intervals, extra_intervals)
        """
        cfg = self.config
        rel_set = set(rel)
        template_set = set(template.intervals)
        important = set(template.important)

        missing = [i for i in template.intervals if i not in rel_set]
        extras = [i for i in rel if i not in template_set]

        score = cfg.match_reward * sum(1 for i in template.intervals if i in rel_set)

        for interval in missing:
            if interval in important:
                score -= cfg.missing_important_penalty
            else:
                score -= cfg.missing_penalty

        score -= cfg.extra_penalty * len(extras)

        if any(i in rel_set for i in cfg.tertian_intervals):
            score += cfg.tertian_bonus

        return score, missing, extras

    def _max_missing(self, template: ChordTemplate) -> int:
        if template.size <= 3:
            return self.config.max_missing_triad
        return self.config.max_missing_larger

    def _has_seventh(self, rel_set: Set[int]) -> bool:
        return any(i in rel_set for i in self.config.seventh_intervals)

    def build_name(
        self,
        root_name: str,
        template: ChordTemplate,
        rel: List[int],
    ) -> str:
        """
        Root name + template label, plus leftover tones in parentheses.

        Leftovers are labelled as tensions ("♭9", "♯11") when the input has a
        seventh, as added tones ("add9") otherwise. Tones without a label
        are left out of the name.
        """
        name = f"{root_name}{template.label}"

        template_set = set(template.intervals)
        labels = EXTENSION_LABELS if self._has_seventh(set(rel)) else ADD_LABELS

        decorations = []
        for interval in rel:
            if interval in template_set:
                continue
            label = labels.get(interval)
            if label and label not in decorations:
                decorations.append(label)

        if decorations:
            name += f"({','.join(decorations)})"
        return name


def detect_chord(
    pitch_classes: Iterable[int],
    root_name_fn: Optional[RootNameFn] = None,
) -> List[Candidate]:
    """Rank chord names for a pitch-class set with the default detector."""
    return ChordDetector().detect(pitch_classes, root_name_fn)
