"""Comprehensive tests for chord detection.

Tests cover:
- Template library shape and lookup
- Scoring of complete, incomplete and decorated chords
- Tie-breaking by root order and template order
- Extended-template gating and the sparsity gate
- Result limits and name uniqueness
"""

import dataclasses

import pytest

from chordfinder.core import pc_to_name
from chordfinder.inference import (
    ADD_LABELS,
    EXTENSION_LABELS,
    TEMPLATES,
    Candidate,
    ChordDetector,
    ScoringConfig,
    detect_chord,
    get_template,
)


def flat_names(pc):
    return pc_to_name(pc, prefer_flats=True)


# ============================================================================
# Template Library Tests
# ============================================================================

class TestTemplates:
    """Tests for the chord template library."""

    def test_template_order(self):
        ids = [t.id for t in TEMPLATES]
        assert ids == [
            "maj", "min", "dim", "aug", "sus2", "sus4",
            "6", "m6",
            "7", "maj7", "m7", "mMaj7", "m7b5", "dim7",
            "9", "11", "13",
        ]

    def test_templates_contain_root(self):
        for template in TEMPLATES:
            assert 0 in template.intervals

    def test_important_subset(self):
        for template in TEMPLATES:
            assert set(template.important) <= set(template.intervals)

    def test_get_template(self):
        template = get_template("m7b5")
        assert template.label == "m7♭5"
        assert template.intervals == (0, 3, 6, 10)

    def test_unknown_template(self):
        with pytest.raises(KeyError):
            get_template("maj13")

    def test_templates_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            TEMPLATES[0].label = "M"

    def test_label_tables(self):
        assert EXTENSION_LABELS[1] == "♭9"
        assert EXTENSION_LABELS[6] == "♯11"
        assert ADD_LABELS == {2: "add9", 5: "add11", 9: "add13"}


# ============================================================================
# Chord Detection Tests
# ============================================================================

class TestChordDetector:
    """Tests for ChordDetector."""

    def test_detector_creation(self):
        """Test ChordDetector can be instantiated."""
        detector = ChordDetector()
        assert detector is not None
        assert hasattr(detector, 'detect')
        assert detector.config.max_candidates == 6

    def test_dominant_seventh(self):
        """Test C E G Bb is named C7."""
        candidates = detect_chord([0, 4, 7, 10], flat_names)
        best = candidates[0]

        assert isinstance(best, Candidate)
        assert best.name == "C7"
        assert best.template_id == "7"
        assert best.root_pc == 0
        assert best.score == 54
        assert best.missing == []
        assert best.extras == []
        assert best.intervals_from_root == [0, 4, 7, 10]

    def test_major_triad(self):
        candidates = detect_chord([0, 4, 7])

        assert candidates[0].name == "C"
        assert candidates[0].score == 42

    def test_inversion_names_root(self):
        """Test the root is found whatever note comes first."""
        candidates = detect_chord([4, 7, 0])

        assert candidates[0].name == "C"
        assert candidates[0].intervals_from_root == [0, 4, 7]

    def test_minor_seventh_with_flats(self):
        candidates = detect_chord([2, 5, 9, 0], flat_names)
        assert candidates[0].name == "Dm7"

    def test_root_naming_callback(self):
        """Test the caller's naming function decides sharps or flats."""
        assert detect_chord([10, 2, 5])[0].name == "A#"
        assert detect_chord([10, 2, 5], flat_names)[0].name == "Bb"

    def test_diminished_seventh_symmetry(self):
        """Test every root of a dim7 chord scores the same, in input order."""
        candidates = detect_chord([0, 3, 6, 9])

        top = candidates[:4]
        assert [c.name for c in top] == ["Cdim7", "D#dim7", "F#dim7", "Adim7"]
        assert [c.root_pc for c in top] == [0, 3, 6, 9]
        assert len({c.score for c in top}) == 1
        assert all(c.score < top[0].score for c in candidates[4:])

    def test_tie_break_follows_input_order(self):
        """Test equal scores keep root-iteration order.

        C E G Bb Db is both C7(b9) and a diminished seventh on E, G, Bb or
        Db; all five readings score 50.
        """
        c_first = detect_chord([0, 4, 7, 10, 1])
        db_first = detect_chord([1, 0, 4, 7, 10])

        assert c_first[0].name == "C7(♭9)"
        assert c_first[0].score == 50
        assert db_first[0].name == "C#dim7"
        assert db_first[0].score == 50

    def test_tension_decoration(self):
        """Test leftover tones are labelled as tensions when a seventh is present."""
        candidates = detect_chord([0, 4, 7, 10, 6])
        names = [c.name for c in candidates]

        assert "C7(♯11)" in names

    def test_add_decoration(self):
        """Test leftover tones are labelled as added tones without a seventh."""
        candidates = detect_chord([0, 4, 7, 2])
        best = candidates[0]

        assert best.name == "C(add9)"
        assert best.template_id == "maj"
        assert best.extras == [2]

    def test_extended_needs_seventh(self):
        """Test a triad plus a ninth is never named as a dominant ninth."""
        candidates = detect_chord([0, 4, 7, 2])

        for c in candidates:
            if c.root_pc == 0:
                assert c.template_id not in {"9", "11", "13"}

    def test_dominant_ninth(self):
        candidates = detect_chord([0, 4, 7, 10, 2])

        assert candidates[0].name == "C9"
        assert candidates[0].template_id == "9"

    def test_missing_fifth_tolerated(self):
        """Test a seventh chord without its fifth is still found."""
        candidates = detect_chord([7, 11, 5])
        best = candidates[0]

        assert best.name == "G7"
        assert best.missing == [7]
        # 3 matched, ordinary fifth missing, third present
        assert best.score == 32

    def test_missing_important_tone_penalised(self):
        """Test a missing defining tone costs more than a missing ordinary one."""
        candidates = detect_chord([7, 11, 5])
        by_name = {c.name: c for c in candidates}

        # G triad loses its important fifth and carries the seventh as extra
        assert by_name["G"].missing == [7]
        assert by_name["G"].score == 8

    def test_triad_missing_important_fifth(self):
        candidates = detect_chord([0, 4])

        assert [c.name for c in candidates] == ["C", "Caug", "Eaug", "C6", "C7", "Cmaj7"]
        assert candidates[0].missing == [7]
        assert candidates[0].score == 12
        assert candidates[2].score == 6

    def test_important_penalty_configurable(self):
        detector = ChordDetector(config=ScoringConfig(missing_important_penalty=30))
        best = detector.detect([0, 4])[0]

        assert best.name == "C"
        assert best.score == 0

    def test_extended_allowed_by_major_seventh(self):
        """Test a major seventh alone opens the 9/11/13 templates."""
        detector = ChordDetector(config=ScoringConfig(max_candidates=100))
        candidates = detector.detect([0, 4, 7, 11, 2])

        ninths = [c for c in candidates if c.template_id == "9" and c.root_pc == 0]
        assert len(ninths) == 1
        assert ninths[0].missing == [10]
        assert ninths[0].score == 32

    def test_sparsity_gate(self):
        """Test triads missing two tones are dropped."""
        candidates = detect_chord([0, 1])

        for c in candidates:
            assert len(c.missing) <= 2
            if len(get_template(c.template_id).intervals) <= 3:
                assert len(c.missing) <= 1

    def test_pitch_classes_reduced(self):
        """Test values outside 0-11 and repeats are normalised."""
        candidates = detect_chord([12, 16, 19, 24])
        assert candidates[0].name == "C"

    def test_empty_input(self):
        assert detect_chord([]) == []

    def test_single_note_yields_nothing(self):
        assert detect_chord([0]) == []

    @pytest.mark.parametrize("pcs", [
        [0, 4, 7],
        [0, 3, 6, 9],
        [0, 4, 8],
        [0, 2, 4, 5, 7, 9, 11],
        [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
        [0, 6],
        [11, 3, 6, 9, 2],
    ])
    def test_result_limits(self, pcs):
        """Test at most six results, all with distinct names."""
        candidates = detect_chord(pcs)
        names = [c.name for c in candidates]

        assert 0 <= len(candidates) <= 6
        assert len(names) == len(set(names))

    def test_sorted_by_score(self):
        candidates = detect_chord([0, 4, 7, 11, 2])
        scores = [c.score for c in candidates]
        assert scores == sorted(scores, reverse=True)

    def test_custom_config(self):
        """Test scoring settings are taken from ScoringConfig."""
        detector = ChordDetector(config=ScoringConfig(max_candidates=2))
        assert len(detector.detect([0, 3, 6, 9])) == 2

        detector = ChordDetector(config=ScoringConfig(tertian_bonus=0))
        assert detector.detect([0, 4, 7, 10])[0].score == 48
