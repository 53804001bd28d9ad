"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from chordfinder.cli import app

runner = CliRunner()


class TestIdentifyCommand:
    """Tests for `chord-finder identify`."""

    def test_names_dominant_seventh(self):
        result = runner.invoke(app, ["identify", "C E G Bb"])

        assert result.exit_code == 0
        assert "Best match: C7" in result.output

    def test_follows_input_accidentals(self):
        result = runner.invoke(app, ["identify", "Bb D F Ab"])

        assert result.exit_code == 0
        assert "Bb7" in result.output

    def test_force_flats(self):
        result = runner.invoke(app, ["identify", "A# D F", "--flats"])

        assert result.exit_code == 0
        assert "Best match: Bb" in result.output

    def test_shows_warnings(self):
        result = runner.invoke(app, ["identify", "C E G 42"])

        assert result.exit_code == 0
        assert 'Ignored "42"' in result.output

    def test_too_few_notes(self):
        result = runner.invoke(app, ["identify", "C"])

        assert result.exit_code == 1
        assert "at least two distinct notes" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["identify", "C E G", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["notes"] == [0, 4, 7]
        assert data["normalized_input"] == "0,4,7"
        assert data["candidates"][0]["name"] == "C"
        assert data["candidates"][0]["intervals_from_root"] == [0, 4, 7]

    def test_json_failure(self):
        result = runner.invoke(app, ["identify", "C", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"] == "insufficient_distinct_notes"


class TestSpellCommand:
    """Tests for `chord-finder spell`."""

    def test_spells_major_seventh(self):
        result = runner.invoke(app, ["spell", "Cmaj7"])

        assert result.exit_code == 0
        assert "C E G B" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["spell", "F#m7b5", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["intervals"] == [0, 3, 6, 10]
        assert data["normalized_symbol"] == "F#m7b5"
        assert data["root_pc"] == 6

    def test_bad_root(self):
        result = runner.invoke(app, ["spell", "H7"])

        assert result.exit_code == 1
        assert "Couldn't read the root note." in result.output


class TestTemplatesCommand:
    """Tests for `chord-finder templates`."""

    def test_lists_templates(self):
        result = runner.invoke(app, ["templates"])

        assert result.exit_code == 0
        assert "mMaj7" in result.output
        assert "dim7" in result.output
