"""Global constants for Chord Finder."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLAT_PITCH_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Musical alphabet and the pitch class of each natural letter
LETTERS = ("C", "D", "E", "F", "G", "A", "B")
NATURAL_PC = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Every spelling accepted as a note name or chord root
NOTE_TO_PC = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Unicode glyphs normalised to ASCII before parsing
FLAT_GLYPH = "\u266d"  # ♭
SHARP_GLYPH = "\u266f"  # ♯
HALF_DIM_GLYPH = "\u00f8"  # ø
HALF_DIM_GLYPH_UPPER = "\u00d8"  # Ø

MIN_DISTINCT_NOTES = 2
