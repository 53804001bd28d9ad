"""Output layer - Render results as text.

This layer handles display naming of results:
- Sorted note lists with sharp or flat names
- Chord tones of a detected chord
"""

from .text import notes_list, chord_tones_from_root

__all__ = [
    "notes_list",
    "chord_tones_from_root",
]
