"""
Pitch primitives - the Note table.

The 12 chromatic pitch classes, ordered from A. Sharps are the only
spelling; arithmetic wraps modulo 12.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import UnknownNoteError

# Display names (module level to avoid IntEnum member issues)
NOTE_NAMES: tuple[str, ...] = (
    "A",
    "A#",
    "B",
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
)

_INDEX_BY_NAME: dict[str, int] = {name: i for i, name in enumerate(NOTE_NAMES)}


class Note(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), starting at A.

    Octave-independent. Internally we use sharp names (As, Cs, etc.);
    spell() gives the display form.
    """

    A = 0
    As = 1  # A#
    B = 2
    C = 3
    Cs = 4  # C#
    D = 5
    Ds = 6  # D#
    E = 7
    F = 8
    Fs = 9  # F#
    G = 10
    Gs = 11  # G#

    def transpose(self, semitones: int) -> Note:
        """Transpose by a number of semitones (positive or negative)."""
        return Note((self.value + semitones) % len(NOTE_NAMES))

    def spell(self) -> str:
        """Get the canonical sharp name."""
        return NOTE_NAMES[self.value]

    @property
    def is_natural(self) -> bool:
        """True for the 7 notes without an accidental."""
        return "#" not in self.spell()

    @classmethod
    def parse(cls, name: str | Note) -> Note:
        """Parse a note from its canonical spelling, e.g. 'C' or 'F#'."""
        if isinstance(name, Note):
            return name
        if not isinstance(name, str):
            raise UnknownNoteError(name)

        index = _INDEX_BY_NAME.get(name.strip())
        if index is None:
            raise UnknownNoteError(name)
        return cls(index)

    def __str__(self) -> str:
        return self.spell()


NATURAL_NOTES: tuple[Note, ...] = tuple(note for note in Note if note.is_natural)


def note_index(name: str | Note) -> int:
    """Chromatic index of a note name, in [0, 11]."""
    return Note.parse(name).value
