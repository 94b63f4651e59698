"""
Chord tables - diatonic triads of the natural major keys.

Labels are display strings: a trailing 'm' marks a minor triad and '/5b'
marks the diminished triad on the 7th degree. F major spells its 4th
degree as Bb, so labels are never parsed back into notes.
"""

from __future__ import annotations

from types import MappingProxyType

from .errors import NotANaturalNoteError
from .pitch import Note

MAJOR_KEY_CHORDS: MappingProxyType[Note, tuple[str, ...]] = MappingProxyType(
    {
        Note.A: ("A", "Bm", "C#m", "D", "E", "F#m", "G#/5b"),
        Note.B: ("B", "C#m", "D#m", "E", "F#", "G#m", "A#/5b"),
        Note.C: ("C", "Dm", "Em", "F", "G", "Am", "B/5b"),
        Note.D: ("D", "Em", "F#m", "G", "A", "Bm", "C#/5b"),
        Note.E: ("E", "F#m", "G#m", "A", "B", "C#m", "D#/5b"),
        Note.F: ("F", "Gm", "Am", "Bb", "C", "Dm", "E/5b"),
        Note.G: ("G", "Am", "Bm", "C", "D", "Em", "F#/5b"),
    }
)


def chords_for_major(root: str | Note) -> list[str]:
    """
    Get the 7 diatonic chords of a natural major key.

    Args:
        root: A natural note name (A-G, no accidental)

    Returns:
        Chord labels for degrees I to VII

    Raises:
        UnknownNoteError: if root is not a note name
        NotANaturalNoteError: if root carries an accidental
    """
    note = Note.parse(root)
    chords = MAJOR_KEY_CHORDS.get(note)
    if chords is None:
        raise NotANaturalNoteError(note.spell())
    return list(chords)
