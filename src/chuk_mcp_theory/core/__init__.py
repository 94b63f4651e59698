"""
Core theory primitives - the Radix layer.

These are the fixed tables and arithmetic everything else composes on:
- Note: The 12 chromatic pitch classes (0-11), starting at A
- IntervalName: Named intervals and their semitone distances
- Step / TonePattern: Whole/half step patterns and scale construction
- ModeName: The Greek modes and their lookup tables
- MAJOR_KEY_CHORDS: Diatonic chords of the natural major keys
"""

from chuk_mcp_theory.core.chord import MAJOR_KEY_CHORDS, chords_for_major
from chuk_mcp_theory.core.errors import (
    NotANaturalNoteError,
    TheoryError,
    UnknownIntervalError,
    UnknownModeError,
    UnknownNoteError,
)
from chuk_mcp_theory.core.interval import (
    SEMITONES,
    IntervalName,
    relative_note,
    resolve,
    semitones_for,
)
from chuk_mcp_theory.core.mode import (
    DEGREE_PATTERNS,
    QUIRKS,
    TONAL_SIGNATURES,
    ModeName,
    degree_pattern_for_mode,
    mode_pattern,
    quirk_for_mode,
    tonal_signature_for_mode,
)
from chuk_mcp_theory.core.pitch import NATURAL_NOTES, NOTE_NAMES, Note, note_index
from chuk_mcp_theory.core.scale import MAJOR_PATTERN, Step, TonePattern, build_scale

__all__ = [
    # Pitch
    "Note",
    "NOTE_NAMES",
    "NATURAL_NOTES",
    "note_index",
    # Interval
    "IntervalName",
    "SEMITONES",
    "semitones_for",
    "resolve",
    "relative_note",
    # Scale
    "Step",
    "TonePattern",
    "MAJOR_PATTERN",
    "build_scale",
    # Chord
    "MAJOR_KEY_CHORDS",
    "chords_for_major",
    # Mode
    "ModeName",
    "DEGREE_PATTERNS",
    "QUIRKS",
    "TONAL_SIGNATURES",
    "degree_pattern_for_mode",
    "quirk_for_mode",
    "tonal_signature_for_mode",
    "mode_pattern",
    # Errors
    "TheoryError",
    "UnknownNoteError",
    "UnknownIntervalError",
    "UnknownModeError",
    "NotANaturalNoteError",
]
