"""
Interval primitives - named intervals and note resolution.

Named intervals are fixed semitone distances above a root. Resolving an
interval against a root note wraps around the 12-note table.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .errors import UnknownIntervalError
from .pitch import NOTE_NAMES, Note


class IntervalName(str, Enum):
    """The named intervals used for interval facts, in table order."""

    THIRD = "third"
    FIFTH = "fifth"
    SEVENTH = "seventh"
    NINTH = "ninth"
    ELEVENTH = "eleventh"
    THIRTEENTH = "thirteenth"

    @property
    def semitones(self) -> int:
        """Semitone distance above the root."""
        return SEMITONES[self]

    @classmethod
    def parse(cls, name: str | IntervalName) -> IntervalName:
        """Parse an interval from its name, e.g. 'fifth'."""
        if isinstance(name, IntervalName):
            return name
        if not isinstance(name, str):
            raise UnknownIntervalError(name)
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownIntervalError(name) from None

    def __str__(self) -> str:
        return self.value


SEMITONES: MappingProxyType[IntervalName, int] = MappingProxyType(
    {
        IntervalName.THIRD: 4,
        IntervalName.FIFTH: 7,
        IntervalName.SEVENTH: 10,
        IntervalName.NINTH: 13,
        IntervalName.ELEVENTH: 16,
        IntervalName.THIRTEENTH: 19,
    }
)


def semitones_for(interval: str | IntervalName) -> int:
    """
    Get the semitone distance of a named interval.

    Raises:
        UnknownIntervalError: if the name is not a known interval
    """
    return IntervalName.parse(interval).semitones


def relative_note(root: str | Note, semitones: int) -> str:
    """
    Get the note a number of semitones above a root.

    Args:
        root: Root note name
        semitones: Non-negative offset in semitones

    Returns:
        The resulting note name, wrapped into the 12-note table
    """
    if semitones < 0:
        raise ValueError(f"Semitone offset must be non-negative, got {semitones}")
    root_note = Note.parse(root)
    return NOTE_NAMES[(root_note.value + semitones) % len(NOTE_NAMES)]


def resolve(root: str | Note, interval: str | IntervalName) -> str:
    """
    Resolve a named interval above a root note.

    Example:
        resolve("C", "seventh") == "A#"
    """
    return relative_note(root, semitones_for(interval))
