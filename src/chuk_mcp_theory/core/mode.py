"""
Mode tables - the 7 Greek modes.

Each mode carries three hand-authored attributes: its degree pattern
relative to the major scale, a mood description and a tonal signature.
Degree labels read 'T' for the tonic, then the degree number with a
'b' or '#' suffix where it departs from major.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from .errors import UnknownModeError
from .scale import MAJOR_PATTERN, TonePattern

# Alternate spellings accepted on input
_ALIASES: dict[str, str] = {"lydian": "lidian"}


class ModeName(str, Enum):
    """The Greek modes, in order of their starting degree in the major scale."""

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LIDIAN = "lidian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"

    @property
    def degree(self) -> int:
        """Major-scale degree the mode starts on (1-7)."""
        return list(ModeName).index(self) + 1

    @classmethod
    def parse(cls, name: str | ModeName) -> ModeName:
        """Parse a mode from its name, e.g. 'dorian'."""
        if isinstance(name, ModeName):
            return name
        if not isinstance(name, str):
            raise UnknownModeError(name)
        key = name.strip().lower()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise UnknownModeError(name) from None

    def __str__(self) -> str:
        return self.value


DEGREE_PATTERNS: MappingProxyType[ModeName, tuple[str, ...]] = MappingProxyType(
    {
        ModeName.IONIAN: ("T", "2", "3", "4", "5", "6", "7"),
        ModeName.DORIAN: ("T", "2", "3b", "4", "5", "6", "7b"),
        ModeName.PHRYGIAN: ("T", "2b", "3b", "4", "5", "6b", "7b"),
        ModeName.LIDIAN: ("T", "2", "3", "4#", "5", "6", "7"),
        ModeName.MIXOLYDIAN: ("T", "2", "3", "4", "5", "6", "7b"),
        ModeName.AEOLIAN: ("T", "2", "3b", "4", "5", "6b", "7b"),
        ModeName.LOCRIAN: ("T", "2b", "3b", "4", "5b", "6b", "7b"),
    }
)

QUIRKS: MappingProxyType[ModeName, str] = MappingProxyType(
    {
        ModeName.IONIAN: "Bright and resolved, the reference major sound",
        ModeName.DORIAN: "Minor with a raised 6th, soulful and jazzy",
        ModeName.PHRYGIAN: "Minor with a flat 2nd, dark and Spanish-sounding",
        ModeName.LIDIAN: "Major with a raised 4th, dreamy and floating",
        ModeName.MIXOLYDIAN: "Major with a flat 7th, bluesy rock dominant",
        ModeName.AEOLIAN: "The natural minor, sad and melancholic",
        ModeName.LOCRIAN: "Diminished tonic, unstable and tense",
    }
)

TONAL_SIGNATURES: MappingProxyType[ModeName, str] = MappingProxyType(
    {
        ModeName.IONIAN: "Major, natural 7th",
        ModeName.DORIAN: "Minor, major 6th",
        ModeName.PHRYGIAN: "Minor, flat 2nd",
        ModeName.LIDIAN: "Major, sharp 4th",
        ModeName.MIXOLYDIAN: "Major, flat 7th",
        ModeName.AEOLIAN: "Minor, flat 6th",
        ModeName.LOCRIAN: "Diminished, flat 5th",
    }
)


def degree_pattern_for_mode(mode: str | ModeName) -> list[str]:
    """Get the 7 degree labels of a mode, starting with 'T'."""
    return list(DEGREE_PATTERNS[ModeName.parse(mode)])


def quirk_for_mode(mode: str | ModeName) -> str:
    """Get the mood description of a mode."""
    return QUIRKS[ModeName.parse(mode)]


def tonal_signature_for_mode(mode: str | ModeName) -> str:
    """Get the tonal signature label of a mode."""
    return TONAL_SIGNATURES[ModeName.parse(mode)]


def mode_pattern(mode: str | ModeName) -> TonePattern:
    """
    Get the step pattern of a mode.

    The major pattern rotated to start on the mode's degree, e.g.
    dorian is W H W W W H W.
    """
    parsed = ModeName.parse(mode)
    return MAJOR_PATTERN.rotate(parsed.degree - 1, parsed.value)
