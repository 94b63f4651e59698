"""
Scale primitives - Step, TonePattern, build_scale.

Scales are step patterns from a root. A pattern of N steps produces N + 1
notes, the last being the octave return when the steps sum to 12.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .interval import relative_note
from .pitch import Note


class Step(IntEnum):
    """A move between adjacent scale notes, valued in semitones."""

    HALF = 1
    WHOLE = 2

    @property
    def symbol(self) -> str:
        return "W" if self is Step.WHOLE else "H"


_STEP_SYMBOLS: dict[str, Step] = {"W": Step.WHOLE, "H": Step.HALF}


@dataclass(frozen=True)
class TonePattern:
    """
    An ordered sequence of whole and half steps.

    The steps are from one note to the next (not cumulative).
    A major scale is: W W H W W W H

    Immutable and hashable.
    """

    steps: tuple[Step, ...]
    name: str = ""

    MAJOR: ClassVar[TonePattern]

    def __post_init__(self) -> None:
        for step in self.steps:
            if not isinstance(step, Step):
                raise ValueError(f"Pattern steps must be Step values, got {step!r}")

    @property
    def semitones(self) -> int:
        """Total span of the pattern in semitones."""
        return sum(self.steps)

    def rotate(self, n: int, name: str = "") -> TonePattern:
        """
        Start the pattern from its n-th step.

        Rotating the major pattern gives the Greek modes:
        rotate(1) is dorian, rotate(4) is mixolydian.
        """
        if not self.steps:
            return TonePattern((), name)
        n %= len(self.steps)
        return TonePattern(self.steps[n:] + self.steps[:n], name)

    @classmethod
    def parse(cls, text: str, name: str = "") -> TonePattern:
        """Parse a pattern from 'W'/'H' tokens, e.g. 'W W H W W W H'."""
        steps = []
        for token in text.replace(",", " ").split():
            step = _STEP_SYMBOLS.get(token.upper())
            if step is None:
                raise ValueError(f"Unknown step: {token!r}. Expected 'W' or 'H'")
            steps.append(step)
        return cls(tuple(steps), name)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return " ".join(step.symbol for step in self.steps)


_W = Step.WHOLE
_H = Step.HALF

TonePattern.MAJOR = TonePattern((_W, _W, _H, _W, _W, _W, _H), "major")
MAJOR_PATTERN = TonePattern.MAJOR


def build_scale(root: str | Note, pattern: TonePattern = MAJOR_PATTERN) -> list[str]:
    """
    Build the notes of a scale from a root and a step pattern.

    Args:
        root: Root note name
        pattern: Step pattern (default major)

    Returns:
        len(pattern) + 1 note names, starting with the root
    """
    root_note = Note.parse(root)
    scale = [root_note.spell()]
    semitones = 0
    for step in pattern.steps:
        semitones += step
        scale.append(relative_note(root_note, semitones))
    return scale
