"""
Fact models - the hand-off to flashcard builders.

A fact is one prompt/answer pair. Answers are plain text; scale and chord
answers are space-joined note or chord names.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FactCategory(str, Enum):
    """What a fact is about."""

    INTERVAL = "interval"
    MAJOR_SCALE = "major_scale"
    MAJOR_CHORDS = "major_chords"
    MODE_DEGREES = "mode_degrees"
    MODE_QUIRK = "mode_quirk"
    MODE_SIGNATURE = "mode_signature"


class Fact(BaseModel):
    """
    A single prompt/answer pair.

    The prompt becomes the card front and the answer the card back.
    """

    prompt: str = Field(..., min_length=1, description="Question text")
    answer: str = Field(..., min_length=1, description="Answer text")
    category: FactCategory = Field(..., description="Fact category")

    model_config = {"frozen": True}

    def as_pair(self) -> tuple[str, str]:
        """Get the (prompt, answer) tuple."""
        return (self.prompt, self.answer)
