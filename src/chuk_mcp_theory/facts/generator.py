"""
Fact generator - walks the theory tables and emits prompt/answer facts.

Order is fixed: intervals for every note, major scales for every note,
chords for the natural major keys, then three facts per mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from chuk_mcp_theory.core import (
    MAJOR_PATTERN,
    NATURAL_NOTES,
    IntervalName,
    ModeName,
    Note,
    build_scale,
    chords_for_major,
    degree_pattern_for_mode,
    quirk_for_mode,
    resolve,
    tonal_signature_for_mode,
)
from chuk_mcp_theory.facts.models import Fact, FactCategory

logger = logging.getLogger(__name__)


def generate_interval_facts() -> Iterator[Fact]:
    """'<interval> of <note>' for every note and named interval."""
    for note in Note:
        for interval in IntervalName:
            yield Fact(
                prompt=f"{interval.value} of {note.spell()}",
                answer=resolve(note, interval),
                category=FactCategory.INTERVAL,
            )


def generate_scale_facts() -> Iterator[Fact]:
    """Major scale of every note."""
    for note in Note:
        yield Fact(
            prompt=f"Major harmonic scale of {note.spell()}",
            answer=" ".join(build_scale(note, MAJOR_PATTERN)),
            category=FactCategory.MAJOR_SCALE,
        )


def generate_chord_facts() -> Iterator[Fact]:
    """Diatonic chords of every natural major key."""
    for note in NATURAL_NOTES:
        yield Fact(
            prompt=f"Chords in {note.spell()} major",
            answer=" ".join(chords_for_major(note)),
            category=FactCategory.MAJOR_CHORDS,
        )


def generate_mode_facts() -> Iterator[Fact]:
    """Degree pattern, quirk and tonal signature of every mode."""
    for mode in ModeName:
        yield Fact(
            prompt=f"Scale degrees of the {mode.value} mode",
            answer=" ".join(degree_pattern_for_mode(mode)),
            category=FactCategory.MODE_DEGREES,
        )
        yield Fact(
            prompt=f"Quirk of the {mode.value} mode",
            answer=quirk_for_mode(mode),
            category=FactCategory.MODE_QUIRK,
        )
        yield Fact(
            prompt=f"Tonal signature of the {mode.value} mode",
            answer=tonal_signature_for_mode(mode),
            category=FactCategory.MODE_SIGNATURE,
        )


def generate_facts() -> list[Fact]:
    """
    Generate every fact, in deterministic order.

    Returns:
        112 facts: 72 interval, 12 scale, 7 chord and 21 mode facts
    """
    facts = [
        *generate_interval_facts(),
        *generate_scale_facts(),
        *generate_chord_facts(),
        *generate_mode_facts(),
    ]
    logger.debug(f"Generated {len(facts)} facts")
    return facts


def facts_by_category(facts: Iterable[Fact] | None = None) -> dict[FactCategory, list[Fact]]:
    """
    Group facts by category, keeping generation order within each group.

    Args:
        facts: Facts to group (default: generate_facts())
    """
    if facts is None:
        facts = generate_facts()

    grouped: dict[FactCategory, list[Fact]] = {category: [] for category in FactCategory}
    for fact in facts:
        grouped[fact.category].append(fact)
    return grouped


def as_pairs(facts: Iterable[Fact]) -> list[tuple[str, str]]:
    """Flatten facts to the (prompt, answer) tuples a deck builder consumes."""
    return [fact.as_pair() for fact in facts]
