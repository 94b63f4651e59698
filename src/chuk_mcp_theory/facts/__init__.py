"""
Fact generation - prompt/answer pairs for flashcard builders.

This module provides:
- Fact: One prompt/answer pair with its category
- FactCategory: What a fact is about
- generate_facts: Every fact, in deterministic order
- render_facts: YAML or JSON document text
"""

from chuk_mcp_theory.facts.export import facts_to_dict, render_facts
from chuk_mcp_theory.facts.generator import (
    as_pairs,
    facts_by_category,
    generate_chord_facts,
    generate_facts,
    generate_interval_facts,
    generate_mode_facts,
    generate_scale_facts,
)
from chuk_mcp_theory.facts.models import Fact, FactCategory

__all__ = [
    "Fact",
    "FactCategory",
    "as_pairs",
    "facts_by_category",
    "facts_to_dict",
    "generate_chord_facts",
    "generate_facts",
    "generate_interval_facts",
    "generate_mode_facts",
    "generate_scale_facts",
    "render_facts",
]
