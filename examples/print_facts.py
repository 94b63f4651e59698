#!/usr/bin/env python3
"""
Example: Print every flashcard fact.

This demonstrates the hand-off to a flashcard builder - each fact is one
card, prompt on the front and answer on the back.

Usage:
    python examples/print_facts.py
    python examples/print_facts.py --yaml
"""

import sys

from chuk_mcp_theory.facts import FactCategory, facts_by_category, render_facts


def main() -> None:
    """Print facts grouped by category, or as a YAML document."""
    grouped = facts_by_category()

    if "--yaml" in sys.argv:
        print(render_facts(fact for group in grouped.values() for fact in group))
        return

    for category in FactCategory:
        facts = grouped[category]
        print(f"\n{category.value} ({len(facts)})")
        for fact in facts:
            print(f"  {fact.prompt:<40} {fact.answer}")

    total = sum(len(group) for group in grouped.values())
    print(f"\nDone! {total} facts.")


if __name__ == "__main__":
    main()
