"""
Fact rendering - YAML and JSON documents as text.

Writing files and packaging decks belong to the flashcard builder; this
module only produces the document string.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

import yaml

from chuk_mcp_theory.constants import SchemaVersion
from chuk_mcp_theory.facts.models import Fact

SCHEMA: SchemaVersion = "facts/v1"


def facts_to_dict(facts: Iterable[Fact]) -> dict[str, Any]:
    """Build the canonical document for a list of facts."""
    fact_list = list(facts)
    return {
        "schema": SCHEMA,
        "count": len(fact_list),
        "facts": [fact.model_dump(mode="json") for fact in fact_list],
    }

def render_facts(facts: Iterable[Fact], fmt: str = "yaml") -> str:
    """
    Render facts as a YAML or JSON document.

    Args:
        facts: Facts to render
        fmt: 'yaml' or 'json'

    Returns:
        The document text
    """
    document = facts_to_dict(facts)
    if fmt == "yaml":
        return yaml.safe_dump(
            document, default_flow_style=False, sort_keys=False, allow_unicode=True
        )
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown format: {fmt}. Expected 'yaml' or 'json'")
