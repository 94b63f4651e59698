"""
Fact tools - MCP tools for listing and exporting flashcard facts.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.facts import FactCategory, facts_by_category, generate_facts, render_facts

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fact_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register fact tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_facts(category: str | None = None) -> str:
        """
        List prompt/answer facts.

        Args:
            category: Optional category ('interval', 'major_scale',
                'major_chords', 'mode_degrees', 'mode_quirk', 'mode_signature')

        Returns:
            JSON string with facts and per-category counts

        Example:
            theory_list_facts()
            theory_list_facts(category="major_chords")
        """
        try:
            facts = generate_facts()
            counts = {
                cat.value: len(group) for cat, group in facts_by_category(facts).items()
            }

            if category is not None:
                try:
                    category_enum = FactCategory(category)
                except ValueError:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNKNOWN_CATEGORY.format(
                                category=category,
                                choices=", ".join(c.value for c in FactCategory),
                            ),
                        }
                    )
                facts = [f for f in facts if f.category == category_enum]

            return json.dumps(
                {
                    "status": "success",
                    "facts": [
                        {"prompt": f.prompt, "answer": f.answer, "category": f.category.value}
                        for f in facts
                    ],
                    "count": len(facts),
                    "counts": counts,
                }
            )
        except Exception as e:
            logger.exception("Failed to list facts")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_facts"] = theory_list_facts

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_facts(fmt: str = "yaml") -> str:
        """
        Export every fact as a YAML or JSON document.

        The document is returned as text, ready for a flashcard
        builder to package.

        Args:
            fmt: 'yaml' (default) or 'json'

        Returns:
            JSON string containing the document

        Example:
            theory_export_facts(fmt="yaml")
        """
        try:
            content = render_facts(generate_facts(), fmt)
            return json.dumps({"status": "success", "format": fmt, "content": content})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export facts")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_facts"] = theory_export_facts

    return tools
