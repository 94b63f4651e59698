"""
MCP tool implementations.

Tools are organized by domain:
- theory - Notes, intervals, scales, chords and modes
- facts - Flashcard fact listing and export
"""

from chuk_mcp_theory.tools.facts import register_fact_tools
from chuk_mcp_theory.tools.theory import register_theory_tools

__all__ = [
    "register_fact_tools",
    "register_theory_tools",
]
