#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for music-theory facts computed from fixed
reference tables: note intervals, major scales, diatonic chords of the
natural major keys and the Greek modes.

The server provides tools for:
- Listing the note, interval and mode tables
- Resolving intervals and spelling scales and modes
- Looking up diatonic chords and mode characteristics
- Listing and exporting prompt/answer facts for flashcard builders
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.constants import SERVER_NAME
from chuk_mcp_theory.tools import register_fact_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
theory_tools = register_theory_tools(mcp)
fact_tools = register_fact_tools(mcp)

# Export tool functions for direct access
theory_list_notes = theory_tools["theory_list_notes"]
theory_list_intervals = theory_tools["theory_list_intervals"]
theory_list_modes = theory_tools["theory_list_modes"]
theory_resolve_interval = theory_tools["theory_resolve_interval"]
theory_build_scale = theory_tools["theory_build_scale"]
theory_build_mode_scale = theory_tools["theory_build_mode_scale"]
theory_major_chords = theory_tools["theory_major_chords"]
theory_describe_mode = theory_tools["theory_describe_mode"]

theory_list_facts = fact_tools["theory_list_facts"]
theory_export_facts = fact_tools["theory_export_facts"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Tools: {len(theory_tools) + len(fact_tools)}")
