"""
Constants for the theory server.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

SERVER_NAME = "chuk-mcp-theory"

# Schema versions - frozen for v1
SchemaVersion = Literal["facts/v1"]


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_NOTE = "Unknown note: '{note}'. Expected one of: {choices}."
    UNKNOWN_INTERVAL = "Unknown interval: '{interval}'. Expected one of: {choices}."
    UNKNOWN_MODE = "Unknown mode: '{mode}'. Expected one of: {choices}."
    NOT_NATURAL = "Chords are only tabled for natural keys: '{note}'. Expected one of: {choices}."
    UNKNOWN_CATEGORY = "Unknown fact category: '{category}'. Expected one of: {choices}."
    INVALID_PATTERN = "Invalid step pattern: '{pattern}'. Use 'W' and 'H' tokens."
