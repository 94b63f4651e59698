"""
Theory tools - MCP tools for the pitch, interval, scale, chord and mode tables.

Tools for resolving intervals, spelling scales and looking up the
chord and mode tables.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import (
    NATURAL_NOTES,
    NOTE_NAMES,
    SEMITONES,
    IntervalName,
    ModeName,
    NotANaturalNoteError,
    Note,
    TheoryError,
    TonePattern,
    UnknownIntervalError,
    UnknownModeError,
    UnknownNoteError,
    build_scale,
    chords_for_major,
    degree_pattern_for_mode,
    mode_pattern,
    quirk_for_mode,
    resolve,
    tonal_signature_for_mode,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_error(error: TheoryError) -> str:
    """Turn a typed lookup error into a user-facing message."""
    if isinstance(error, UnknownNoteError):
        return ErrorMessages.UNKNOWN_NOTE.format(note=error.key, choices=", ".join(NOTE_NAMES))
    if isinstance(error, UnknownIntervalError):
        return ErrorMessages.UNKNOWN_INTERVAL.format(
            interval=error.key, choices=", ".join(i.value for i in IntervalName)
        )
    if isinstance(error, UnknownModeError):
        return ErrorMessages.UNKNOWN_MODE.format(
            mode=error.key, choices=", ".join(m.value for m in ModeName)
        )
    if isinstance(error, NotANaturalNoteError):
        return ErrorMessages.NOT_NATURAL.format(
            note=error.key, choices=", ".join(n.spell() for n in NATURAL_NOTES)
        )
    return str(error)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register theory lookup tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_notes() -> str:
        """
        List the 12 notes in table order.

        Returns:
            JSON string with note names and their chromatic index

        Example:
            theory_list_notes()
        """
        return json.dumps(
            {
                "status": "success",
                "notes": [{"name": note.spell(), "index": note.value} for note in Note],
                "naturals": [note.spell() for note in NATURAL_NOTES],
                "count": len(Note),
            }
        )

    tools["theory_list_notes"] = theory_list_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_intervals() -> str:
        """
        List the named intervals and their semitone distances.

        Returns:
            JSON string with interval names and semitones

        Example:
            theory_list_intervals()
        """
        return json.dumps(
            {
                "status": "success",
                "intervals": [
                    {"name": interval.value, "semitones": semitones}
                    for interval, semitones in SEMITONES.items()
                ],
                "count": len(SEMITONES),
            }
        )

    tools["theory_list_intervals"] = theory_list_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_modes() -> str:
        """
        List the Greek modes with their step patterns.

        Returns:
            JSON string with mode names, starting degree and pattern

        Example:
            theory_list_modes()
        """
        return json.dumps(
            {
                "status": "success",
                "modes": [
                    {"name": mode.value, "degree": mode.degree, "pattern": str(mode_pattern(mode))}
                    for mode in ModeName
                ],
                "count": len(ModeName),
            }
        )

    tools["theory_list_modes"] = theory_list_modes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_resolve_interval(note: str, interval: str) -> str:
        """
        Resolve a named interval above a root note.

        Args:
            note: Root note ('A', 'A#', ... 'G#')
            interval: Interval name ('third', 'fifth', 'seventh',
                'ninth', 'eleventh', 'thirteenth')

        Returns:
            JSON string with the resulting note

        Example:
            theory_resolve_interval(note="C", interval="seventh")
        """
        try:
            parsed = IntervalName.parse(interval)
            return json.dumps(
                {
                    "status": "success",
                    "root": Note.parse(note).spell(),
                    "interval": parsed.value,
                    "semitones": parsed.semitones,
                    "note": resolve(note, parsed),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to resolve interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_resolve_interval"] = theory_resolve_interval

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(root: str, pattern: str = "W W H W W W H") -> str:
        """
        Spell a scale from a root and a whole/half step pattern.

        Args:
            root: Root note ('A', 'A#', ... 'G#')
            pattern: Space-separated 'W'/'H' steps (default major)

        Returns:
            JSON string with the scale notes

        Example:
            theory_build_scale(root="A")
            theory_build_scale(root="D", pattern="W H W W W H W")
        """
        try:
            try:
                tone_pattern = TonePattern.parse(pattern)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_PATTERN.format(pattern=pattern),
                    }
                )

            scale = build_scale(root, tone_pattern)
            return json.dumps(
                {
                    "status": "success",
                    "root": scale[0],
                    "pattern": str(tone_pattern),
                    "notes": scale,
                    "text": " ".join(scale),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_mode_scale(root: str, mode: str) -> str:
        """
        Spell a Greek mode from a root.

        Args:
            root: Root note ('A', 'A#', ... 'G#')
            mode: Mode name ('ionian', 'dorian', 'phrygian', 'lidian',
                'mixolydian', 'aeolian', 'locrian')

        Returns:
            JSON string with the mode's notes

        Example:
            theory_build_mode_scale(root="D", mode="dorian")
        """
        try:
            tone_pattern = mode_pattern(mode)
            scale = build_scale(root, tone_pattern)
            return json.dumps(
                {
                    "status": "success",
                    "root": scale[0],
                    "mode": tone_pattern.name,
                    "pattern": str(tone_pattern),
                    "notes": scale,
                    "text": " ".join(scale),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to build mode scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_mode_scale"] = theory_build_mode_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_major_chords(root: str) -> str:
        """
        Get the diatonic chords of a natural major key.

        Args:
            root: Natural note ('A' to 'G', no accidental)

        Returns:
            JSON string with chord labels for degrees I to VII

        Example:
            theory_major_chords(root="C")
        """
        try:
            chords = chords_for_major(root)
            return json.dumps(
                {
                    "status": "success",
                    "key": f"{Note.parse(root).spell()} major",
                    "chords": chords,
                    "text": " ".join(chords),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to look up chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_major_chords"] = theory_major_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_describe_mode(mode: str) -> str:
        """
        Get the degree pattern, quirk and tonal signature of a mode.

        Args:
            mode: Mode name ('ionian', 'dorian', 'phrygian', 'lidian',
                'mixolydian', 'aeolian', 'locrian')

        Returns:
            JSON string with the mode's attributes

        Example:
            theory_describe_mode(mode="phrygian")
        """
        try:
            parsed = ModeName.parse(mode)
            return json.dumps(
                {
                    "status": "success",
                    "mode": {
                        "name": parsed.value,
                        "degree": parsed.degree,
                        "degrees": degree_pattern_for_mode(parsed),
                        "pattern": str(mode_pattern(parsed)),
                        "quirk": quirk_for_mode(parsed),
                        "tonal_signature": tonal_signature_for_mode(parsed),
                    },
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to describe mode")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_describe_mode"] = theory_describe_mode

    return tools
