"""
Typed lookup errors for the theory core.

Every table in the core is closed over a fixed key set. Looking up a key
outside that set raises one of these instead of aborting, so callers can
decide whether to stop or report.
"""

from __future__ import annotations


class TheoryError(ValueError):
    """Base class for invalid-key lookups."""

    kind = "key"

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Unknown {self.kind}: {key!r}")


class UnknownNoteError(TheoryError):
    """Note name is not one of the 12 canonical spellings."""

    kind = "note"


class UnknownIntervalError(TheoryError):
    """Interval name is not one of the named intervals."""

    kind = "interval"


class UnknownModeError(TheoryError):
    """Mode name is not one of the 7 Greek modes."""

    kind = "mode"


class NotANaturalNoteError(TheoryError):
    """Note is valid but has an accidental where a natural note is required."""

    kind = "natural note"
