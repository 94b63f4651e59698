"""
Tests for core theory primitives.

Tests cover:
- Note table (pitch.py)
- IntervalName, semitones_for, resolve, relative_note (interval.py)
- Step, TonePattern, build_scale (scale.py)
- Major key chord table (chord.py)
- Mode tables and mode patterns (mode.py)
- Typed lookup errors (errors.py)
"""

import pytest

from chuk_mcp_theory.core import (
    DEGREE_PATTERNS,
    MAJOR_KEY_CHORDS,
    MAJOR_PATTERN,
    NATURAL_NOTES,
    NOTE_NAMES,
    IntervalName,
    ModeName,
    NotANaturalNoteError,
    Note,
    Step,
    TheoryError,
    TonePattern,
    UnknownIntervalError,
    UnknownModeError,
    UnknownNoteError,
    build_scale,
    chords_for_major,
    degree_pattern_for_mode,
    mode_pattern,
    note_index,
    quirk_for_mode,
    relative_note,
    resolve,
    semitones_for,
    tonal_signature_for_mode,
)


class TestNote:
    """Tests for the Note table."""

    def test_table_order(self) -> None:
        """Notes are ordered chromatically from A."""
        assert NOTE_NAMES == (
            "A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#"
        )  # fmt: skip
        assert [note.spell() for note in Note] == list(NOTE_NAMES)

    def test_note_index(self) -> None:
        """Index lookup by name."""
        assert note_index("A") == 0
        assert note_index("C") == 3
        assert note_index("G#") == 11

    def test_parse(self) -> None:
        """Parse canonical spellings."""
        assert Note.parse("C") == Note.C
        assert Note.parse("F#") == Note.Fs
        assert Note.parse(" D ") == Note.D
        assert Note.parse(Note.E) == Note.E

    def test_parse_rejects_flats(self) -> None:
        """Only sharp spellings are canonical."""
        with pytest.raises(UnknownNoteError):
            Note.parse("Bb")

    def test_parse_unknown(self) -> None:
        """Unknown names raise a typed error carrying the key."""
        with pytest.raises(UnknownNoteError) as exc_info:
            Note.parse("H")
        assert exc_info.value.key == "H"

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert Note.G.transpose(2) == Note.A
        assert Note.A.transpose(-1) == Note.Gs
        assert Note.C.transpose(12) == Note.C

    def test_naturals(self) -> None:
        """Natural notes in table order."""
        assert [note.spell() for note in NATURAL_NOTES] == ["A", "B", "C", "D", "E", "F", "G"]
        assert Note.C.is_natural
        assert not Note.Cs.is_natural

    def test_str(self) -> None:
        """str() gives the display name."""
        assert str(Note.As) == "A#"


class TestInterval:
    """Tests for interval resolution."""

    def test_semitones(self) -> None:
        """Named intervals have the fixed semitone distances."""
        assert [semitones_for(i) for i in IntervalName] == [4, 7, 10, 13, 16, 19]
        assert semitones_for("fifth") == 7
        assert IntervalName.THIRTEENTH.semitones == 19

    def test_unknown_interval(self) -> None:
        """Unknown intervals raise a typed error."""
        with pytest.raises(UnknownIntervalError):
            semitones_for("second")

    def test_parse_case_insensitive(self) -> None:
        """Interval names are matched case-insensitively."""
        assert IntervalName.parse("Fifth") == IntervalName.FIFTH

    def test_resolve_c(self) -> None:
        """Intervals above C."""
        assert resolve("C", "third") == "E"
        assert resolve("C", "fifth") == "G"
        assert resolve("C", "seventh") == "A#"

    def test_resolve_compound(self) -> None:
        """Compound intervals wrap past the octave."""
        assert resolve("C", "ninth") == "C#"
        assert resolve("C", "eleventh") == "E"
        assert resolve("A", "thirteenth") == "E"

    def test_resolve_wraps_at_end_of_table(self) -> None:
        """Roots near the end of the table wrap to the start."""
        assert resolve("G#", "third") == "C"
        assert resolve("G", "fifth") == "D"

    def test_resolve_unknown_note(self) -> None:
        """Unknown roots raise a typed error."""
        with pytest.raises(UnknownNoteError):
            resolve("X", "third")

    @pytest.mark.parametrize("note", NOTE_NAMES)
    def test_relative_note_identity(self, note: str) -> None:
        """A zero offset returns the root."""
        assert relative_note(note, 0) == note

    @pytest.mark.parametrize("note", NOTE_NAMES)
    def test_relative_note_periodic(self, note: str) -> None:
        """Offsets repeat every 12 semitones."""
        for k in range(0, 25):
            assert relative_note(note, k) == relative_note(note, k + 12)

    def test_relative_note_negative(self) -> None:
        """Negative offsets are rejected."""
        with pytest.raises(ValueError):
            relative_note("C", -1)


class TestTonePattern:
    """Tests for Step and TonePattern."""

    def test_major_pattern(self) -> None:
        """Major pattern is W W H W W W H."""
        assert str(MAJOR_PATTERN) == "W W H W W W H"
        assert [int(s) for s in MAJOR_PATTERN.steps] == [2, 2, 1, 2, 2, 2, 1]
        assert MAJOR_PATTERN.semitones == 12
        assert len(MAJOR_PATTERN) == 7

    def test_parse(self) -> None:
        """Parse W/H tokens."""
        pattern = TonePattern.parse("w h, W")
        assert pattern.steps == (Step.WHOLE, Step.HALF, Step.WHOLE)

    def test_parse_invalid(self) -> None:
        """Unknown tokens are rejected."""
        with pytest.raises(ValueError):
            TonePattern.parse("W X")

    def test_rotate(self) -> None:
        """Rotation starts the pattern at a later step."""
        assert str(MAJOR_PATTERN.rotate(1)) == "W H W W W H W"
        assert MAJOR_PATTERN.rotate(7) == MAJOR_PATTERN.rotate(0)

    def test_rejects_raw_ints(self) -> None:
        """Steps must be Step values."""
        with pytest.raises(ValueError):
            TonePattern((2, 2, 1))  # type: ignore[arg-type]


class TestBuildScale:
    """Tests for scale construction."""

    def test_c_major(self) -> None:
        """C major."""
        assert build_scale("C", MAJOR_PATTERN) == ["C", "D", "E", "F", "G", "A", "B", "C"]

    def test_a_major(self) -> None:
        """A major."""
        assert build_scale("A") == ["A", "B", "C#", "D", "E", "F#", "G#", "A"]

    @pytest.mark.parametrize("note", NOTE_NAMES)
    def test_octave_return(self, note: str) -> None:
        """Major scales start and end on the root."""
        scale = build_scale(note)
        assert len(scale) == 8
        assert scale[0] == note
        assert scale[-1] == note

    def test_custom_pattern_length(self) -> None:
        """A pattern of N steps gives N + 1 notes."""
        assert build_scale("C", TonePattern.parse("W W")) == ["C", "D", "E"]
        assert build_scale("C", TonePattern(())) == ["C"]


class TestChords:
    """Tests for the major key chord table."""

    def test_c_major(self) -> None:
        """Chords of C major."""
        assert chords_for_major("C") == ["C", "Dm", "Em", "F", "G", "Am", "B/5b"]

    def test_f_major_spells_bb(self) -> None:
        """F major keeps its flat-spelled IV chord."""
        assert chords_for_major("F")[3] == "Bb"

    def test_tonic_matches_key(self) -> None:
        """Every table row starts on its own key and ends diminished."""
        assert set(MAJOR_KEY_CHORDS) == set(NATURAL_NOTES)
        for note, chords in MAJOR_KEY_CHORDS.items():
            assert len(chords) == 7
            assert chords[0] == note.spell()
            assert chords[6].endswith("/5b")

    def test_accidental_key_rejected(self) -> None:
        """Keys with an accidental are not tabled."""
        with pytest.raises(NotANaturalNoteError):
            chords_for_major("C#")

    def test_unknown_key_rejected(self) -> None:
        """Unknown names raise UnknownNoteError."""
        with pytest.raises(UnknownNoteError):
            chords_for_major("Bb")

    def test_returns_copy(self) -> None:
        """Callers can't mutate the table."""
        chords = chords_for_major("G")
        chords.append("X")
        assert chords_for_major("G") == ["G", "Am", "Bm", "C", "D", "Em", "F#/5b"]


class TestModes:
    """Tests for the mode tables."""

    @pytest.mark.parametrize("mode", list(ModeName))
    def test_degree_pattern_shape(self, mode: ModeName) -> None:
        """Every degree pattern has 7 entries starting with the tonic."""
        degrees = degree_pattern_for_mode(mode)
        assert len(degrees) == 7
        assert degrees[0] == "T"

    def test_degree_patterns(self) -> None:
        """Spot-check characteristic degrees."""
        assert degree_pattern_for_mode("ionian") == ["T", "2", "3", "4", "5", "6", "7"]
        assert degree_pattern_for_mode("lidian")[3] == "4#"
        assert degree_pattern_for_mode("locrian")[4] == "5b"

    def test_lydian_alias(self) -> None:
        """'lydian' is accepted for the 'lidian' table key."""
        assert ModeName.parse("Lydian") == ModeName.LIDIAN

    def test_quirks_and_signatures(self) -> None:
        """Every mode has a quirk and a tonal signature."""
        for mode in ModeName:
            assert quirk_for_mode(mode)
            assert tonal_signature_for_mode(mode)
        assert tonal_signature_for_mode("dorian") == "Minor, major 6th"

    def test_unknown_mode(self) -> None:
        """Unknown modes raise a typed error."""
        with pytest.raises(UnknownModeError):
            quirk_for_mode("hypodorian")

    def test_mode_degree(self) -> None:
        """Modes know their starting degree."""
        assert ModeName.IONIAN.degree == 1
        assert ModeName.LOCRIAN.degree == 7

    def test_mode_pattern(self) -> None:
        """Mode patterns are rotations of the major pattern."""
        assert mode_pattern("ionian").steps == MAJOR_PATTERN.steps
        assert str(mode_pattern("dorian")) == "W H W W W H W"
        assert build_scale("D", mode_pattern("dorian")) == [
            "D", "E", "F", "G", "A", "B", "C", "D"
        ]  # fmt: skip
        assert build_scale("A", mode_pattern("aeolian")) == [
            "A", "B", "C", "D", "E", "F", "G", "A"
        ]  # fmt: skip

    def test_mode_patterns_match_degree_tables(self) -> None:
        """Mode scales on C use the accidentals the degree tables name."""
        for mode in ModeName:
            scale = build_scale("C", mode_pattern(mode))
            flats = [d for d in DEGREE_PATTERNS[mode] if d.endswith("b")]
            sharps = [d for d in DEGREE_PATTERNS[mode] if d.endswith("#")]
            accidentals = [n for n in scale[:-1] if "#" in n]
            assert len(accidentals) == len(flats) + len(sharps)


class TestErrors:
    """Tests for the typed lookup errors."""

    def test_hierarchy(self) -> None:
        """All lookup errors are TheoryErrors and ValueErrors."""
        for error_type in (
            UnknownNoteError,
            UnknownIntervalError,
            UnknownModeError,
            NotANaturalNoteError,
        ):
            assert issubclass(error_type, TheoryError)
            assert issubclass(error_type, ValueError)

    def test_message(self) -> None:
        """Messages name the kind and the key."""
        assert str(UnknownModeError("foo")) == "Unknown mode: 'foo'"
