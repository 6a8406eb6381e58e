"""
Tests for shorthand chord parsing.

Tests cover:
- Chord.from_shorthand / PolyChord.from_shorthand entry points
- Qualities, extensions, suspensions, alterations and slash chords
- ShorthandSyntaxError positions
"""

import pytest

from tertian.core import Chord, ChordStructure, Note, NoteClass, PitchClass, PolyChord
from tertian.shorthand import ShorthandParser, ShorthandSyntaxError, parse_chord

A, B, C, D, E, F, G = NoteClass

P1, P2, P3, P4, P5, P6, P7, P9, P11, P13 = PitchClass


def structure(*components: tuple[PitchClass, int]) -> ChordStructure:
    """Build a structure from (degree, alteration) pairs."""
    return ChordStructure.new().insert_many(components)


def spelled(text: str) -> list[str]:
    """Parse a chord and spell its notes."""
    return [str(note) for note in parse_chord(text)]


class TestFromShorthand:
    """Tests for the Chord and PolyChord entry points."""

    def test_major_triad(self) -> None:
        """A bare root is a major triad."""
        assert Chord.from_shorthand("C") == Chord.new(Note(C), structure((P3, 0), (P5, 0)))

    def test_polychord(self) -> None:
        """Upper chord is written first, lower after '|'."""
        upper = Chord.new(Note(C), structure((P3, 0), (P5, 0)))
        lower = Chord.new(Note(A), structure((P3, -1), (P5, 0)))
        assert PolyChord.from_shorthand("C|Am") == PolyChord.new(upper, lower)

    def test_polychord_spaces(self) -> None:
        """Spaces are allowed around '|'."""
        assert PolyChord.from_shorthand("F#aug | Bm") == PolyChord.new(
            Chord.new(Note(F, 1), structure((P3, 0), (P5, 1))),
            Chord.new(Note(B), structure((P3, -1), (P5, 0))),
        )

    def test_polychord_notes(self) -> None:
        """Polychord notes are lower then upper."""
        notes = [str(n) for n in PolyChord.from_shorthand("F#(#5)|Bm")]
        assert notes == ["B", "D", "F#", "F#", "A#", "C##"]

    def test_complex_chord(self) -> None:
        """Quality, extension and alteration list combine."""
        expected = Chord.new(
            Note(A, 1),
            structure((P3, 0), (P5, 1), (P7, 0), (P9, 0), (P11, 1), (P13, 0)),
        )
        assert Chord.from_shorthand("A#Maj13(#5,#11)") == expected

    def test_separate_alteration_groups(self) -> None:
        """Several parenthesized groups are equivalent to one list."""
        assert Chord.from_shorthand("A#Maj13(#5)(#11)") == Chord.from_shorthand("A#Maj13(#5,#11)")


class TestRoots:
    """Tests for root notes."""

    @pytest.mark.parametrize(
        ("text", "root"),
        [
            ("C", Note(C)),
            ("C#", Note(C, 1)),
            ("Bb", Note(B, -1)),
            ("Ebb", Note(E, -2)),
            ("F##", Note(F, 2)),
        ],
    )
    def test_accidentals(self, text: str, root: Note) -> None:
        """Roots take any run of sharps or flats."""
        assert parse_chord(text).root == root

    def test_parse_note(self, parser: ShorthandParser) -> None:
        """Single notes parse on their own."""
        assert parser.parse_note("Gbb") == Note(G, -2)

    def test_flat_root_spelling(self) -> None:
        """Flat roots spell with flats."""
        assert spelled("Eb") == ["Eb", "G", "Bb"]


class TestQualities:
    """Tests for quality keywords."""

    @pytest.mark.parametrize(
        ("text", "notes"),
        [
            ("C", ["C", "E", "G"]),
            ("Cm", ["C", "Eb", "G"]),
            ("Cmin", ["C", "Eb", "G"]),
            ("C-", ["C", "Eb", "G"]),
            ("Cdim", ["C", "Eb", "Gb"]),
            ("Co", ["C", "Eb", "Gb"]),
            ("Caug", ["C", "E", "G#"]),
            ("C+", ["C", "E", "G#"]),
            ("C5", ["C", "G"]),
            ("CMaj", ["C", "E", "G"]),
        ],
    )
    def test_triads(self, text: str, notes: list[str]) -> None:
        """Quality symbols select the triad shape."""
        assert spelled(text) == notes

    @pytest.mark.parametrize(
        ("text", "notes"),
        [
            ("C7", ["C", "E", "G", "Bb"]),
            ("CMaj7", ["C", "E", "G", "B"]),
            ("Cmaj7", ["C", "E", "G", "B"]),
            ("CΔ7", ["C", "E", "G", "B"]),
            ("Cm7", ["C", "Eb", "G", "Bb"]),
            ("CmMaj7", ["C", "Eb", "G", "B"]),
            ("Cdim7", ["C", "Eb", "Gb", "Bbb"]),
            ("Cø", ["C", "Eb", "Gb", "Bb"]),
            ("Cø7", ["C", "Eb", "Gb", "Bb"]),
            ("Caug7", ["C", "E", "G#", "Bb"]),
        ],
    )
    def test_sevenths(self, text: str, notes: list[str]) -> None:
        """The quality decides how the seventh is altered."""
        assert spelled(text) == notes

    def test_longest_symbol_wins(self) -> None:
        """'maj' is not read as 'm' followed by 'aj'."""
        assert parse_chord("Cmaj7") == parse_chord("CMaj7")
        assert parse_chord("CminMaj7") == parse_chord("CmMaj7")


class TestExtensions:
    """Tests for extension numbers."""

    def test_sixth(self) -> None:
        """6 adds a major sixth without a seventh."""
        assert spelled("C6") == ["C", "E", "G", "A"]
        assert spelled("Am6") == ["A", "C", "E", "F#"]

    def test_ninth(self) -> None:
        """9 implies the seventh."""
        assert parse_chord("C9").notes() == [Note(C), Note(E), Note(G), Note(B, -1), Note(D, 12)]

    def test_eleventh(self) -> None:
        """11 implies the seventh and ninth."""
        assert parse_chord("Dm11").notes() == [
            Note(D),
            Note(F),
            Note(A),
            Note(C),
            Note(E, 12),
            Note(G, 12),
        ]

    def test_thirteenth(self) -> None:
        """13 implies every lower extension."""
        assert parse_chord("G13").notes() == [
            Note(G),
            Note(B),
            Note(D),
            Note(F),
            Note(A, 12),
            Note(C, 12),
            Note(E, 12),
        ]

    def test_power_chord_rejects_extension(self) -> None:
        """Qualities without a seventh reject extensions."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            parse_chord("C57")
        assert exc_info.value.position == 2


class TestSuspensions:
    """Tests for sus chords."""

    def test_sus4(self) -> None:
        """sus4 replaces the third with the fourth."""
        assert spelled("Csus4") == ["C", "F", "G"]

    def test_sus_defaults_to_fourth(self) -> None:
        """Bare sus means sus4."""
        assert parse_chord("Csus") == parse_chord("Csus4")

    def test_sus2(self) -> None:
        """sus2 replaces the third with the second."""
        assert spelled("Dsus2") == ["D", "E", "A"]

    def test_seventh_sus(self) -> None:
        """Extensions and suspensions combine."""
        assert spelled("G7sus4") == ["G", "C", "D", "F"]


class TestAlterations:
    """Tests for alterations."""

    def test_bare_alteration(self) -> None:
        """Alterations may follow without parentheses."""
        assert spelled("Cm7b5") == ["C", "Eb", "Gb", "Bb"]
        assert parse_chord("C7#9").notes()[-1] == Note(D, 13)

    def test_alteration_list(self) -> None:
        """Alteration lists override and add degrees."""
        assert parse_chord("C7(b9,#11)").notes() == [
            Note(C),
            Note(E),
            Note(G),
            Note(B, -1),
            Note(D, 11),
            Note(F, 13),
        ]

    def test_add(self) -> None:
        """add inserts an unaltered degree."""
        assert parse_chord("Cadd9").notes() == [Note(C), Note(E), Note(G), Note(D, 12)]
        assert parse_chord("Cm(add11)").notes() == [Note(C), Note(E, -1), Note(G), Note(F, 12)]

    def test_plain_degree_in_list(self) -> None:
        """Inside parentheses a bare number adds that degree."""
        assert parse_chord("C(9)") == parse_chord("Cadd9")

    def test_alteration_overrides_quality(self) -> None:
        """Alterations win over the quality's own degrees."""
        chord = parse_chord("Caug(b5)")
        assert chord.structure.get(PitchClass.FIFTH) == -1

    def test_later_alteration_wins(self) -> None:
        """Repeating a degree keeps the last alteration."""
        assert parse_chord("C(#5,b5)").structure.get(PitchClass.FIFTH) == -1


class TestSlashChords:
    """Tests for slash chords."""

    def test_slash(self) -> None:
        """The slash note is sounded first."""
        chord = Chord.from_shorthand("A/C#")
        assert chord == Chord.new_slash(Note(C, 1), Note(A), structure((P3, 0), (P5, 0)))
        assert [str(n) for n in chord] == ["C#", "A", "C#", "E"]

    def test_slash_after_alterations(self) -> None:
        """The slash comes after everything else."""
        chord = parse_chord("Dm7(b5)/Ab")
        assert chord.slash_root == Note(A, -1)
        assert chord.structure.get(PitchClass.FIFTH) == -1

    def test_slash_in_polychord(self) -> None:
        """Either half of a polychord can be a slash chord."""
        polychord = PolyChord.from_shorthand("D/F#|C")
        assert polychord.upper.slash_root == Note(F, 1)
        assert polychord.lower.slash_root is None


class TestSyntaxErrors:
    """Tests for ShorthandSyntaxError."""

    @pytest.mark.parametrize(
        ("text", "position"),
        [
            ("", 0),
            ("H", 0),
            ("c", 0),
            ("Cx", 1),
            ("C2", 1),
            ("C(#5", 4),
            ("C(#8)", 3),
            ("C7#", 3),
            ("C/", 2),
            ("C/E ", 3),
            ("Cm7 ", 3),
            ("C\u00b2", 1),
            ("C" + "1" * 5000, 1),
            ("C(#" + "9" * 5000 + ")", 3),
            ("C(#\u0661)", 3),
            ("C013", 1),
        ],
    )
    def test_positions(self, text: str, position: int) -> None:
        """Errors report where parsing stopped."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            parse_chord(text)
        assert exc_info.value.position == position
        assert exc_info.value.remainder == text[position:]
        assert exc_info.value.text == text

    def test_is_value_error(self) -> None:
        """Syntax errors are ValueErrors."""
        with pytest.raises(ValueError):
            Chord.from_shorthand("X")

    def test_message(self) -> None:
        """The message names the input, position and expectation."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            parse_chord("C(#5")
        message = str(exc_info.value)
        assert "'C(#5'" in message
        assert "position 4" in message
        assert exc_info.value.expected == "',' or ')'"

    def test_polychord_missing_bar(self) -> None:
        """A polychord needs '|'."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            PolyChord.from_shorthand("CAm")
        assert exc_info.value.position == 1

    def test_polychord_missing_lower(self) -> None:
        """A polychord needs a lower chord."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            PolyChord.from_shorthand("C|")
        assert exc_info.value.position == 2

    def test_chord_rejects_polychord(self) -> None:
        """A single chord stops at '|'."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            Chord.from_shorthand("C|Am")
        assert exc_info.value.position == 1

    def test_long_number_is_syntax_error(self) -> None:
        """Runs of digits longer than any degree are rejected, not converted."""
        with pytest.raises(ShorthandSyntaxError) as exc_info:
            parse_chord("C" + "7" * 5000)
        assert exc_info.value.expected == "number of at most 2 digits"

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII digits count as numbers."""
        with pytest.raises(ShorthandSyntaxError):
            parse_chord("C٧")
        with pytest.raises(ShorthandSyntaxError):
            parse_chord("Cadd¹³")
