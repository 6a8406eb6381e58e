"""
Shorthand parser - chord symbols like 'A#Maj13(#5,#11)' into Chord values.

Grammar:

    polychord  := chord '|' chord            (upper | lower)
    chord      := note quality extension? sus? alteration* ('/' note)?
    note       := A-G followed by '#'s or 'b's
    quality    := longest vocabulary symbol, else the default quality
    extension  := 6 | 7 | 9 | 11 | 13
    sus        := sus2 | sus4 | sus
    alteration := '(' item (',' item)* ')' | '#5' | 'b9' | 'add9' ...

Values are built only through the public Chord/ChordStructure constructors.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from tertian.constants import EXTENSIONS, ErrorMessages
from tertian.core.chord import Chord, PolyChord
from tertian.core.pitch import ChordComponent, Note, NoteClass, PitchClass, PitchOffset
from tertian.core.structure import ChordStructure
from tertian.models.quality import QualityVocabulary
from tertian.shorthand.loader import QualityLoader

logger = logging.getLogger(__name__)

_SHARP = "#"
_FLAT = "b"
_ADD = "add"
_SUS = "sus"
_MAX_DIGITS = 2


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9" and len(char) == 1


class ShorthandSyntaxError(ValueError):
    """
    Raised when chord shorthand cannot be parsed.

    Carries the full input, the 0-based position of the failure, and a
    description of what was expected there.
    """

    def __init__(self, text: str, position: int, expected: str):
        self.text = text
        self.position = position
        self.expected = expected
        super().__init__(
            ErrorMessages.SHORTHAND_SYNTAX.format(text=text, position=position, expected=expected)
        )

    @property
    def remainder(self) -> str:
        """The unparsed input from the failure onwards."""
        return self.text[self.position :]


class _Cursor:
    """Read position over shorthand text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def eat(self, prefix: str) -> bool:
        if self.startswith(prefix):
            self.pos += len(prefix)
            return True
        return False

    def skip_spaces(self) -> None:
        while self.peek().isspace():
            self.pos += 1

    def error(self, expected: str, position: int | None = None) -> ShorthandSyntaxError:
        return ShorthandSyntaxError(
            self.text, self.pos if position is None else position, expected
        )


class ShorthandParser:
    """
    Parses chord and polychord shorthand.

    The quality keywords come from a QualityVocabulary; by default the
    built-in library vocabulary is used.
    """

    def __init__(self, vocabulary: QualityVocabulary | None = None):
        """
        Initialize the parser.

        Args:
            vocabulary: Quality keywords to recognise (default: built-in)
        """
        self.vocabulary = vocabulary if vocabulary is not None else QualityLoader().load()

    def parse_chord(self, text: str) -> Chord:
        """
        Parse a single chord such as 'Cm7', 'F#7(b9)' or 'A/C#'.

        Raises:
            ShorthandSyntaxError: If the text is not a complete chord
        """
        cursor = _Cursor(text)
        try:
            chord = self._chord(cursor)
            self._expect_end(cursor)
        except ShorthandSyntaxError as e:
            logger.debug("Rejected chord shorthand %r at %d", text, e.position)
            raise
        return chord

    def parse_polychord(self, text: str) -> PolyChord:
        """
        Parse a polychord such as 'C|Am' (upper chord over lower chord).

        Raises:
            ShorthandSyntaxError: If the text is not a complete polychord
        """
        cursor = _Cursor(text)
        try:
            upper = self._chord(cursor)
            cursor.skip_spaces()
            if not cursor.eat("|"):
                raise cursor.error("'|'")
            cursor.skip_spaces()
            lower = self._chord(cursor)
            self._expect_end(cursor)
        except ShorthandSyntaxError as e:
            logger.debug("Rejected polychord shorthand %r at %d", text, e.position)
            raise
        return PolyChord.new(upper, lower)

    def parse_note(self, text: str) -> Note:
        """
        Parse a single note such as 'Bb' or 'F##'.

        Raises:
            ShorthandSyntaxError: If the text is not a complete note
        """
        cursor = _Cursor(text)
        note = self._note(cursor)
        self._expect_end(cursor)
        return note

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _chord(self, cursor: _Cursor) -> Chord:
        root = self._note(cursor)
        components = self._quality(cursor)

        alterations = self._alterations(cursor)
        structure = (
            ChordStructure.new()
            .insert_many(components.items())
            .merge(ChordStructure.new().insert_many(alterations))
        )

        if cursor.eat("/"):
            return Chord.new_slash(self._note(cursor), root, structure)
        return Chord.new(root, structure)

    def _note(self, cursor: _Cursor) -> Note:
        letter = NoteClass.from_char(cursor.peek())
        if letter is None:
            raise cursor.error("note letter A-G")
        cursor.pos += 1
        return Note(letter, self._accidentals(cursor))

    def _accidentals(self, cursor: _Cursor) -> PitchOffset:
        """Count a run of sharps or a run of flats (never mixed)."""
        for char, sign in ((_SHARP, 1), (_FLAT, -1)):
            count = 0
            while cursor.eat(char):
                count += 1
            if count:
                return sign * count
        return 0

    def _quality(self, cursor: _Cursor) -> dict[PitchClass, PitchOffset]:
        """Parse quality, extension and suspension into chord components."""
        start = cursor.pos
        matched = self.vocabulary.match(cursor.text, cursor.pos)
        if matched is None:
            quality = self.vocabulary.default_quality
        else:
            quality, symbol = matched
            cursor.pos += len(symbol)

        components = dict(quality.get_components())

        extension_pos = cursor.pos
        extension = self._extension(cursor) or quality.implied_extension
        if extension == 6:
            components[PitchClass.SIXTH] = 0
        elif extension is not None:
            if quality.seventh is None:
                raise cursor.error(
                    ErrorMessages.NO_EXTENSION.format(quality=quality.name),
                    extension_pos,
                )
            top = PitchClass.from_degree(extension)
            if top is None:
                raise cursor.error("extension 6, 7, 9, 11 or 13", start)
            for degree in top.extended_intervals():
                components[degree] = quality.seventh if degree == PitchClass.SEVENTH else 0

        if cursor.eat(_SUS):
            suspended = PitchClass.FOURTH
            if cursor.eat("2"):
                suspended = PitchClass.SECOND
            else:
                cursor.eat("4")
            components.pop(PitchClass.THIRD, None)
            components[suspended] = 0

        return components

    def _extension(self, cursor: _Cursor) -> int | None:
        start = cursor.pos
        number = self._number(cursor)
        if number is None:
            return None
        if number not in EXTENSIONS:
            raise cursor.error("extension 6, 7, 9, 11 or 13", start)
        return number

    def _number(self, cursor: _Cursor) -> int | None:
        """Read up to two ASCII digits."""
        start = cursor.pos
        while _is_digit(cursor.peek()):
            if cursor.pos - start == _MAX_DIGITS:
                raise cursor.error(f"number of at most {_MAX_DIGITS} digits", start)
            cursor.pos += 1
        if cursor.pos == start:
            return None
        return int(cursor.text[start : cursor.pos])

    def _alterations(self, cursor: _Cursor) -> list[ChordComponent]:
        """Parse bare and parenthesized alterations, in written order."""
        alterations: list[ChordComponent] = []
        while True:
            if cursor.eat("("):
                alterations.append(self._alteration(cursor, bare=False))
                while cursor.eat(","):
                    alterations.append(self._alteration(cursor, bare=False))
                if not cursor.eat(")"):
                    raise cursor.error("',' or ')'")
            elif cursor.peek() in (_SHARP, _FLAT) or cursor.startswith(_ADD):
                alterations.append(self._alteration(cursor, bare=True))
            else:
                return alterations

    def _alteration(self, cursor: _Cursor, bare: bool) -> ChordComponent:
        if cursor.eat(_ADD):
            return self._degree(cursor), 0

        offset = self._accidentals(cursor)
        if bare and offset == 0:
            raise cursor.error("'#', 'b' or 'add'")
        return self._degree(cursor), offset

    def _degree(self, cursor: _Cursor) -> PitchClass:
        start = cursor.pos
        number = self._number(cursor)
        degree = PitchClass.from_degree(number) if number is not None else None
        if degree is None:
            raise cursor.error("chord degree 1-7, 9, 11 or 13", start)
        return degree

    def _expect_end(self, cursor: _Cursor) -> None:
        if not cursor.at_end():
            raise cursor.error("end of input")


@lru_cache(maxsize=1)
def get_default_parser() -> ShorthandParser:
    """Parser over the built-in vocabulary, created on first use."""
    return ShorthandParser()


def parse_chord(text: str) -> Chord:
    """Parse a chord using the built-in vocabulary."""
    return get_default_parser().parse_chord(text)


def parse_polychord(text: str) -> PolyChord:
    """Parse a polychord using the built-in vocabulary."""
    return get_default_parser().parse_polychord(text)
