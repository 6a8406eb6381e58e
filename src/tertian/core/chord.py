"""
Chord primitives - Chord and PolyChord.

A chord is a root note plus a ChordStructure, optionally over a slash
(bass) note. A polychord stacks two independently rooted chords.

    root = Note(NoteClass.A, 1)
    structure = ChordStructure.new().insert_many([
        (PitchClass.THIRD, 0),
        (PitchClass.FIFTH, 1),
        (PitchClass.SEVENTH, 0),
        (PitchClass.NINTH, 0),
        (PitchClass.ELEVENTH, 1),
        (PitchClass.THIRTEENTH, 0),
    ])
    Chord.new(root, structure) == Chord.from_shorthand("A#Maj13(#5,#11)")
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain

from tertian.core.pitch import Note
from tertian.core.structure import ChordStructure


@dataclass(frozen=True)
class Chord:
    """
    A concrete tertian chord.

    Iterating yields the slash note (if any), then one note per present
    degree in degree order, unison to 13th. This is structural order, not
    sorted pitch order.
    """

    root: Note
    structure: ChordStructure
    slash_root: Note | None = None

    @classmethod
    def new(cls, root: Note, structure: ChordStructure) -> Chord:
        """Create a chord without a slash note."""
        return cls(root, structure)

    @classmethod
    def new_slash(cls, slash_root: Note, root: Note, structure: ChordStructure) -> Chord:
        """Create a slash chord sounding `slash_root` in the bass."""
        return cls(root, structure, slash_root)

    @classmethod
    def from_shorthand(cls, text: str) -> Chord:
        """
        Parse a chord from shorthand like 'C', 'Bbm7b5' or 'A/C#'.

        Raises:
            ShorthandSyntaxError: If the text is not a valid chord
        """
        # Local import: the parser builds values from this module
        from tertian.shorthand.parser import parse_chord

        return parse_chord(text)

    def iter(self) -> Iterator[Note]:
        """Return a fresh iterator over every note of the chord."""
        if self.slash_root is not None:
            yield self.slash_root
        for component in self.structure.components():
            yield self.root.get_relative(component)

    def notes(self) -> list[Note]:
        """All notes of the chord as a list."""
        return list(self.iter())

    def __iter__(self) -> Iterator[Note]:
        return self.iter()


@dataclass(frozen=True)
class PolyChord:
    """
    Two chords stacked: `upper` sounded above `lower`.

    The structures are never merged; iteration is the lower chord's notes
    followed by the upper chord's notes.
    """

    upper: Chord
    lower: Chord

    @classmethod
    def new(cls, upper: Chord, lower: Chord) -> PolyChord:
        """Create a polychord from its upper and lower chords."""
        return cls(upper, lower)

    @classmethod
    def from_shorthand(cls, text: str) -> PolyChord:
        """
        Parse a polychord from shorthand like 'C|Am' (upper|lower).

        Raises:
            ShorthandSyntaxError: If the text is not a valid polychord
        """
        from tertian.shorthand.parser import parse_polychord

        return parse_polychord(text)

    def iter(self) -> Iterator[Note]:
        """Return a fresh iterator over the lower then the upper chord."""
        return chain(self.lower.iter(), self.upper.iter())

    def notes(self) -> list[Note]:
        """All notes of the polychord as a list."""
        return list(self.iter())

    def __iter__(self) -> Iterator[Note]:
        return self.iter()
