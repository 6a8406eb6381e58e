"""
tertian - tertian chords as composable values.

Build chords from a root note and an intervallic structure, or from
shorthand text, and spell out every note:

    >>> from tertian import Chord
    >>> [str(note) for note in Chord.from_shorthand("Am7")]
    ['A', 'C', 'E', 'G']
"""

from tertian.core import (
    Chord,
    ChordComponent,
    ChordStructure,
    Note,
    NoteClass,
    PitchClass,
    PitchOffset,
    PolyChord,
)
from tertian.shorthand import ShorthandParser, ShorthandSyntaxError

__all__ = [
    "Chord",
    "ChordComponent",
    "ChordStructure",
    "Note",
    "NoteClass",
    "PitchClass",
    "PitchOffset",
    "PolyChord",
    "ShorthandParser",
    "ShorthandSyntaxError",
]
