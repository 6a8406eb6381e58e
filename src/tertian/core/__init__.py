"""
Core chord primitives - the value layer.

These are immutable values that everything else composes on:
- NoteClass: The 7 natural letter names (A-G)
- PitchClass: Chord degrees relative to a root (unison to 13th)
- Note: A letter name with accidentals, resolves degrees to notes
- ChordStructure: Sparse degree -> alteration table
- Chord: Root note + structure, optionally over a slash note
- PolyChord: Two chords stacked
"""

from tertian.core.chord import Chord, PolyChord
from tertian.core.pitch import ChordComponent, Note, NoteClass, PitchClass, PitchOffset
from tertian.core.structure import ChordStructure

__all__ = [
    # Pitch
    "NoteClass",
    "PitchClass",
    "PitchOffset",
    "ChordComponent",
    "Note",
    # Structure
    "ChordStructure",
    # Chord
    "Chord",
    "PolyChord",
]
