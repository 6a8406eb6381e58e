#!/usr/bin/env python3
"""
Example: Spelling Chords.

This demonstrates building chords by hand and from shorthand, then
spelling out every note.

Usage:
    python examples/spell_chords.py
"""

from tertian import Chord, ChordStructure, Note, NoteClass, PitchClass, PolyChord
from tertian.shorthand import ShorthandSyntaxError


def main() -> None:
    """Demonstrate chord spelling."""
    print("Tertian Chord Spelling Demo")
    print("=" * 40)
    print()

    # Manual construction of A#Maj13(#5,#11)
    structure = ChordStructure.new().insert_many(
        [
            (PitchClass.THIRD, 0),
            (PitchClass.FIFTH, 1),
            (PitchClass.SEVENTH, 0),
            (PitchClass.NINTH, 0),
            (PitchClass.ELEVENTH, 1),
            (PitchClass.THIRTEENTH, 0),
        ]
    )
    manual = Chord.new(Note(NoteClass.A, 1), structure)
    parsed = Chord.from_shorthand("A#Maj13(#5,#11)")
    print(f"A#Maj13(#5,#11): {' '.join(str(n) for n in manual)}")
    # Compound degrees keep their octave as extra sharps; interval_to reduces it
    semitones = [manual.root.interval_to(n) for n in manual]
    print(f"  Semitones above the root: {semitones}")
    print(f"  Same as shorthand: {manual == parsed}")
    print()

    # Shorthand
    print("Shorthand:")
    for text in ["C", "Am7", "Bbm7b5", "F#7(b9,#11)", "Gsus4", "Ebdim7", "D/F#"]:
        notes = " ".join(str(n) for n in Chord.from_shorthand(text))
        print(f"  {text:<12} {notes}")
    print()

    # Polychords: upper|lower, notes come lower first
    polychord = PolyChord.from_shorthand("D|C")
    print(f"D|C: {' '.join(str(n) for n in polychord)}")
    print()

    # Errors carry the failing position
    try:
        Chord.from_shorthand("C(#5")
    except ShorthandSyntaxError as e:
        print(f"Error: {e}")
        print(f"  Unparsed: {e.remainder!r}")


if __name__ == "__main__":
    main()
