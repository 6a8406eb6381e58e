"""
Pitch primitives - NoteClass, PitchClass and Note.

These are the foundational types for all chord spelling.
NoteClass is one of the seven natural letter names (octave-independent).
PitchClass is a chord degree relative to a root (unison through 13th).
Note is a letter name with an accidental count, and owns interval resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tertian.constants import NOTE_CLASS_COUNT, PITCH_CLASS_COUNT

# Lookup tables (module level to avoid IntEnum member issues)

# Semitones above A for each natural letter, indexed by NoteClass
_LETTER_SEMITONES: list[int] = [0, 2, 3, 5, 7, 8, 10]

# Natural letter steps above the root, indexed by PitchClass
_LETTER_OFFSETS: list[int] = [0, 1, 2, 3, 4, 5, 6, 1, 3, 5]

# Semitones above the root for the unaltered degree, indexed by PitchClass
_DEGREE_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11, 14, 17, 21]

# Conventional degree numbers, indexed by PitchClass
_DEGREE_NUMBERS: list[int] = [1, 2, 3, 4, 5, 6, 7, 9, 11, 13]


class NoteClass(IntEnum):
    """
    The 7 natural letter names (0-6).

    Ordering exists for indexing only; pitch distance between letters is
    circular and measured with difference().
    """

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6

    @classmethod
    def from_char(cls, char: str) -> NoteClass | None:
        """Get the letter for a single character like 'A', or None."""
        return cls.__members__.get(char) if len(char) == 1 else None

    @classmethod
    def from_int(cls, value: int) -> NoteClass | None:
        """Get the letter for an index 0-6, or None."""
        if 0 <= value < NOTE_CLASS_COUNT:
            return cls(value)
        return None

    def to_int(self) -> int:
        """Index of this letter (A=0 ... G=6)."""
        return int(self)

    @property
    def semitone_offset(self) -> int:
        """Semitones above A for the natural letter."""
        return _LETTER_SEMITONES[self]

    def difference(self, other: NoteClass) -> int:
        """
        Semitones from this letter up to another.

        Always in the range 0-11; A -> B is 2, B -> A is 10.
        """
        return (other.semitone_offset + 12 - self.semitone_offset) % 12

    def __str__(self) -> str:
        return self.name


class PitchClass(IntEnum):
    """
    A chord degree relative to the root, unaltered (0-9 storage slot).

    Compound degrees (9th, 11th, 13th) land on the same letter as the
    2nd, 4th and 6th but sit an octave higher.
    """

    UNISON = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    NINTH = 7
    ELEVENTH = 8
    THIRTEENTH = 9

    @classmethod
    def from_int(cls, value: int) -> PitchClass | None:
        """Get the degree stored in slot 0-9, or None."""
        if 0 <= value < PITCH_CLASS_COUNT:
            return cls(value)
        return None

    @classmethod
    def from_degree(cls, number: int) -> PitchClass | None:
        """Get the degree for a conventional number like 5 or 13, or None."""
        if number in _DEGREE_NUMBERS:
            return cls(_DEGREE_NUMBERS.index(number))
        return None

    def index(self) -> int:
        """Storage slot of this degree."""
        return int(self)

    @property
    def degree(self) -> int:
        """Conventional degree number (1, 2, ... 7, 9, 11, 13)."""
        return _DEGREE_NUMBERS[self]

    @property
    def letter_offset(self) -> int:
        """Natural letter steps above the root (mod 7)."""
        return _LETTER_OFFSETS[self]

    @property
    def semitones(self) -> int:
        """Semitones above the root for the unaltered degree."""
        return _DEGREE_SEMITONES[self]

    def extended_intervals(self) -> list[PitchClass]:
        """
        The extensions implied by naming this degree as a chord extension.

        A C11 chord implicitly carries the 7th and 9th, so ELEVENTH returns
        [SEVENTH, NINTH, ELEVENTH]. Degrees below the 7th return [].
        """
        if self < PitchClass.SEVENTH:
            return []
        return [PitchClass(i) for i in range(PitchClass.SEVENTH, self + 1)]

    def __str__(self) -> str:
        return str(self.degree)


# Signed accidental count: positive = sharps, negative = flats
PitchOffset = int

# A degree of a chord with its alteration, e.g. (PitchClass.SEVENTH, -1)
ChordComponent = tuple[PitchClass, PitchOffset]


@dataclass(frozen=True)
class Note:
    """
    A spelled note: a natural letter plus accidentals.

    Octave-independent. C# and Db are distinct notes here; nothing in this
    package respells one as the other.

    Immutable and hashable.
    """

    letter: NoteClass
    offset: PitchOffset = 0

    def get_relative(self, component: ChordComponent) -> Note:
        """
        Resolve a chord degree above this note.

        The letter is always the diatonic one for the degree (a 3rd above
        A is some kind of C), and the accidentals make the distance exact:
        degree.semitones + alteration semitones above this note. Compound
        degrees keep their octave in the accidentals, so a plain 9th above
        C is D raised by 12.

        Args:
            component: (degree, alteration) pair

        Returns:
            The spelled note
        """
        degree, alteration = component
        letter = NoteClass((self.letter + degree.letter_offset) % NOTE_CLASS_COUNT)
        correction = degree.semitones - self.letter.difference(letter)
        return Note(letter, self.offset + alteration + correction)

    def interval_to(self, other: Note) -> int:
        """Ascending semitones from this note to another (0-11)."""
        return (self.letter.difference(other.letter) + other.offset - self.offset) % 12

    def __str__(self) -> str:
        accidental = "#" if self.offset > 0 else "b"
        return f"{self.letter.name}{accidental * abs(self.offset)}"

    def __repr__(self) -> str:
        return f"Note({self})"
