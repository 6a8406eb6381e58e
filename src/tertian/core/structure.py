"""
ChordStructure - the intervallic shape of a chord.

A structure is relative to no particular root, so the same structure can be
spelled from any note. It is a fixed table with one slot per PitchClass;
each slot is either absent or holds the alteration for that degree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tertian.constants import PITCH_CLASS_COUNT, ErrorMessages
from tertian.core.pitch import ChordComponent, PitchClass, PitchOffset


@dataclass(frozen=True)
class ChordStructure:
    """
    Sparse table of chord degrees to alterations.

    Built fluently; every operation returns a new structure:

        ChordStructure.new().insert_many([(PitchClass.THIRD, -1), (PitchClass.FIFTH, 0)])

    Slots are only ever overwritten, never removed.

    Immutable and hashable.
    """

    slots: tuple[PitchOffset | None, ...]

    def __post_init__(self) -> None:
        if len(self.slots) != PITCH_CLASS_COUNT:
            raise ValueError(
                ErrorMessages.INVALID_SLOT_COUNT.format(
                    expected=PITCH_CLASS_COUNT, count=len(self.slots)
                )
            )

    @classmethod
    def new(cls) -> ChordStructure:
        """A structure holding only the root (unison, unaltered)."""
        slots: list[PitchOffset | None] = [None] * PITCH_CLASS_COUNT
        slots[PitchClass.UNISON] = 0
        return cls(tuple(slots))

    def insert(self, degree: PitchClass | int, offset: PitchOffset) -> ChordStructure:
        """Set one degree, overwriting any existing alteration."""
        return self.insert_many([(PitchClass(degree), offset)])

    def insert_many(self, components: Iterable[ChordComponent]) -> ChordStructure:
        """
        Set several degrees in order.

        When a degree appears more than once, the last one wins.
        """
        slots = list(self.slots)
        for degree, offset in components:
            slots[PitchClass(degree)] = offset
        return ChordStructure(tuple(slots))

    def merge(self, other: ChordStructure) -> ChordStructure:
        """
        Overlay another structure onto this one.

        Every degree present in `other` replaces ours; degrees absent in
        `other` are kept. Not commutative.
        """
        return ChordStructure(
            tuple(
                theirs if theirs is not None else ours
                for ours, theirs in zip(self.slots, other.slots, strict=True)
            )
        )

    def get(self, degree: PitchClass) -> PitchOffset | None:
        """Alteration for a degree, or None if the degree is absent."""
        return self.slots[degree]

    def components(self) -> Iterator[ChordComponent]:
        """Present (degree, alteration) pairs, unison first."""
        for index, offset in enumerate(self.slots):
            if offset is not None:
                yield PitchClass(index), offset

    def __contains__(self, degree: object) -> bool:
        if not isinstance(degree, PitchClass):
            return False
        return self.slots[degree] is not None

    def __len__(self) -> int:
        return sum(1 for offset in self.slots if offset is not None)

    def __repr__(self) -> str:
        parts = ", ".join(f"{degree.degree}: {offset:+d}" for degree, offset in self.components())
        return f"ChordStructure({{{parts}}})"
