"""
Quality models - the keyword vocabulary of chord shorthand.

A quality names a triad-level shape ("m", "dim", "Maj") and says how a
seventh is altered when the chord is extended. The vocabulary is data,
loaded from YAML, so new keywords need no code changes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from tertian.constants import EXTENSIONS, ErrorMessages
from tertian.core.pitch import ChordComponent, PitchClass, PitchOffset


def _to_pitch_class(number: int) -> PitchClass:
    degree = PitchClass.from_degree(number)
    if degree is None:
        raise ValueError(ErrorMessages.UNKNOWN_DEGREE.format(degree=number))
    return degree


class QualityDefinition(BaseModel):
    """A single chord quality and the symbols that name it."""

    name: str = Field(..., description="Quality identifier (e.g., 'minor')")
    description: str = Field(default="", description="Human-readable description")
    symbols: list[str] = Field(
        default_factory=list,
        description="Shorthand spellings, matched case-sensitively",
    )
    components: dict[int, PitchOffset] = Field(
        default_factory=dict,
        description="Degree number -> alteration for the basic shape",
    )
    seventh: PitchOffset | None = Field(
        default=None,
        description="Alteration of the 7th when extended; None forbids extensions",
    )
    implied_extension: int | None = Field(
        default=None,
        description="Extension applied when none is written (e.g., 7 for half-diminished)",
    )

    model_config = {"frozen": True}

    @field_validator("components")
    @classmethod
    def validate_components(cls, v: dict[int, PitchOffset]) -> dict[int, PitchOffset]:
        """Ensure every component is a known degree."""
        for number in v:
            _to_pitch_class(number)
        return v

    @field_validator("implied_extension")
    @classmethod
    def validate_implied_extension(cls, v: int | None) -> int | None:
        """Ensure the implied extension is one shorthand could write."""
        if v is not None and v not in EXTENSIONS:
            raise ValueError(ErrorMessages.INVALID_IMPLIED_EXTENSION.format(extension=v))
        return v

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: list[str]) -> list[str]:
        """Drop empty symbols; the default quality needs none."""
        return [symbol for symbol in v if symbol]

    @model_validator(mode="after")
    def validate_implied_seventh(self) -> QualityDefinition:
        """An implied 7th or higher needs a seventh alteration."""
        if self.implied_extension not in (None, 6) and self.seventh is None:
            raise ValueError(
                ErrorMessages.IMPLIED_EXTENSION_NEEDS_SEVENTH.format(
                    name=self.name, extension=self.implied_extension
                )
            )
        return self

    def get_components(self) -> list[ChordComponent]:
        """The basic shape as (PitchClass, alteration) pairs."""
        return [(_to_pitch_class(number), offset) for number, offset in self.components.items()]


class QualityVocabulary(BaseModel):
    """
    The complete set of qualities a parser understands.

    `default` names the quality used when no symbol follows the root.
    """

    default: str = Field(default="major", description="Quality for a bare root")
    qualities: list[QualityDefinition] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_vocabulary(self) -> QualityVocabulary:
        """Ensure the default exists and no symbol is ambiguous."""
        if self.default not in {quality.name for quality in self.qualities}:
            raise ValueError(ErrorMessages.UNKNOWN_DEFAULT_QUALITY.format(name=self.default))

        owners: dict[str, str] = {}
        for quality in self.qualities:
            for symbol in quality.symbols:
                first = owners.setdefault(symbol, quality.name)
                if first != quality.name:
                    raise ValueError(
                        ErrorMessages.DUPLICATE_SYMBOL.format(
                            symbol=symbol, first=first, second=quality.name
                        )
                    )
        return self

    def get_quality(self, name: str) -> QualityDefinition | None:
        """Get a quality by name."""
        for quality in self.qualities:
            if quality.name == name:
                return quality
        return None

    @property
    def default_quality(self) -> QualityDefinition:
        """The quality used when no symbol matches."""
        quality = self.get_quality(self.default)
        if quality is None:
            raise ValueError(ErrorMessages.UNKNOWN_DEFAULT_QUALITY.format(name=self.default))
        return quality

    def match(self, text: str, position: int = 0) -> tuple[QualityDefinition, str] | None:
        """
        Find the longest symbol starting at `position`.

        Returns:
            (quality, matched symbol), or None if no symbol matches
        """
        best: tuple[QualityDefinition, str] | None = None
        for quality in self.qualities:
            for symbol in quality.symbols:
                if text.startswith(symbol, position) and (best is None or len(symbol) > len(best[1])):
                    best = (quality, symbol)
        return best
