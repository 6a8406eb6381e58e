"""
Shorthand chord parsing.

Turns chord symbols ('Cm7', 'A#Maj13(#5,#11)', 'A/C#', 'C|Am') into
Chord and PolyChord values. Quality keywords are loaded from a YAML
vocabulary so they can be extended per project.
"""

from tertian.shorthand.loader import QualityLoader
from tertian.shorthand.parser import (
    ShorthandParser,
    ShorthandSyntaxError,
    get_default_parser,
    parse_chord,
    parse_polychord,
)

__all__ = [
    "QualityLoader",
    "ShorthandParser",
    "ShorthandSyntaxError",
    "get_default_parser",
    "parse_chord",
    "parse_polychord",
]
