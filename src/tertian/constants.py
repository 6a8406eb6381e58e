"""
Constants for the chord model and shorthand parser.

No magic strings - error messages are defined once here.
"""

# Number of natural letter names (A-G)
NOTE_CLASS_COUNT = 7

# Number of chord degree slots (unison, 2, 3, 4, 5, 6, 7, 9, 11, 13)
PITCH_CLASS_COUNT = 10

# Extensions accepted after a chord quality in shorthand
EXTENSIONS: tuple[int, ...] = (6, 7, 9, 11, 13)

# Built-in quality vocabulary file name
QUALITIES_FILE = "qualities.yaml"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_SLOT_COUNT = "ChordStructure needs {expected} slots, got {count}."
    SHORTHAND_SYNTAX = "Invalid chord shorthand {text!r} at position {position}: expected {expected}."
    NO_EXTENSION = "no extension after quality '{quality}'"
    UNKNOWN_DEGREE = "Unknown chord degree: {degree}."
    INVALID_IMPLIED_EXTENSION = "Implied extension must be one of 6, 7, 9, 11 or 13, got {extension}."
    IMPLIED_EXTENSION_NEEDS_SEVENTH = "Quality '{name}' implies extension {extension} but has no seventh."
    UNKNOWN_DEFAULT_QUALITY = "Default quality '{name}' is not defined."
    DUPLICATE_SYMBOL = "Symbol {symbol!r} is used by both '{first}' and '{second}'."
    INVALID_VOCABULARY_FILE = "Invalid quality vocabulary file: {path}."
    VOCABULARY_NOT_FOUND = "Quality vocabulary file not found: {path}."
