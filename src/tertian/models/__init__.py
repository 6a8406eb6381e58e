"""
Pydantic models for the chord system.

This module provides:
- QualityDefinition: One chord quality and its shorthand symbols
- QualityVocabulary: The full set of qualities a parser understands
"""

from tertian.models.quality import QualityDefinition, QualityVocabulary

__all__ = [
    "QualityDefinition",
    "QualityVocabulary",
]
