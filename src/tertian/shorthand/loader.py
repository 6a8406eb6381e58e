"""
Quality loader - discovers and loads the shorthand quality vocabulary.

Vocabularies can come from:
1. Built-in library (shipped with package)
2. Project vocabulary (a user's directory holding qualities.yaml)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tertian.constants import QUALITIES_FILE, ErrorMessages
from tertian.models.quality import QualityVocabulary

logger = logging.getLogger(__name__)


class QualityLoader:
    """
    Loads the quality vocabulary used by the shorthand parser.

    The library vocabulary is always loaded. A project vocabulary, when
    present, overrides library qualities with the same name, adds new ones,
    and may change the default quality.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the quality loader.

        Args:
            library_path: Directory holding the built-in qualities.yaml
            project_path: Directory holding a project qualities.yaml
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: QualityVocabulary | None = None

    def load(self) -> QualityVocabulary:
        """
        Load the merged vocabulary.

        Returns:
            The validated vocabulary

        Raises:
            ValueError: If a file is missing, malformed or fails validation
        """
        if self._cache is not None:
            return self._cache

        library_file = self.library_path / QUALITIES_FILE
        if not library_file.exists():
            raise ValueError(ErrorMessages.VOCABULARY_NOT_FOUND.format(path=library_file))
        data = self._read_file(library_file)

        if self.project_path:
            project_file = self.project_path / QUALITIES_FILE
            if project_file.exists():
                data = self._merge(data, self._read_file(project_file))

        try:
            vocabulary = QualityVocabulary.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid quality vocabulary: {e}") from e

        logger.debug(
            "Loaded %d chord qualities (default: %s)",
            len(vocabulary.qualities),
            vocabulary.default,
        )
        self._cache = vocabulary
        return vocabulary

    def _read_file(self, path: Path) -> dict[str, Any]:
        """Read a vocabulary document from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(ErrorMessages.INVALID_VOCABULARY_FILE.format(path=path)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.INVALID_VOCABULARY_FILE.format(path=path))

        # Every quality entry is a mapping; a bare "qualities:" key means none
        qualities = data.get("qualities")
        if qualities is None:
            qualities = []
        if not isinstance(qualities, list) or not all(isinstance(q, dict) for q in qualities):
            raise ValueError(ErrorMessages.INVALID_VOCABULARY_FILE.format(path=path))
        data = {**data, "qualities": qualities}

        logger.debug("Read quality vocabulary from %s", path)
        return data

    def _merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Overlay project vocabulary data onto library data by quality name."""
        replaced = {q.get("name"): q for q in override.get("qualities", [])}
        qualities = [replaced.pop(q.get("name"), q) for q in base.get("qualities", [])]
        qualities.extend(replaced.values())

        merged = dict(base)
        merged["qualities"] = qualities
        if "default" in override:
            merged["default"] = override["default"]
        return merged

    def clear_cache(self) -> None:
        """Clear the vocabulary cache."""
        self._cache = None
