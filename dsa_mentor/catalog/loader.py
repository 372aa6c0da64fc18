"""Reads the problem catalog from disk on every request."""
import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError as ModelValidationError

from dsa_mentor.errors import CatalogLoadError, ProblemNotFound
from dsa_mentor.catalog.models import Problem

logger = logging.getLogger(__name__)


class ProblemCatalog:
    """JSON array of problems, looked up by ordinal index.

    The file is re-read on each call so edits show up without a restart.
    """

    def __init__(self, candidates: Iterable[Path]):
        self.candidates = list(candidates)

    def _find_file(self) -> Path:
        for path in self.candidates:
            if path.exists():
                logger.debug("Found questions file at %s", path)
                return path
        tried = ", ".join(str(p) for p in self.candidates)
        raise CatalogLoadError(f"Failed to load questions data (tried: {tried})")

    def load(self) -> list[Problem]:
        path = self._find_file()
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading questions from %s: %s", path, e)
            raise CatalogLoadError(f"Failed to load questions data: {e}") from e

        if not isinstance(raw, list) or not raw:
            raise CatalogLoadError("Failed to load questions data: no problems found")

        try:
            return [Problem.model_validate(item) for item in raw]
        except ModelValidationError as e:
            raise CatalogLoadError(f"Invalid problem record in {path}: {e}") from e

    def get(self, index: int) -> tuple[Problem, int]:
        """Return the problem at ``index`` and the catalog size."""
        problems = self.load()
        if index < 0 or index >= len(problems):
            raise ProblemNotFound(
                f"Question not found at index {index}. Total questions: {len(problems)}"
            )
        return problems[index], len(problems)
