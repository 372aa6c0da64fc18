"""Single-slot JSON persistence for the most recent mentor response."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as ModelValidationError

from dsa_mentor.errors import PersistenceError
from dsa_mentor.languages import display_name
from dsa_mentor.assistance.sanitizer import ResponseSanitizer

logger = logging.getLogger(__name__)

EMPTY_INDEX = -1


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class StoredResponse(BaseModel):
    """The cache record; at most one exists on disk."""
    model_config = ConfigDict(populate_by_name=True)

    question_index: int = Field(alias="questionIndex")
    title: str = ""
    language: str
    language_display: str = Field(default="", alias="languageDisplay")
    response: str = ""
    timestamp: str = Field(default_factory=_utcnow)

    @property
    def is_empty(self) -> bool:
        return self.question_index == EMPTY_INDEX

    def matches(self, question_index: int, language: str) -> bool:
        return self.question_index == question_index and self.language == language


class ResponseStore:
    """Keeps exactly one response in a JSON file, overwritten on every save.

    There is no locking: two requests saving at once race and the last
    writer wins. Treat it as a single-writer cache.
    """

    def __init__(
        self,
        path: Path,
        default_language: str = "python",
        sanitizer: Optional[ResponseSanitizer] = None,
    ):
        self.path = Path(path)
        self.default_language = default_language
        self.sanitizer = sanitizer or ResponseSanitizer()

    def _ensure_directory(self) -> None:
        if not self.path.parent.exists():
            logger.info("Creating storage directory: %s", self.path.parent)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, record: StoredResponse) -> None:
        self._ensure_directory()
        self.path.write_text(
            json.dumps(record.model_dump(by_alias=True), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def load(self) -> Optional[StoredResponse]:
        """Return the stored record, or None when nothing (or the empty record) is stored."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            record = StoredResponse.model_validate(data)
        except (OSError, json.JSONDecodeError, ModelValidationError) as e:
            raise PersistenceError(f"Error loading stored response: {e}") from e
        if record.is_empty:
            return None
        return record

    def save(self, question_index: int, title: str, text: str, language: str) -> bool:
        """Sanitize ``text`` and store it, replacing whatever was there."""
        record = StoredResponse(
            question_index=question_index,
            title=title,
            language=language,
            language_display=display_name(language),
            response=self.sanitizer.sanitize(text),
        )
        try:
            self._write(record)
        except OSError as e:
            logger.error("Error saving response: %s", e)
            return False
        logger.info(
            "Response for question %d with language %s saved to storage",
            question_index,
            record.language_display,
        )
        return True

    def clear(self) -> bool:
        """Reset the slot to the empty record. Returns False if no store file exists."""
        if not self.path.exists():
            return False
        empty = StoredResponse(
            question_index=EMPTY_INDEX,
            language=self.default_language,
            language_display=display_name(self.default_language),
        )
        try:
            self._write(empty)
        except OSError as e:
            raise PersistenceError(f"Failed to clear cache: {e}") from e
        logger.info("Response cache cleared")
        return True
