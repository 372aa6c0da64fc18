"""Server-Sent Event payloads emitted by the assistance stream."""
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


class AssistanceEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event: ClassVar[str] = "message"

    def to_sse(self) -> str:
        """Format as SSE event string."""
        return f"event: {self.event}\ndata: {self.model_dump_json(by_alias=True, exclude_none=True)}\n\n"


class MetadataEvent(AssistanceEvent):
    event: ClassVar[str] = "metadata"

    title: str
    language: str
    language_display: str = Field(alias="languageDisplay")
    from_cache: bool = Field(alias="fromCache")


class DataEvent(AssistanceEvent):
    event: ClassVar[str] = "data"

    text: str
    fallback: Optional[bool] = None


class CompleteEvent(AssistanceEvent):
    event: ClassVar[str] = "complete"

    complete: bool = True


class ErrorEvent(AssistanceEvent):
    event: ClassVar[str] = "error"

    error: str
