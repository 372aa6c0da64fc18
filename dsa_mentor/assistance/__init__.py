"""Streaming assistance pipeline: prompt, relay, sanitize, cache, fallback."""
from .fallback import build_fallback_response
from .ollama import OllamaClient
from .prompts import SECTION_HEADINGS, build_prompt
from .sanitizer import ResponseSanitizer, sanitize_response
from .service import AssistanceRequest, AssistanceResult, AssistanceService
from .store import ResponseStore, StoredResponse

__all__ = [
    "build_fallback_response",
    "OllamaClient",
    "SECTION_HEADINGS",
    "build_prompt",
    "ResponseSanitizer",
    "sanitize_response",
    "AssistanceRequest",
    "AssistanceResult",
    "AssistanceService",
    "ResponseStore",
    "StoredResponse",
]
