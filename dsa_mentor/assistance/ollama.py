"""Streaming client for Ollama's /api/generate endpoint."""
import json
import logging
from typing import AsyncIterator

import httpx

from dsa_mentor.errors import InferenceUnavailable

logger = logging.getLogger(__name__)


class OllamaClient:
    """Yields response fragments from a streamed generation.

    Every failure (refused connection, timeout, non-2xx status, malformed or
    error lines) is raised as ``InferenceUnavailable``.
    """

    def __init__(self, client: httpx.AsyncClient, url: str, model: str, timeout: float = 150.0):
        self.client = client
        self.url = url
        self.model = model
        self.timeout = timeout

    @staticmethod
    def parse_line(line: str) -> str:
        """Extract the text fragment from one NDJSON record ('' when it has none)."""
        try:
            chunk = json.loads(line)
        except json.JSONDecodeError as e:
            raise InferenceUnavailable(f"Malformed chunk from Ollama: {line[:80]!r}") from e
        if not isinstance(chunk, dict):
            raise InferenceUnavailable(f"Unexpected chunk from Ollama: {line[:80]!r}")
        if chunk.get("error"):
            raise InferenceUnavailable(f"Ollama error: {chunk['error']}")
        return chunk.get("response") or ""

    async def stream_generate(self, prompt: str) -> AsyncIterator[str]:
        payload = {"model": self.model, "prompt": prompt, "stream": True}
        try:
            async with self.client.stream(
                "POST", self.url, json=payload, timeout=self.timeout
            ) as response:
                response.raise_for_status()
                async for line in response.aiter_lines():
                    if not line.strip():
                        continue
                    fragment = self.parse_line(line)
                    if fragment:
                        yield fragment
        except httpx.HTTPError as e:
            logger.warning("Ollama request failed: %s", e)
            raise InferenceUnavailable(f"Ollama service unavailable: {e}") from e
