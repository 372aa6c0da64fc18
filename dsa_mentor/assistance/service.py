"""Cache-or-generate orchestration for problem assistance.

One ``AssistanceService`` is built per request. Both the streaming and the
buffered entry points run the same steps:

    prepare -> cached_response -> (cache hit) or
    fragments -> finalize, with fallback() when Ollama is unavailable.
"""
import asyncio
import logging
from contextlib import aclosing, suppress
from typing import AsyncIterator, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from dsa_mentor.catalog import Problem, ProblemCatalog
from dsa_mentor.errors import AssistanceError, InferenceUnavailable, PersistenceError, ValidationError
from dsa_mentor.languages import SUPPORTED_LANGUAGES, display_name, normalize_language
from dsa_mentor.assistance.events import (
    AssistanceEvent,
    CompleteEvent,
    DataEvent,
    ErrorEvent,
    MetadataEvent,
)
from dsa_mentor.assistance.fallback import build_fallback_response
from dsa_mentor.assistance.ollama import OllamaClient
from dsa_mentor.assistance.prompts import build_prompt
from dsa_mentor.assistance.store import ResponseStore, StoredResponse

logger = logging.getLogger(__name__)

_END = object()


class AssistanceRequest(BaseModel):
    index: int = 0
    language: Optional[str] = None
    refresh: bool = False


class AssistanceContext(BaseModel):
    """A validated request with its problem resolved."""
    index: int
    problem: Problem
    language: str
    refresh: bool = False

    @property
    def language_display(self) -> str:
        return display_name(self.language)


class AssistanceResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    language: str
    language_display: str = Field(alias="languageDisplay")
    response: str
    from_cache: bool = Field(default=False, alias="fromCache")
    fallback: bool = False


class AssistanceService:
    def __init__(
        self,
        catalog: ProblemCatalog,
        store: ResponseStore,
        inference: OllamaClient,
        language_policy: Literal["strict", "lenient"] = "strict",
        default_language: str = "python",
        relay_buffer_size: int = 64,
    ):
        self.catalog = catalog
        self.store = store
        self.inference = inference
        self.language_policy = language_policy
        self.default_language = default_language
        self.relay_buffer_size = relay_buffer_size

    def resolve_language(self, language: Optional[str]) -> str:
        normalized = normalize_language(language)
        if normalized is not None:
            return normalized

        if self.language_policy == "lenient":
            logger.warning("Unsupported language %r. Defaulting to %s", language, self.default_language)
            return self.default_language

        if not language:
            raise ValidationError("Language parameter is required")
        raise ValidationError(
            f"Unsupported language: {language}. "
            f"Supported languages are: {', '.join(SUPPORTED_LANGUAGES)}"
        )

    async def prepare(self, request: AssistanceRequest) -> AssistanceContext:
        language = self.resolve_language(request.language)
        problem, total = await asyncio.to_thread(self.catalog.get, request.index)
        logger.info(
            "Requested question index: %d, Language: %s, Total questions: %d, Force refresh: %s",
            request.index,
            display_name(language),
            total,
            request.refresh,
        )
        return AssistanceContext(
            index=request.index, problem=problem, language=language, refresh=request.refresh
        )

    async def cached_response(self, ctx: AssistanceContext) -> Optional[StoredResponse]:
        if ctx.refresh:
            return None
        try:
            stored = await asyncio.to_thread(self.store.load)
        except PersistenceError as e:
            # Cache is an optimization; regenerate instead
            logger.error("%s", e.message)
            return None
        if stored is not None and stored.matches(ctx.index, ctx.language):
            logger.info(
                "Using stored response for question index %d with language %s",
                ctx.index,
                ctx.language_display,
            )
            return stored
        return None

    async def fragments(self, prompt: str) -> AsyncIterator[str]:
        """Relay Ollama fragments in arrival order.

        A producer task fills a bounded queue. Closing this generator cancels
        the producer and waits for it, so the Ollama connection is released
        before ``aclose()`` returns.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.relay_buffer_size)

        async def produce() -> None:
            try:
                async with aclosing(self.inference.stream_generate(prompt)) as stream:
                    async for fragment in stream:
                        await queue.put(fragment)
            except Exception as e:
                await queue.put(e)
            else:
                await queue.put(_END)

        producer = asyncio.create_task(produce())
        try:
            while True:
                item = await queue.get()
                if item is _END:
                    return
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            if not producer.done():
                producer.cancel()
            with suppress(asyncio.CancelledError):
                await producer

    async def finalize(self, ctx: AssistanceContext, text: str) -> None:
        await asyncio.to_thread(self.store.save, ctx.index, ctx.problem.title, text, ctx.language)

    async def fallback(self, ctx: AssistanceContext) -> str:
        text = build_fallback_response(ctx.problem, ctx.language)
        await self.finalize(ctx, text)
        return text

    def _metadata(self, ctx: AssistanceContext, from_cache: bool) -> MetadataEvent:
        return MetadataEvent(
            title=ctx.problem.title,
            language=ctx.language,
            language_display=ctx.language_display,
            from_cache=from_cache,
        )

    async def stream(self, request: AssistanceRequest) -> AsyncIterator[AssistanceEvent]:
        """Yield metadata, data events and exactly one terminal event."""
        try:
            ctx = await self.prepare(request)

            cached = await self.cached_response(ctx)
            if cached is not None:
                yield self._metadata(ctx, from_cache=True)
                yield DataEvent(text=cached.response)
                yield CompleteEvent()
                return

            yield self._metadata(ctx, from_cache=False)
            prompt = build_prompt(ctx.problem, ctx.language)
            collected: list[str] = []
            try:
                async with aclosing(self.fragments(prompt)) as fragments:
                    async for fragment in fragments:
                        collected.append(fragment)
                        yield DataEvent(text=fragment)
            except InferenceUnavailable as e:
                logger.warning("Ollama unavailable for question %d, sending fallback: %s", ctx.index, e.message)
                yield DataEvent(text=await self.fallback(ctx), fallback=True)
            else:
                full_response = "".join(collected)
                logger.info("Stream ended, total response length: %d", len(full_response))
                await self.finalize(ctx, full_response)

            yield CompleteEvent()

        except AssistanceError as e:
            logger.warning("Assistance request failed: %s", e.message)
            yield ErrorEvent(error=e.message)
        except Exception as e:
            logger.exception("Unexpected error while streaming assistance")
            yield ErrorEvent(error=str(e))

    async def generate(self, request: AssistanceRequest) -> AssistanceResult:
        """Buffered variant of ``stream``; ``response`` equals the streamed text."""
        ctx = await self.prepare(request)

        def result(text: str, **flags: bool) -> AssistanceResult:
            return AssistanceResult(
                title=ctx.problem.title,
                language=ctx.language,
                language_display=ctx.language_display,
                response=text,
                **flags,
            )

        cached = await self.cached_response(ctx)
        if cached is not None:
            return result(cached.response, from_cache=True)

        prompt = build_prompt(ctx.problem, ctx.language)
        try:
            async with aclosing(self.fragments(prompt)) as fragments:
                full_response = "".join([fragment async for fragment in fragments])
        except InferenceUnavailable as e:
            logger.warning("Ollama unavailable for question %d, sending fallback: %s", ctx.index, e.message)
            return result(await self.fallback(ctx), fallback=True)

        logger.info("Generation finished, total response length: %d", len(full_response))
        await self.finalize(ctx, full_response)
        return result(full_response)
