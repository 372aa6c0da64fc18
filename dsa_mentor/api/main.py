"""FastAPI backend for DSA Mentor problem assistance."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse

from dsa_mentor.assistance import (
    AssistanceRequest,
    AssistanceResult,
    AssistanceService,
    OllamaClient,
    ResponseStore,
)
from dsa_mentor.catalog import ProblemCatalog
from dsa_mentor.config import Settings
from dsa_mentor.errors import AssistanceError
from dsa_mentor.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ResponseStore:
    return request.app.state.store


def get_assistance_service(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: ResponseStore = Depends(get_store),
) -> AssistanceService:
    """Build a request-scoped service from the app's shared resources."""
    inference = OllamaClient(
        request.app.state.http_client,
        url=settings.ollama_url,
        model=settings.ollama_model,
        timeout=settings.inference_timeout,
    )
    return AssistanceService(
        catalog=ProblemCatalog(settings.problem_candidates),
        store=store,
        inference=inference,
        language_policy=settings.language_policy,
        default_language=settings.default_language,
        relay_buffer_size=settings.relay_buffer_size,
    )


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the application. ``transport`` replaces the network for the Ollama client."""
    settings = settings or Settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the shared Ollama HTTP client for the app's lifetime."""
        async with httpx.AsyncClient(transport=transport, timeout=settings.inference_timeout) as client:
            app.state.http_client = client
            logger.info("Ollama endpoint: %s (model %s)", settings.ollama_url, settings.ollama_model)
            logger.info("Response storage path: %s", settings.storage_path)
            yield

    app = FastAPI(
        title="DSA Mentor API",
        description="Conceptual, code-free assistance for data structure and algorithm problems",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = ResponseStore(settings.storage_path, default_language=settings.default_language)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests to wildcard origins
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AssistanceError)
    async def assistance_error_handler(request: Request, exc: AssistanceError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.get("/api/explain-stream")
    async def explain_stream(
        index: int = Query(0, description="Question index in the catalog"),
        language: Optional[str] = Query(None, description="python, javascript, java, cpp or c"),
        refresh: bool = Query(False, description="Ignore the cached response"),
        service: AssistanceService = Depends(get_assistance_service),
    ) -> StreamingResponse:
        """Stream a conceptual explanation as Server-Sent Events."""
        request = AssistanceRequest(index=index, language=language, refresh=refresh)

        async def event_generator():
            async for event in service.stream(request):
                yield event.to_sse()

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",
            },
        )

    @app.get("/api/explain", response_model=AssistanceResult)
    async def explain(
        index: int = Query(0, description="Question index in the catalog"),
        language: Optional[str] = Query(None, description="python, javascript, java, cpp or c"),
        refresh: bool = Query(False, description="Ignore the cached response"),
        service: AssistanceService = Depends(get_assistance_service),
    ) -> AssistanceResult:
        """Return the full explanation in one response."""
        return await service.generate(
            AssistanceRequest(index=index, language=language, refresh=refresh)
        )

    @app.delete("/api/clear-cache")
    async def clear_cache(store: ResponseStore = Depends(get_store)) -> JSONResponse:
        """Reset the stored response to the empty record."""
        if not store.clear():
            return JSONResponse({"message": "No cache file found"}, status_code=404)
        return JSONResponse({"message": "Response cache cleared successfully"})

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
