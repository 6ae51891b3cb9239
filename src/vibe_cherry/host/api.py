"""FastAPI app for the local generation host.

- /health: liveness check
- /v1/initialize: readiness probe
- /v1/generate, /v1/generate/healing: one generation attempt each
- /v1/stop: terminate in-flight inference
- /v1/events: Server-Sent Events stream of vibe-token events
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, StreamingResponse

from vibe_cherry.common.models import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    HealingRequest,
    InitializeResponse,
    StopResponse,
    StreamEvent,
)
from vibe_cherry.core.app import App
from vibe_cherry.core.errors import NotInitializedError


def format_sse(event: StreamEvent) -> str:
    return f"event: {event.event}\ndata: {event.model_dump_json()}\n\n"


def create_app(core_app: Optional[App] = None) -> FastAPI:
    core = core_app or App()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        core.channel.close()

    app = FastAPI(title="Vibe Cherry Generation Host", version="0.1.0", lifespan=lifespan)
    app.state.core = core

    @app.exception_handler(NotInitializedError)
    async def not_initialized(request: Request, exc: NotInitializedError) -> JSONResponse:
        body = ErrorResponse(detail=str(exc), hint="POST /v1/initialize first")
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=body.model_dump())

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "ready": core.gate.is_ready}

    @app.post("/v1/initialize", response_model=InitializeResponse)
    async def initialize() -> InitializeResponse:
        message = await core.initialize()
        detail = core.readiness
        return InitializeResponse(
            message=message,
            availability=detail.availability.value,
            real_inference=detail.real_inference,
        )

    @app.post("/v1/generate", response_model=GenerateResponse)
    async def generate(payload: GenerateRequest) -> GenerateResponse:
        artifact = await core.generate(payload.text, payload.history)
        return GenerateResponse(artifact=artifact)

    @app.post("/v1/generate/healing", response_model=GenerateResponse)
    async def generate_with_healing(payload: HealingRequest) -> GenerateResponse:
        artifact = await core.generate_with_healing(
            payload.text, payload.is_fix_attempt, payload.attempt_number
        )
        return GenerateResponse(artifact=artifact)

    @app.post("/v1/stop", response_model=StopResponse)
    async def stop() -> StopResponse:
        return StopResponse(message=await core.stop_generation())

    @app.get("/v1/events")
    async def events() -> StreamingResponse:
        # Subscribe before streaming starts so nothing published after the
        # request arrives is missed.
        subscription = core.channel.subscribe()

        async def stream():
            with subscription:
                async for event in subscription:
                    yield format_sse(event)

        return StreamingResponse(stream(), media_type="text/event-stream")

    return app
