"""FastAPI application entrypoint for repodoc service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..errors import (
    GenerationSuperseded,
    InvalidRepositoryURLError,
    RepoDocError,
    RepositoryNotFoundError,
)
from ..orchestrator import GenerationResult, Orchestrator


class GenerateRequest(BaseModel):
    url: str
    include_tree: bool = True
    include_summary: bool = True
    max_depth: Optional[int] = Field(default=None, ge=0)


class GenerateResponse(BaseModel):
    markdown: str
    owner: str
    repo: str
    project_type: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing README generation."""

    app = FastAPI(title="repodoc", version="0.1.0")

    async def get_orchestrator() -> Orchestrator:
        # Fresh orchestrator per request so concurrent clients don't supersede each other.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerateResponse:
        def _run() -> GenerationResult:
            return orchestrator.generate(
                payload.url,
                include_tree=payload.include_tree,
                include_summary=payload.include_summary,
                max_depth=payload.max_depth,
            )

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return GenerateResponse(
            markdown=result.markdown,
            owner=result.owner,
            repo=result.repo,
            project_type=result.project_type,
        )

    @app.exception_handler(InvalidRepositoryURLError)
    async def invalid_url_handler(_: Any, exc: InvalidRepositoryURLError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RepositoryNotFoundError)
    async def not_found_handler(_: Any, exc: RepositoryNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(GenerationSuperseded)
    async def superseded_handler(_: Any, exc: GenerationSuperseded) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(RepoDocError)
    async def repodoc_error_handler(_: Any, exc: RepoDocError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover
    uvicorn.run(create_app(), host=host, port=port)


__all__ = ["create_app", "run_service"]
