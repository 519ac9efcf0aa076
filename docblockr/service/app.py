"""FastAPI application exposing docblock rendering to editor extensions."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import DocBlockrConfig
from ..languages import UnknownLanguageError, available_languages
from ..parser import DocBlockParser


class RenderRequest(BaseModel):
    line: str
    language: str = "javascript"
    column_spacing: Optional[int] = None
    default_return_tag: Optional[bool] = None


class RenderResponse(BaseModel):
    block: str
    name: str
    kind: str


class LanguagesResponse(BaseModel):
    languages: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_config() -> DocBlockrConfig:
    return DocBlockrConfig()


def create_app(
    config_factory: Callable[[], DocBlockrConfig] = _default_config,
) -> FastAPI:
    """Create the FastAPI application exposing docblockr operations."""

    app = FastAPI(title="Docblockr Service", version="1.0.0")

    async def get_config() -> DocBlockrConfig:
        return config_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/languages", response_model=LanguagesResponse)
    async def languages() -> LanguagesResponse:
        return LanguagesResponse(languages=available_languages())

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        config: DocBlockrConfig = Depends(get_config),
    ) -> RenderResponse:
        if payload.column_spacing is not None:
            config = replace(config, column_spacing=payload.column_spacing)
        if payload.default_return_tag is not None:
            config = replace(config, default_return_tag=payload.default_return_tag)

        parser = DocBlockParser(payload.language, config=config)
        description = parser.tokenize(payload.line)
        return RenderResponse(
            block=parser.render_line(payload.line),
            name=description.name,
            kind=description.kind or "unknown",
        )

    @app.exception_handler(UnknownLanguageError)
    async def unknown_language_handler(
        _: Any, exc: UnknownLanguageError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
