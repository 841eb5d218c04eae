"""FastAPI application exposing esbridge operations to editor tooling."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import EsBridgeConfig
from ..declarations import DeclarationCompiler, DeclarationSettings, map_type
from ..docdata.loader import class_from_dict
from ..modules import ModuleResolver
from ..scripting import ScriptTemplateRenderer


class HealthResponse(BaseModel):
    status: str


class ResolveRequest(BaseModel):
    specifier: str
    base_dir: str


class ResolveResponse(BaseModel):
    path: str


class TypeResponse(BaseModel):
    name: str
    type: str


class DeclarationRequest(BaseModel):
    classes: List[Dict[str, Any]] = Field(default_factory=list)
    namespace: Optional[str] = None


class DeclarationResponse(BaseModel):
    text: str
    class_count: int


class ScriptTemplateRequest(BaseModel):
    class_name: str
    base_class_name: str


class ScriptTemplateResponse(BaseModel):
    source: str


def _default_config() -> EsBridgeConfig | None:
    return None


def create_app(
    config_factory: Callable[[], EsBridgeConfig | None] = _default_config,
) -> FastAPI:
    """Create the FastAPI application exposing esbridge operations."""

    app = FastAPI(title="esbridge Service", version="1.0.0")
    resolver = ModuleResolver()

    async def get_config() -> EsBridgeConfig | None:
        return config_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/resolve", response_model=ResolveResponse)
    async def resolve(payload: ResolveRequest) -> ResolveResponse:
        return ResolveResponse(path=resolver.resolve_in(payload.specifier, payload.base_dir))

    @app.get("/types/{name}", response_model=TypeResponse)
    async def type_name(name: str) -> TypeResponse:
        return TypeResponse(name=name, type=map_type(name))

    @app.post("/declarations", response_model=DeclarationResponse)
    async def declarations(
        payload: DeclarationRequest,
        config: EsBridgeConfig | None = Depends(get_config),
    ) -> DeclarationResponse:
        settings = config.declarations.to_settings() if config else DeclarationSettings()
        if payload.namespace:
            settings = replace(settings, namespace=payload.namespace)
        classes = [class_from_dict(entry, source="request") for entry in payload.classes]
        compiler = DeclarationCompiler(settings)

        loop = asyncio.get_running_loop()
        text = await loop.run_in_executor(None, compiler.compile, classes)
        exported = sum(1 for class_doc in classes if compiler.should_export(class_doc))
        return DeclarationResponse(text=text, class_count=exported)

    @app.post("/script-template", response_model=ScriptTemplateResponse)
    async def script_template(
        payload: ScriptTemplateRequest,
        config: EsBridgeConfig | None = Depends(get_config),
    ) -> ScriptTemplateResponse:
        renderer = ScriptTemplateRenderer(
            config.scripts.templates_dir if config else None,
            object_namespace=config.scripts.object_namespace if config else None,
        )
        return ScriptTemplateResponse(
            source=renderer.render(payload.class_name, payload.base_class_name)
        )

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    config: EsBridgeConfig | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: config)
    uvicorn.run(app, host=host, port=port)
