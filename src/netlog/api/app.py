"""FastAPI app entrypoint."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from netlog.api.deps import ensure_schema, env_int, get_db_path
from netlog.api.routes.http_logs import router as http_logs_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    resolve_db_path = app.dependency_overrides.get(get_db_path, get_db_path)
    await ensure_schema(resolve_db_path())
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="netlog API", version="0.1.0", lifespan=lifespan)
    app.include_router(http_logs_router)

    @app.get("/api/v1/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    host = os.environ.get("NETLOG_HOST", "0.0.0.0")
    port = env_int("NETLOG_PORT", 8000)
    uvicorn.run("netlog.api.app:app", host=host, port=port, reload=False)
