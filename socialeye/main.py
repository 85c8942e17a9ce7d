"""
Purpose:
- FastAPI application factory and router mounts.
- Adds CORS for local dev + future domain.
- Owns the shared httpx.AsyncClient used for Gemini calls (opened/closed in lifespan).
- Uvicorn will serve this on 0.0.0.0:8000 by default.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.logging import configure_logging
from .core.settings import settings
from .api.health import router as health_router
from .api.platforms import router as platforms_router
from .api.search import router as search_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=settings.gemini_timeout_seconds) as client:
        app.state.http_client = client
        yield

def create_app() -> FastAPI:
    configure_logging(settings.log_level, json_output=settings.log_json)
    app = FastAPI(title="SocialEye API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(platforms_router)
    app.include_router(search_router)
    return app

app = create_app()

def run() -> None:
    import uvicorn
    uvicorn.run("socialeye.main:app", host=settings.host, port=settings.port)
