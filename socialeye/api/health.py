# Common language: Environment/ops probe that surfaces library versions, config and key presence.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter, Depends
import sys, importlib

from ..core.settings import Settings
from ..search.platforms import PLATFORMS
from .deps import get_settings

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

@router.get("/healthz")
def healthz(cfg: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "httpx": _ver("httpx"),
            "structlog": _ver("structlog"),
        },
        "config": {
            "gemini_model": cfg.gemini_model,
            "platforms": len(PLATFORMS),
        },
        "env_keys_present": {
            "GOOGLE_API_KEY": cfg.ai_expansion_available,
        },
    }
