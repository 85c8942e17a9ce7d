"""
Purpose:
- FastAPI dependencies shared by routers (settings + the AI expander).
- Tests swap these via app.dependency_overrides.
"""

from fastapi import Depends, Request

from ..core.settings import Settings, settings
from ..services.expansion import QueryExpander
from ..services.gemini import GeminiQueryExpander

def get_settings() -> Settings:
    return settings

def get_expander(request: Request, cfg: Settings = Depends(get_settings)) -> QueryExpander:
    # one shared AsyncClient, opened/closed by the app lifespan
    return GeminiQueryExpander(request.app.state.http_client, cfg)
