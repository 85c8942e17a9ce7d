"""
Purpose:
- Expose the static platform catalog so clients can render the platform toggles
  (all_ids backs "select all").
"""

from fastapi import APIRouter

from ..search.links import platform_info
from ..search.platforms import ALL_PLATFORM_IDS, PLATFORMS
from ..search.schema import PlatformCatalog

router = APIRouter(prefix="/api/v1/platforms", tags=["platforms"])

@router.get("", response_model=PlatformCatalog)
def list_platforms():
    return PlatformCatalog(
        platforms=[platform_info(p) for p in PLATFORMS],
        all_ids=list(ALL_PLATFORM_IDS),
    )
