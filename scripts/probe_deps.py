"""
Purpose:
- Sanity-check critical library versions after upgrades.
- Import the exact modules we use and print versions so we can spot drift immediately.
"""

import sys
import fastapi
import httpx
import pydantic
import structlog
import uvicorn
from pydantic_settings import BaseSettings

print("python", sys.version)
print("fastapi", fastapi.__version__)
print("uvicorn", uvicorn.__version__)
print("pydantic", pydantic.VERSION)
print("pydantic-settings", BaseSettings.__module__.split(".")[0])  # presence check
print("httpx", httpx.__version__)
print("structlog", structlog.__version__)
# the catalog renders without any network access
from socialeye.search.links import generate_links
from socialeye.search.platforms import PLATFORMS
print("links", sum(len(r.links) for r in generate_links("john doe", PLATFORMS)))
print("OK")
