"""
Documentation page router.

Serves the bundled HTML description of the API. The file is read once when
the router is created.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

DEFAULT_DOCS_PATH = Path(__file__).parent / "static" / "api-documentation.html"


def create_docs_router(docs_path: Optional[Path] = None) -> APIRouter:
    """
    Create documentation router.

    Args:
        docs_path: HTML file to serve (defaults to the bundled page)

    Returns:
        FastAPI router serving ``/`` and ``/api-documentation``
    """
    router = APIRouter(tags=["docs"])
    html = (docs_path or DEFAULT_DOCS_PATH).read_text(encoding="utf-8")

    @router.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """API documentation page (default route)."""
        return HTMLResponse(html)

    @router.get("/api-documentation", response_class=HTMLResponse)
    async def api_documentation() -> HTMLResponse:
        """API documentation page."""
        return HTMLResponse(html)

    return router
