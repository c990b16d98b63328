"""
PhotoShare Backend: Root Status Route
======================================

What:  GET / returns a plain-text status line naming the exported directory.
Who:   Humans and scripts checking that the web server is up. It does not
       touch the database; /test does that.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Status"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Web server status",
)
async def status(request: Request) -> str:
    static_root = Path(request.app.state.settings.static_root).resolve()
    return f"Simple web server of files from {static_root}"
