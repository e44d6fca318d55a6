"""Greeting page served at the site root."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Print hello world message")
async def hello(request: Request) -> str:
    """Hello World message with a link to the interactive API docs."""
    docs_url = request.app.docs_url or "/api-docs"
    return f'Hello World! See the <a href="{docs_url}">API documentation</a>.'
