"""FastAPI application serving the help table of contents."""

from __future__ import annotations

from fastapi import FastAPI

from server.models import HealthResponse
from server.routers import toc

app = FastAPI(title="tocnav", description="Searchable help table of contents")
app.include_router(toc.router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check."""
    return HealthResponse()
