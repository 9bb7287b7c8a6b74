"""
FastAPI application for comment analysis and topic suggestion.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_services
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build collaborators on startup; drop them on shutdown."""
    app.state.services = build_services()
    yield
    app.state.services = None


app = FastAPI(
    title="commentscope API",
    description="Comment sentiment, topic suggestions and video script generation",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
