#!/usr/bin/env python3
"""
Sociogram API - HTTP API layer for classroom peer-relationship analysis.

This is the FastAPI application that serves the survey dashboard. It exposes:
- Survey question definitions
- Classroom social graph analysis with risk alerts
- Narrative report generation
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sociogram.logging_config import configure_logging, get_logger

from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Sociogram API", description="Classroom peer-relationship risk analysis API")

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import social_graph

    app.include_router(social_graph.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "sociogram-api"}

    return app


# Create app instance for uvicorn
app = create_app()
