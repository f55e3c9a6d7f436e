#!/usr/bin/env python3
"""
SkillBoard API - FastAPI Application

REST surface over the scoring engine and ranking service: skills,
endorsements, achievements and leaderboards.

Usage:
    uv run python main.py
    uv run uvicorn --factory web.backend.app:create_app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.app_context import AppContext
from core.config_loader import AppConfig, get_config
from .exceptions import register_exception_handlers
from .routers import (
    users_router,
    skills_router,
    endorsements_router,
    achievements_router,
    leaderboard_router
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.context.close()


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the application with its own store.

    Args:
        config: Configuration to use; loaded from config.yaml when omitted.

    Returns:
        Configured FastAPI app.
    """
    config = config or get_config()

    app = FastAPI(
        title="SkillBoard API",
        description="Employee skill tracking, peer endorsements and points leaderboards",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = AppContext.build(config)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(users_router)
    app.include_router(skills_router)
    app.include_router(endorsements_router)
    app.include_router(achievements_router)
    app.include_router(leaderboard_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "skillboard-api"}

    logger.info(f"SkillBoard API ready (database: {config.database.url})")
    return app
