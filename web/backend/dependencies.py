#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import ContextManager

from fastapi import Request

from core.app_context import AppContext
from core.ranking import RankingService
from core.scoring import ScoringEngine
from database.repository import EntityStore
from database.uow import store_uow


async def get_app_context(request: Request) -> AppContext:
    return request.app.state.context


def unit_of_work(context: AppContext) -> ContextManager[EntityStore]:
    """
    Open one unit of work inside a route handler.

    The scope is entered and left within the handler call itself, so the
    commit (or rollback) finishes before the response is built and a
    failed commit surfaces as a 500.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(context: AppContext = Depends(get_app_context)):
            with unit_of_work(context) as store:
                engine = scoring_engine(store, context)
                ...
    """
    return store_uow(context.db_manager)


def scoring_engine(store: EntityStore, context: AppContext) -> ScoringEngine:
    return ScoringEngine(store, context.config.scoring)


def ranking_service(store: EntityStore) -> RankingService:
    return RankingService(store)
