#!/usr/bin/env python3
"""
Leaderboard endpoints - top endorsers and top point earners.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from ..dependencies import get_app_context, unit_of_work, ranking_service
from ..models.responses import EndorserStandingOut, UserOut

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


def _effective_limit(limit: Optional[int], context: AppContext) -> int:
    return limit if limit is not None else context.config.ranking.leaderboard_limit


@router.get("/endorsers", response_model=List[EndorserStandingOut])
def get_top_endorsers(
    limit: Optional[int] = Query(default=None, ge=0, description="Maximum entries (default from config)"),
    context: AppContext = Depends(get_app_context)
):
    """
    Users ordered by endorsements given, highest first.

    Ties rank the lower user id first.
    """
    with unit_of_work(context) as store:
        standings = ranking_service(store).top_endorsers(_effective_limit(limit, context))
        return [
            EndorserStandingOut(
                **UserOut.model_validate(s.user).model_dump(),
                endorsement_count=s.endorsement_count
            )
            for s in standings
        ]


@router.get("/points", response_model=List[UserOut])
def get_top_by_points(
    limit: Optional[int] = Query(default=None, ge=0, description="Maximum entries (default from config)"),
    context: AppContext = Depends(get_app_context)
):
    """Users ordered by points, highest first; ties rank the lower user id first."""
    with unit_of_work(context) as store:
        users = ranking_service(store).top_by_points(_effective_limit(limit, context))
        return [UserOut.model_validate(u) for u in users]
