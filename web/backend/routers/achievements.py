#!/usr/bin/env python3
"""
Achievement endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_app_context, unit_of_work, scoring_engine
from ..models.requests import AchievementCreate
from ..models.responses import AchievementOut

router = APIRouter(prefix="/api/achievements", tags=["achievements"])


@router.get("/user/{user_id}", response_model=List[AchievementOut])
def list_user_achievements(user_id: int, context: AppContext = Depends(get_app_context)):
    with unit_of_work(context) as store:
        return [AchievementOut.model_validate(a) for a in store.achievements.list_for_user(user_id)]


@router.post("", response_model=AchievementOut, status_code=201)
def grant_achievement(
    payload: AchievementCreate,
    context: AppContext = Depends(get_app_context)
):
    """Record an achievement and credit its points to the user."""
    with unit_of_work(context) as store:
        achievement = scoring_engine(store, context).grant_achievement(
            user_id=payload.user_id,
            type=payload.type,
            title=payload.title,
            description=payload.description,
            points=payload.points
        )
        return AchievementOut.model_validate(achievement)
