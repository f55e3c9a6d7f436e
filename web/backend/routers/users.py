#!/usr/bin/env python3
"""
User endpoints - profiles, registration and per-user stats.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from core.errors import NotFoundError
from ..dependencies import get_app_context, unit_of_work, scoring_engine, ranking_service
from ..models.requests import UserCreate
from ..models.responses import UserOut, UserStatsOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(context: AppContext = Depends(get_app_context)):
    """List every user, ordered by id."""
    with unit_of_work(context) as store:
        return [UserOut.model_validate(u) for u in store.users.list()]


@router.post("", response_model=UserOut, status_code=201)
def create_user(
    payload: UserCreate,
    context: AppContext = Depends(get_app_context)
):
    """Register a user with zero points. Username and email must be unique."""
    with unit_of_work(context) as store:
        user = scoring_engine(store, context).create_user(
            username=payload.username,
            email=payload.email,
            name=payload.name,
            role=payload.role
        )
        return UserOut.model_validate(user)


@router.get("/by-username/{username}", response_model=UserOut)
def get_user_by_username(username: str, context: AppContext = Depends(get_app_context)):
    with unit_of_work(context) as store:
        user = store.users.get_by_username(username)
        if user is None:
            raise NotFoundError("User", username)
        return UserOut.model_validate(user)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, context: AppContext = Depends(get_app_context)):
    with unit_of_work(context) as store:
        user = store.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return UserOut.model_validate(user)


@router.get("/{user_id}/stats", response_model=UserStatsOut)
def get_user_stats(
    user_id: int,
    context: AppContext = Depends(get_app_context)
):
    """
    Skill count, endorsements received, points, level and rank for one user.
    """
    with unit_of_work(context) as store:
        stats = ranking_service(store).user_stats(user_id)
    return UserStatsOut.model_validate(stats)
